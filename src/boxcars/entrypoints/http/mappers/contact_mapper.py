from __future__ import annotations

from boxcars.domain.contact import Contact, ContactDraft, ContactFilters
from boxcars.domain.vehicle import PageInfo
from boxcars.entrypoints.http.dtos.common import ApiResponse
from boxcars.entrypoints.http.dtos.contact import (
    ContactCreateDTO,
    ContactListDataDTO,
    ContactPaginationDTO,
    ContactQueryDTO,
    ContactResponseDTO,
    VehicleSummaryDTO,
)


class ContactMapper:
    """Maps between REST DTOs and domain models for inquiries."""

    @staticmethod
    def to_draft(dto: ContactCreateDTO) -> ContactDraft:
        return ContactDraft(
            name=dto.name,
            email=str(dto.email),
            subject=dto.subject,
            message=dto.message,
            vehicle_id=str(dto.vehicle_id),
            phone=dto.phone,
            inquiry_type=dto.inquiry_type.value,
        )

    @staticmethod
    def to_filters(dto: ContactQueryDTO) -> ContactFilters:
        return ContactFilters(
            status=dto.status.value if dto.status else None,
            inquiry_type=dto.inquiry_type.value if dto.inquiry_type else None,
        )

    @staticmethod
    def to_contact_response(contact: Contact) -> ContactResponseDTO:
        vehicle = contact.vehicle
        return ContactResponseDTO(
            id=contact.id,
            name=contact.name,
            email=contact.email,
            phone=contact.phone,
            subject=contact.subject,
            message=contact.message,
            inquiry_type=contact.inquiry_type,
            vehicle_id=contact.vehicle_id,
            vehicle=(
                VehicleSummaryDTO(id=vehicle.id, make=vehicle.make, model=vehicle.model, year=vehicle.year)
                if vehicle
                else None
            ),
            dealer_id=contact.dealer_id,
            is_read=contact.is_read,
            status=contact.status,
            created_at=contact.created_at,
            updated_at=contact.updated_at,
        )

    @staticmethod
    def to_list_response(contacts: list[Contact], page_info: PageInfo) -> ApiResponse[ContactListDataDTO]:
        return ApiResponse[ContactListDataDTO](
            data=ContactListDataDTO(
                contacts=[ContactMapper.to_contact_response(c) for c in contacts],
                pagination=ContactPaginationDTO(
                    current_page=page_info.current_page,
                    total_pages=page_info.total_pages,
                    total=page_info.total,
                ),
            )
        )
