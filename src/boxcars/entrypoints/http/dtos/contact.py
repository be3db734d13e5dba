from __future__ import annotations

from datetime import datetime
from uuid import UUID

from fastapi import Query
from pydantic import EmailStr, Field

from boxcars.domain.contact import ContactStatus, InquiryType
from boxcars.domain.vehicle import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from boxcars.entrypoints.http.dtos.common import CamelModel


class ContactCreateDTO(CamelModel):
    """Public contact form."""

    name: str = Field(min_length=2, max_length=100, examples=["Jane Doe"])
    email: EmailStr = Field(examples=["jane@example.com"])
    phone: str | None = Field(default=None, pattern=r"^\+?[1-9]\d{0,15}$", examples=["+15551234567"])
    subject: str = Field(min_length=5, max_length=200, examples=["Is this still available?"])
    message: str = Field(min_length=10, examples=["I'd like to book a test drive this weekend."])
    inquiry_type: InquiryType = InquiryType.GENERAL
    vehicle_id: UUID = Field(examples=["550e8400-e29b-41d4-a716-446655440000"])


class ContactStatusUpdateDTO(CamelModel):
    status: ContactStatus


class VehicleSummaryDTO(CamelModel):
    id: str
    make: str
    model: str
    year: int


class ContactResponseDTO(CamelModel):
    id: str
    name: str
    email: str
    phone: str | None = None
    subject: str
    message: str
    inquiry_type: str
    vehicle_id: str | None = None
    vehicle: VehicleSummaryDTO | None = None
    dealer_id: str
    is_read: bool
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ContactDataDTO(CamelModel):
    contact: ContactResponseDTO


class ContactPaginationDTO(CamelModel):
    current_page: int
    total_pages: int
    total: int


class ContactListDataDTO(CamelModel):
    contacts: list[ContactResponseDTO]
    pagination: ContactPaginationDTO


class ContactQueryDTO(CamelModel):
    page: int = 1
    limit: int = DEFAULT_PAGE_LIMIT
    status: ContactStatus | None = None
    inquiry_type: InquiryType | None = None


def contact_query(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
    status: ContactStatus | None = Query(None),
    inquiry_type: InquiryType | None = Query(None, alias="inquiryType"),
) -> ContactQueryDTO:
    """FastAPI dependency collecting the inquiry list query into one DTO."""
    return ContactQueryDTO(page=page, limit=limit, status=status, inquiry_type=inquiry_type)
