from __future__ import annotations

from enum import Enum
from typing import Any

from boxcars.domain.vehicle import (
    ListingFilters,
    ListingSort,
    Location,
    Paging,
    Vehicle,
    VehicleChanges,
    VehicleDraft,
)
from boxcars.entrypoints.http.dtos.common import ApiResponse
from boxcars.entrypoints.http.dtos.vehicles import (
    DealerDTO,
    ListingPaginationDTO,
    LocationDTO,
    VehicleCreateDTO,
    VehicleListDataDTO,
    VehicleResponseDTO,
    VehicleSearchQueryDTO,
    VehicleUpdateDTO,
)
from boxcars.use_cases.search_vehicle_listings import (
    SearchVehicleListingsRequest,
    SearchVehicleListingsResponse,
)


def _location_to_domain(dto: LocationDTO | None) -> Location | None:
    if dto is None:
        return None
    return Location(city=dto.city, state=dto.state, country=dto.country, zip_code=dto.zip_code)


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


class VehicleMapper:
    """Maps between REST DTOs and domain models for vehicles."""

    @staticmethod
    def to_domain_filters(dto: VehicleSearchQueryDTO) -> ListingFilters:
        return ListingFilters(
            make=dto.make,
            model=dto.model,
            year=dto.year,
            condition=dto.condition,
            fuel_type=dto.fuel_type,
            transmission=dto.transmission,
            body_type=dto.body_type,
            min_price=dto.min_price,
            max_price=dto.max_price,
        )

    @staticmethod
    def to_domain_request(dto: VehicleSearchQueryDTO) -> SearchVehicleListingsRequest:
        """
        Builds the complete listing request from the query DTO.

        Nothing is validated here; the use case reports every invalid
        parameter at once.
        """
        return SearchVehicleListingsRequest(
            filters=VehicleMapper.to_domain_filters(dto),
            paging=Paging(page=dto.page, limit=dto.limit),
            sort=ListingSort.from_query(dto.sort_by, dto.sort_order),
        )

    @staticmethod
    def to_draft(dto: VehicleCreateDTO) -> VehicleDraft:
        return VehicleDraft(
            make=dto.make,
            model=dto.model,
            year=dto.year,
            price=dto.price,
            mileage=dto.mileage,
            fuel_type=dto.fuel_type.value,
            transmission=dto.transmission.value,
            body_type=dto.body_type.value,
            engine=dto.engine,
            condition=dto.condition.value,
            image=dto.image,
            original_price=dto.original_price,
            color=dto.color,
            features=tuple(feature.strip() for feature in dto.features),
            badge=dto.badge.value if dto.badge else None,
            location=_location_to_domain(dto.location),
        )

    @staticmethod
    def to_changes(dto: VehicleUpdateDTO) -> VehicleChanges:
        """Only fields present in the request body become changes."""
        values: dict[str, Any] = {}
        for name in dto.model_fields_set:
            value = getattr(dto, name)
            if name == "location":
                value = _location_to_domain(value)
            elif name == "features" and value is not None:
                value = tuple(feature.strip() for feature in value)
            values[name] = _plain(value)
        return VehicleChanges(values=values)

    @staticmethod
    def to_vehicle_response(vehicle: Vehicle) -> VehicleResponseDTO:
        """
        Converts domain Vehicle to REST response DTO.

        Handles Decimal → str conversion at the boundary.
        """
        location = vehicle.location
        return VehicleResponseDTO(
            id=vehicle.id,
            make=vehicle.make,
            model=vehicle.model,
            year=vehicle.year,
            price=str(vehicle.price),
            original_price=str(vehicle.original_price) if vehicle.original_price is not None else None,
            mileage=vehicle.mileage,
            fuel_type=vehicle.fuel_type,
            transmission=vehicle.transmission,
            body_type=vehicle.body_type,
            engine=vehicle.engine,
            color=vehicle.color,
            image=vehicle.image,
            features=list(vehicle.features),
            condition=vehicle.condition,
            badge=vehicle.badge,
            location=(
                LocationDTO(
                    city=location.city,
                    state=location.state,
                    country=location.country,
                    zip_code=location.zip_code,
                )
                if location
                else None
            ),
            dealer=DealerDTO(
                id=vehicle.dealer.id,
                name=vehicle.dealer.name,
                email=vehicle.dealer.email,
                phone=vehicle.dealer.phone,
            ),
            status=vehicle.status,
            views=vehicle.views,
            is_active=vehicle.is_active,
            created_at=vehicle.created_at,
            updated_at=vehicle.updated_at,
        )

    @staticmethod
    def to_list_response(result: SearchVehicleListingsResponse) -> ApiResponse[VehicleListDataDTO]:
        page_info = result.page_info
        return ApiResponse[VehicleListDataDTO](
            data=VehicleListDataDTO(
                vehicles=[VehicleMapper.to_vehicle_response(v) for v in result.vehicles],
                pagination=ListingPaginationDTO(
                    current_page=page_info.current_page,
                    total_pages=page_info.total_pages,
                    total_vehicles=page_info.total,
                    has_next_page=page_info.has_next_page,
                    has_prev_page=page_info.has_prev_page,
                ),
            )
        )
