from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from fastapi import Query
from pydantic import Field, field_validator

from boxcars.domain.vehicle import (
    DEFAULT_PAGE_LIMIT,
    MAX_MILEAGE,
    MAX_PAGE_LIMIT,
    MIN_YEAR,
    Badge,
    BodyType,
    Condition,
    FuelType,
    SortField,
    Transmission,
    VehicleStatus,
    max_year,
)
from boxcars.entrypoints.http.dtos.common import CamelModel

SORT_BY_CHOICES = ", ".join(member.value for member in SortField)


class LocationDTO(CamelModel):
    city: str | None = None
    state: str | None = None
    country: str | None = None
    zip_code: str | None = None


class DealerDTO(CamelModel):
    id: str
    name: str
    email: str
    phone: str | None = None


class VehicleResponseDTO(CamelModel):
    id: str
    make: str
    model: str
    year: int
    price: str
    original_price: str | None = None
    mileage: int
    fuel_type: str
    transmission: str
    body_type: str
    engine: str
    color: str | None = None
    image: str
    features: list[str] = Field(default_factory=list)
    condition: str
    badge: str | None = None
    location: LocationDTO | None = None
    dealer: DealerDTO
    status: str
    views: int
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ListingPaginationDTO(CamelModel):
    current_page: int
    total_pages: int
    total_vehicles: int
    has_next_page: bool
    has_prev_page: bool


class VehicleListDataDTO(CamelModel):
    vehicles: list[VehicleResponseDTO]
    pagination: ListingPaginationDTO


class VehicleDataDTO(CamelModel):
    vehicle: VehicleResponseDTO


class VehicleCreateDTO(CamelModel):
    """Request body for publishing a listing."""

    make: str = Field(min_length=1, max_length=50, examples=["Toyota"])
    model: str = Field(min_length=1, max_length=50, examples=["Corolla"])
    year: int = Field(ge=MIN_YEAR, examples=[date.today().year])
    price: Decimal = Field(ge=0, max_digits=12, decimal_places=2, examples=["25000.00"])
    original_price: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    mileage: int = Field(ge=0, le=MAX_MILEAGE, examples=[42000])
    fuel_type: FuelType
    transmission: Transmission
    body_type: BodyType
    engine: str = Field(min_length=1, max_length=100, examples=["1.8L 4-cylinder"])
    color: str | None = Field(default=None, max_length=30)
    image: str = Field(min_length=1, examples=["https://cdn.example.com/corolla.jpg"])
    features: list[str] = Field(default_factory=list)
    condition: Condition
    badge: Badge | None = None
    location: LocationDTO | None = None

    @field_validator("year")
    @classmethod
    def year_not_in_future(cls, value: int) -> int:
        if value > max_year():
            raise ValueError(f"Year cannot be later than {max_year()}")
        return value

    @field_validator("make", "model", "engine", "image")
    @classmethod
    def strip_required_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Must not be blank")
        return value.strip()


class VehicleUpdateDTO(CamelModel):
    """Partial update: omitted fields are left untouched."""

    make: str | None = Field(default=None, min_length=1, max_length=50)
    model: str | None = Field(default=None, min_length=1, max_length=50)
    year: int | None = Field(default=None, ge=MIN_YEAR)
    price: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    original_price: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    mileage: int | None = Field(default=None, ge=0, le=MAX_MILEAGE)
    fuel_type: FuelType | None = None
    transmission: Transmission | None = None
    body_type: BodyType | None = None
    engine: str | None = Field(default=None, min_length=1, max_length=100)
    color: str | None = Field(default=None, max_length=30)
    image: str | None = Field(default=None, min_length=1)
    features: list[str] | None = None
    condition: Condition | None = None
    badge: Badge | None = None
    location: LocationDTO | None = None
    status: VehicleStatus | None = None
    is_active: bool | None = None

    @field_validator("year")
    @classmethod
    def year_not_in_future(cls, value: int | None) -> int | None:
        if value is not None and value > max_year():
            raise ValueError(f"Year cannot be later than {max_year()}")
        return value

    @field_validator("make", "model", "engine", "image")
    @classmethod
    def strip_required_text(cls, value: str | None) -> str | None:
        if value is None:
            return None
        if not value.strip():
            raise ValueError("Must not be blank")
        return value.strip()


class VehicleSearchQueryDTO(CamelModel):
    """Query parameters for the public listing."""

    page: int = 1
    limit: int = DEFAULT_PAGE_LIMIT
    make: str | None = None
    model: str | None = None
    year: int | None = None
    condition: str | None = None
    fuel_type: str | None = None
    transmission: str | None = None
    body_type: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    sort_by: str | None = None
    sort_order: str | None = None


def vehicle_search_query(
    page: int = Query(1, description="Page number (1-based)"),
    limit: int = Query(DEFAULT_PAGE_LIMIT, description=f"Vehicles per page (1 to {MAX_PAGE_LIMIT})"),
    make: str | None = Query(None, description="Case-insensitive substring", examples=["toyo"]),
    model: str | None = Query(None, description="Case-insensitive substring"),
    year: int | None = Query(None, description="Exact model year"),
    condition: str | None = Query(None, description="Exact match, unknown values match nothing"),
    fuel_type: str | None = Query(None, alias="fuelType"),
    transmission: str | None = Query(None),
    body_type: str | None = Query(None, alias="bodyType"),
    min_price: Decimal | None = Query(None, alias="minPrice", description="Inclusive, non-negative"),
    max_price: Decimal | None = Query(None, alias="maxPrice", description="Inclusive, non-negative"),
    sort_by: str | None = Query(None, alias="sortBy", description=f"One of: {SORT_BY_CHOICES}"),
    sort_order: str | None = Query(None, alias="sortOrder", description="asc or desc"),
) -> VehicleSearchQueryDTO:
    """
    FastAPI dependency collecting the listing query into one DTO.

    Only types are checked here. Ranges, the price order and the sort choices
    are checked together by the listing use case so every error is reported.
    """
    return VehicleSearchQueryDTO(
        page=page,
        limit=limit,
        make=make,
        model=model,
        year=year,
        condition=condition,
        fuel_type=fuel_type,
        transmission=transmission,
        body_type=body_type,
        min_price=min_price,
        max_price=max_price,
        sort_by=sort_by,
        sort_order=sort_order,
    )
