from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, Union

from boxcars.domain.errors import ValidationError


# ==============================================================================
# Enumerations
# ==============================================================================


class FuelType(str, Enum):
    PETROL = "Petrol"
    DIESEL = "Diesel"
    HYBRID = "Hybrid"
    ELECTRIC = "Electric"
    CNG = "CNG"
    LPG = "LPG"


class Transmission(str, Enum):
    MANUAL = "Manual"
    AUTOMATIC = "Automatic"
    CVT = "CVT"
    SEMI_AUTOMATIC = "Semi-Automatic"


class BodyType(str, Enum):
    SUV = "SUV"
    SEDAN = "Sedan"
    HATCHBACK = "Hatchback"
    COUPE = "Coupe"
    CONVERTIBLE = "Convertible"
    TRUCK = "Truck"
    VAN = "Van"
    WAGON = "Wagon"


class Condition(str, Enum):
    NEW = "New"
    USED = "Used"
    CERTIFIED_PRE_OWNED = "Certified Pre-Owned"


class VehicleStatus(str, Enum):
    AVAILABLE = "available"
    SOLD = "sold"
    RESERVED = "reserved"
    PENDING = "pending"


class Badge(str, Enum):
    GREAT_PRICE = "Great Price"
    LOW_MILEAGE = "Low Mileage"
    SALE = "Sale"
    FEATURED = "Featured"
    HOT_DEAL = "Hot Deal"


MIN_YEAR = 1900
# Stored in a 32-bit integer column
MAX_MILEAGE = 2_147_483_647
DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 50


def max_year(today: date | None = None) -> int:
    """Latest model year accepted for a listing (next year's models are allowed)."""
    return (today or date.today()).year + 1


# ==============================================================================
# Entities
# ==============================================================================


@dataclass(frozen=True, slots=True)
class DealerSummary:
    id: str
    name: str
    email: str
    phone: str | None = None


@dataclass(frozen=True, slots=True)
class Location:
    city: str | None = None
    state: str | None = None
    country: str | None = None
    zip_code: str | None = None


@dataclass(frozen=True)
class Vehicle:
    id: str
    make: str
    model: str
    year: int
    price: Decimal
    mileage: int
    fuel_type: str
    transmission: str
    body_type: str
    engine: str
    condition: str
    image: str
    dealer: DealerSummary
    original_price: Decimal | None = None
    color: str | None = None
    features: tuple[str, ...] = ()
    badge: str | None = None
    location: Location | None = None
    status: str = VehicleStatus.AVAILABLE.value
    views: int = 0
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_listed(self) -> bool:
        """Eligible for the public listing."""
        return self.is_active and self.status == VehicleStatus.AVAILABLE.value


# ==============================================================================
# Field validation shared by create and update
# ==============================================================================

_REQUIRED_TEXT = ("make", "model", "engine", "image")
_REQUIRED_VALUES = (
    "price",
    "mileage",
    "fuel_type",
    "transmission",
    "body_type",
    "condition",
    "status",
    "features",
    "is_active",
)
_NON_NEGATIVE = ("price", "original_price", "mileage")
_ENUM_FIELDS: dict[str, type[Enum]] = {
    "fuel_type": FuelType,
    "transmission": Transmission,
    "body_type": BodyType,
    "condition": Condition,
    "status": VehicleStatus,
    "badge": Badge,
}


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def validate_vehicle_fields(values: Mapping[str, Any]) -> list[dict[str, str]]:
    """
    Check every present field against the vehicle constraints.

    Only keys present in ``values`` are checked, so the same rules serve full
    drafts and partial updates. All failures are returned, none short-circuit.

    Args:
        values: Mapping of domain attribute name to candidate value

    Returns:
        List of field errors (empty when valid)
    """
    errors: list[dict[str, str]] = []

    for name in _REQUIRED_VALUES:
        if name in values and values[name] is None:
            errors.append({"field": name, "message": f"{name} is required", "code": "REQUIRED"})

    for name in _REQUIRED_TEXT:
        if name in values and not (values[name] or "").strip():
            errors.append({"field": name, "message": f"{name} is required", "code": "REQUIRED"})

    if "year" in values:
        year = values["year"]
        if year is None or not MIN_YEAR <= year <= max_year():
            errors.append(
                {
                    "field": "year",
                    "message": f"Year must be between {MIN_YEAR} and {max_year()}",
                    "code": "OUT_OF_RANGE",
                }
            )

    for name in _NON_NEGATIVE:
        if name not in values or values[name] is None:
            continue
        if values[name] < 0:
            errors.append({"field": name, "message": f"{name} must be >= 0", "code": "OUT_OF_RANGE"})

    if values.get("mileage") is not None and values["mileage"] > MAX_MILEAGE:
        errors.append(
            {"field": "mileage", "message": f"mileage must be <= {MAX_MILEAGE}", "code": "OUT_OF_RANGE"}
        )

    for name, enum_cls in _ENUM_FIELDS.items():
        if name not in values or values[name] is None:
            continue
        allowed = [member.value for member in enum_cls]
        if _enum_value(values[name]) not in allowed:
            errors.append(
                {
                    "field": name,
                    "message": f"Must be one of: {', '.join(allowed)}",
                    "code": "INVALID_CHOICE",
                }
            )

    return errors


@dataclass(frozen=True)
class VehicleDraft:
    """Fields submitted when a dealer creates a listing."""

    make: str
    model: str
    year: int
    price: Decimal
    mileage: int
    fuel_type: str
    transmission: str
    body_type: str
    engine: str
    condition: str
    image: str
    original_price: Decimal | None = None
    color: str | None = None
    features: tuple[str, ...] = ()
    badge: str | None = None
    location: Location | None = None

    def validate(self) -> None:
        """
        Raises:
            ValidationError: With every failing field
        """
        values = {name: getattr(self, name) for name in self.__dataclass_fields__}
        errors = validate_vehicle_fields(values)
        if errors:
            raise ValidationError(errors=errors)


# Attributes a PUT may change; everything else (id, dealer, views, timestamps) is fixed.
UPDATABLE_FIELDS = frozenset(
    {
        "make",
        "model",
        "year",
        "price",
        "original_price",
        "mileage",
        "fuel_type",
        "transmission",
        "body_type",
        "engine",
        "color",
        "image",
        "features",
        "condition",
        "badge",
        "location",
        "status",
        "is_active",
    }
)


@dataclass(frozen=True)
class VehicleChanges:
    """Partial update: only the attributes present in ``values`` change."""

    values: Mapping[str, Any] = field(default_factory=dict)

    def validate(self) -> None:
        errors = [
            {"field": name, "message": "Field cannot be updated", "code": "IMMUTABLE"}
            for name in sorted(set(self.values) - UPDATABLE_FIELDS)
        ]
        errors.extend(validate_vehicle_fields(self.values))
        if errors:
            raise ValidationError(errors=errors)


# ==============================================================================
# Listing query: typed criteria, sort and paging
# ==============================================================================


class FilterField(str, Enum):
    """Closed set of fields the listing query may constrain."""

    MAKE = "make"
    MODEL = "model"
    YEAR = "year"
    PRICE = "price"
    CONDITION = "condition"
    FUEL_TYPE = "fuel_type"
    TRANSMISSION = "transmission"
    BODY_TYPE = "body_type"
    STATUS = "status"
    IS_ACTIVE = "is_active"


@dataclass(frozen=True, slots=True)
class Equals:
    field: FilterField
    value: Any


@dataclass(frozen=True, slots=True)
class Contains:
    """Case-insensitive literal substring match."""

    field: FilterField
    text: str


@dataclass(frozen=True, slots=True)
class Range:
    """Inclusive bounds; either side may be open."""

    field: FilterField
    gte: Decimal | None = None
    lte: Decimal | None = None


Criterion = Union[Equals, Contains, Range]

# Always applied to the public listing, ahead of caller-supplied criteria.
VISIBILITY_GATE: tuple[Criterion, ...] = (
    Equals(FilterField.IS_ACTIVE, True),
    Equals(FilterField.STATUS, VehicleStatus.AVAILABLE.value),
)


@dataclass(frozen=True, slots=True)
class ListingFilters:
    make: str | None = None
    model: str | None = None
    year: int | None = None
    condition: str | None = None
    fuel_type: str | None = None
    transmission: str | None = None
    body_type: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None

    def validate(self) -> None:
        """
        Validate filter parameters.

        Enumerated fields are not checked here: an unknown value simply
        matches nothing.

        Raises:
            ValidationError: If price bounds are negative or inverted
        """
        errors: list[dict[str, str]] = []

        for name, public in (("min_price", "minPrice"), ("max_price", "maxPrice")):
            value = getattr(self, name)
            if value is None:
                continue
            if not isinstance(value, Decimal):
                errors.append(
                    {"field": public, "message": "Must be a Decimal", "code": "INVALID_DECIMAL"}
                )
            elif value < 0:
                errors.append({"field": public, "message": "Must be >= 0", "code": "OUT_OF_RANGE"})

        if (
            not errors
            and self.min_price is not None
            and self.max_price is not None
            and self.min_price > self.max_price
        ):
            errors.append(
                {
                    "field": "minPrice",
                    "message": "Must be less than or equal to maxPrice",
                    "code": "INVALID_RANGE",
                }
            )

        if errors:
            raise ValidationError(errors=errors)

    def criteria(self) -> tuple[Criterion, ...]:
        """Translate the filters into the closed criterion list, gate first."""
        result: list[Criterion] = list(VISIBILITY_GATE)

        if self.make:
            result.append(Contains(FilterField.MAKE, self.make))
        if self.model:
            result.append(Contains(FilterField.MODEL, self.model))
        if self.year is not None:
            result.append(Equals(FilterField.YEAR, self.year))

        for name, filter_field in (
            ("condition", FilterField.CONDITION),
            ("fuel_type", FilterField.FUEL_TYPE),
            ("transmission", FilterField.TRANSMISSION),
            ("body_type", FilterField.BODY_TYPE),
        ):
            value = getattr(self, name)
            if value:
                result.append(Equals(filter_field, value))

        if self.min_price is not None or self.max_price is not None:
            result.append(Range(FilterField.PRICE, gte=self.min_price, lte=self.max_price))

        return tuple(result)


class SortField(str, Enum):
    """Fields a listing may be ordered by. Values are the public query names."""

    PRICE = "price"
    YEAR = "year"
    MILEAGE = "mileage"
    MAKE = "make"
    MODEL = "model"
    VIEWS = "views"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True, slots=True)
class ListingSort:
    """
    Listing order.

    Equal keys keep the store's natural order, so pages of a non-unique sort
    may shift between requests when the data changes.
    """

    field: SortField | str = SortField.CREATED_AT
    order: SortOrder | str = SortOrder.DESC

    @classmethod
    def from_query(cls, sort_by: str | None, sort_order: str | None) -> ListingSort:
        """
        Build the sort from raw query values.

        Without ``sort_by`` the listing is newest first. With it, the order
        defaults to ascending. Unknown values are kept as given so validate()
        can report them alongside the other listing errors.
        """
        if not sort_by:
            return cls()

        return cls(
            field=_known(SortField, sort_by),
            order=_known(SortOrder, sort_order or SortOrder.ASC.value),
        )

    def validate(self) -> None:
        """
        Raises:
            ValidationError: If the field or order is outside the known set
        """
        errors: list[dict[str, str]] = []
        if not isinstance(self.field, SortField):
            allowed_fields = [member.value for member in SortField]
            errors.append(
                {
                    "field": "sortBy",
                    "message": f"Must be one of: {', '.join(allowed_fields)}",
                    "code": "INVALID_CHOICE",
                }
            )
        if not isinstance(self.order, SortOrder):
            errors.append(
                {"field": "sortOrder", "message": "Must be one of: asc, desc", "code": "INVALID_CHOICE"}
            )
        if errors:
            raise ValidationError(errors=errors)


def _known(enum_cls: type[Enum], value: str) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        return value


@dataclass(frozen=True, slots=True)
class Paging:
    page: int = 1
    limit: int = DEFAULT_PAGE_LIMIT

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            ValidationError: If page or limit is out of range
        """
        errors: list[dict[str, str]] = []
        if self.page < 1:
            errors.append({"field": "page", "message": "Page must be a positive integer", "code": "OUT_OF_RANGE"})
        if not 1 <= self.limit <= MAX_PAGE_LIMIT:
            errors.append(
                {
                    "field": "limit",
                    "message": f"Limit must be between 1 and {MAX_PAGE_LIMIT}",
                    "code": "OUT_OF_RANGE",
                }
            )
        if errors:
            raise ValidationError(errors=errors)


@dataclass(frozen=True, slots=True)
class PageInfo:
    current_page: int
    total_pages: int
    total: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def build(cls, paging: Paging, total: int) -> PageInfo:
        total_pages = math.ceil(total / paging.limit)
        return cls(
            current_page=paging.page,
            total_pages=total_pages,
            total=total,
            has_next_page=paging.page < total_pages,
            has_prev_page=paging.page > 1,
        )
