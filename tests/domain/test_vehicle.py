"""Tests for the vehicle entity and the listing query value objects."""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from boxcars.domain.errors import ValidationError
from boxcars.domain.vehicle import (
    MAX_MILEAGE,
    MAX_PAGE_LIMIT,
    VISIBILITY_GATE,
    Contains,
    Equals,
    FilterField,
    ListingFilters,
    ListingSort,
    PageInfo,
    Paging,
    Range,
    SortField,
    SortOrder,
    VehicleChanges,
    VehicleDraft,
    max_year,
    validate_vehicle_fields,
)


# ==============================================================================
# Field validation
# ==============================================================================


def test_max_year_is_next_year() -> None:
    assert max_year(date(2026, 6, 1)) == 2027


def test_valid_draft_passes(vehicle_draft: VehicleDraft) -> None:
    vehicle_draft.validate()


@pytest.mark.parametrize("year", [1899, date.today().year + 2])
def test_year_outside_bounds_is_rejected(vehicle_draft: VehicleDraft, year: int) -> None:
    with pytest.raises(ValidationError) as exc_info:
        replace(vehicle_draft, year=year).validate()

    assert exc_info.value.errors == [
        {
            "field": "year",
            "message": f"Year must be between 1900 and {max_year()}",
            "code": "OUT_OF_RANGE",
        }
    ]


@pytest.mark.parametrize("year", [1900, date.today().year + 1])
def test_year_bounds_are_inclusive(vehicle_draft: VehicleDraft, year: int) -> None:
    replace(vehicle_draft, year=year).validate()


def test_draft_collects_every_error(vehicle_draft: VehicleDraft) -> None:
    draft = replace(
        vehicle_draft,
        make="  ",
        price=Decimal("-1"),
        mileage=-5,
        fuel_type="Steam",
        badge="Bargain",
    )

    with pytest.raises(ValidationError) as exc_info:
        draft.validate()

    fields = [error["field"] for error in exc_info.value.errors]
    assert fields == ["make", "price", "mileage", "fuel_type", "badge"]


def test_partial_values_only_check_present_keys() -> None:
    assert validate_vehicle_fields({"price": Decimal("10.00")}) == []


def test_required_values_cannot_be_cleared() -> None:
    errors = validate_vehicle_fields({"price": None, "condition": None})

    assert [e["code"] for e in errors] == ["REQUIRED", "REQUIRED"]


def test_optional_values_can_be_cleared() -> None:
    assert validate_vehicle_fields({"badge": None, "original_price": None, "color": None}) == []


def test_mileage_fits_the_stored_integer() -> None:
    assert validate_vehicle_fields({"mileage": MAX_MILEAGE}) == []

    errors = validate_vehicle_fields({"mileage": MAX_MILEAGE + 1})

    assert errors == [
        {"field": "mileage", "message": f"mileage must be <= {MAX_MILEAGE}", "code": "OUT_OF_RANGE"}
    ]


class TestVehicleChanges:
    def test_accepts_listing_status_and_visibility(self) -> None:
        VehicleChanges(values={"status": "sold", "is_active": False}).validate()

    def test_rejects_immutable_fields(self) -> None:
        changes = VehicleChanges(values={"views": 99, "dealer": "x", "price": Decimal("1.00")})

        with pytest.raises(ValidationError) as exc_info:
            changes.validate()

        assert exc_info.value.errors == [
            {"field": "dealer", "message": "Field cannot be updated", "code": "IMMUTABLE"},
            {"field": "views", "message": "Field cannot be updated", "code": "IMMUTABLE"},
        ]

    def test_rejects_unknown_status(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            VehicleChanges(values={"status": "archived"}).validate()

        assert exc_info.value.errors[0]["field"] == "status"
        assert exc_info.value.errors[0]["code"] == "INVALID_CHOICE"


def test_is_listed_requires_active_and_available(make_vehicle) -> None:
    assert make_vehicle().is_listed
    assert not make_vehicle(status="sold").is_listed
    assert not make_vehicle(is_active=False).is_listed


# ==============================================================================
# Listing filters
# ==============================================================================


class TestListingFilters:
    def test_no_filters_yield_only_the_visibility_gate(self) -> None:
        assert ListingFilters().criteria() == VISIBILITY_GATE

    def test_gate_always_comes_first(self) -> None:
        criteria = ListingFilters(make="toyo", condition="Used").criteria()

        assert criteria[:2] == VISIBILITY_GATE
        assert criteria[2:] == (
            Contains(FilterField.MAKE, "toyo"),
            Equals(FilterField.CONDITION, "Used"),
        )

    def test_all_filters_translate_to_criteria(self) -> None:
        filters = ListingFilters(
            make="Toy",
            model="Cor",
            year=2020,
            condition="Used",
            fuel_type="Hybrid",
            transmission="CVT",
            body_type="Sedan",
            min_price=Decimal("10000"),
            max_price=Decimal("30000"),
        )

        assert filters.criteria()[2:] == (
            Contains(FilterField.MAKE, "Toy"),
            Contains(FilterField.MODEL, "Cor"),
            Equals(FilterField.YEAR, 2020),
            Equals(FilterField.CONDITION, "Used"),
            Equals(FilterField.FUEL_TYPE, "Hybrid"),
            Equals(FilterField.TRANSMISSION, "CVT"),
            Equals(FilterField.BODY_TYPE, "Sedan"),
            Range(FilterField.PRICE, gte=Decimal("10000"), lte=Decimal("30000")),
        )

    def test_single_price_bound_gives_open_range(self) -> None:
        criteria = ListingFilters(max_price=Decimal("20000")).criteria()

        assert criteria[-1] == Range(FilterField.PRICE, gte=None, lte=Decimal("20000"))

    def test_equal_price_bounds_are_valid(self) -> None:
        ListingFilters(min_price=Decimal("100"), max_price=Decimal("100")).validate()

    def test_inverted_price_bounds_are_rejected(self) -> None:
        filters = ListingFilters(min_price=Decimal("30000"), max_price=Decimal("10000"))

        with pytest.raises(ValidationError) as exc_info:
            filters.validate()

        assert exc_info.value.errors[0]["code"] == "INVALID_RANGE"

    def test_negative_price_is_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ListingFilters(min_price=Decimal("-1")).validate()

        assert exc_info.value.errors == [
            {"field": "minPrice", "message": "Must be >= 0", "code": "OUT_OF_RANGE"}
        ]

    def test_non_decimal_price_is_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ListingFilters(max_price=100.5).validate()  # type: ignore[arg-type]

        assert exc_info.value.errors[0]["code"] == "INVALID_DECIMAL"

    def test_unknown_enum_value_is_not_a_validation_error(self) -> None:
        ListingFilters(condition="Salvage", fuel_type="Steam").validate()


# ==============================================================================
# Sort and paging
# ==============================================================================


class TestListingSort:
    def test_default_is_newest_first(self) -> None:
        assert ListingSort.from_query(None, None) == ListingSort(SortField.CREATED_AT, SortOrder.DESC)

    def test_sort_order_alone_keeps_default(self) -> None:
        assert ListingSort.from_query(None, "asc") == ListingSort()

    def test_sort_by_defaults_to_ascending(self) -> None:
        assert ListingSort.from_query("price", None) == ListingSort(SortField.PRICE, SortOrder.ASC)

    def test_explicit_order(self) -> None:
        assert ListingSort.from_query("createdAt", "desc") == ListingSort(
            SortField.CREATED_AT, SortOrder.DESC
        )

    def test_unknown_values_are_kept_for_validation(self) -> None:
        assert ListingSort.from_query("dealer", "sideways") == ListingSort("dealer", "sideways")

    def test_unknown_fields_are_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ListingSort.from_query("dealer", "sideways").validate()

        assert [e["field"] for e in exc_info.value.errors] == ["sortBy", "sortOrder"]

    def test_known_sort_is_valid(self) -> None:
        ListingSort.from_query("views", "desc").validate()


class TestPaging:
    def test_offset(self) -> None:
        assert Paging(page=3, limit=10).offset == 20

    def test_limit_at_maximum_is_valid(self) -> None:
        Paging(page=1, limit=MAX_PAGE_LIMIT).validate()

    def test_limit_above_maximum_is_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Paging(page=1, limit=MAX_PAGE_LIMIT + 1).validate()

        assert exc_info.value.errors[0]["field"] == "limit"

    def test_collects_page_and_limit_errors(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Paging(page=0, limit=0).validate()

        assert [e["field"] for e in exc_info.value.errors] == ["page", "limit"]


class TestPageInfo:
    @pytest.mark.parametrize(
        ("total", "limit", "pages"),
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (101, 50, 3)],
    )
    def test_total_pages_is_the_ceiling(self, total: int, limit: int, pages: int) -> None:
        assert PageInfo.build(Paging(page=1, limit=limit), total).total_pages == pages

    def test_navigation_flags(self) -> None:
        info = PageInfo.build(Paging(page=2, limit=10), 25)

        assert info.current_page == 2
        assert info.total == 25
        assert info.has_next_page is True
        assert info.has_prev_page is True

    def test_last_page_has_no_next(self) -> None:
        info = PageInfo.build(Paging(page=3, limit=10), 25)

        assert info.has_next_page is False
