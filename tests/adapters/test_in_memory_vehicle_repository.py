"""Tests for InMemoryVehicleRepository, the reference implementation used by use case tests."""

from __future__ import annotations

from decimal import Decimal

import pytest

from boxcars.adapters.in_memory_vehicle_repository import InMemoryVehicleRepository
from boxcars.domain.vehicle import ListingFilters, ListingSort, Paging, SortField, SortOrder


@pytest.fixture()
def repository(make_vehicle) -> InMemoryVehicleRepository:
    return InMemoryVehicleRepository(
        vehicles=[
            make_vehicle(id="a", make="Toyota", model="Corolla", mileage=40000, price=Decimal("18000")),
            make_vehicle(id="b", make="Ford", model="Focus", mileage=40000, price=Decimal("15000")),
            make_vehicle(id="c", make="Mazda", model="CX-5", mileage=10000, price=Decimal("29000")),
            make_vehicle(id="d", make="Ford", model="Ranger", status="reserved"),
        ]
    )


def _ids(result) -> list[str]:
    return [vehicle.id for vehicle in result.vehicles]


def test_search_hides_unlisted(repository: InMemoryVehicleRepository) -> None:
    result = repository.search(ListingFilters(make="ford"), ListingSort(), Paging())

    assert _ids(result) == ["b"]
    assert result.total_count == 1


def test_ties_keep_insertion_order(repository: InMemoryVehicleRepository) -> None:
    result = repository.search(ListingFilters(), ListingSort(SortField.MILEAGE, SortOrder.ASC), Paging())

    assert _ids(result) == ["c", "a", "b"]


def test_price_bounds(repository: InMemoryVehicleRepository) -> None:
    result = repository.search(
        ListingFilters(min_price=Decimal("15000"), max_price=Decimal("18000")),
        ListingSort(SortField.PRICE, SortOrder.ASC),
        Paging(),
    )

    assert _ids(result) == ["b", "a"]


def test_paging_slices_after_count(repository: InMemoryVehicleRepository) -> None:
    result = repository.search(
        ListingFilters(), ListingSort(SortField.PRICE, SortOrder.DESC), Paging(page=2, limit=2)
    )

    assert _ids(result) == ["b"]
    assert result.total_count == 3


def test_increment_update_delete(repository: InMemoryVehicleRepository) -> None:
    assert repository.increment_views("a") is True
    assert repository.get_by_id("a").views == 1

    updated = repository.update("a", {"color": "Blue", "features": ["Sunroof"]})
    assert updated.color == "Blue"
    assert updated.features == ("Sunroof",)

    assert repository.delete("a") is True
    assert repository.delete("a") is False
    assert repository.increment_views("a") is False
    assert repository.update("a", {"color": "Red"}) is None
