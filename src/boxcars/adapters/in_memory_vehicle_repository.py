from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Mapping

from boxcars.domain.vehicle import (
    Contains,
    Criterion,
    DealerSummary,
    Equals,
    ListingFilters,
    ListingSort,
    Paging,
    Range,
    SortField,
    SortOrder,
    Vehicle,
    VehicleDraft,
)
from boxcars.ports.vehicle_repository import SearchResult, VehicleRepository

_SORT_ATTRIBUTES = {
    SortField.PRICE: "price",
    SortField.YEAR: "year",
    SortField.MILEAGE: "mileage",
    SortField.MAKE: "make",
    SortField.MODEL: "model",
    SortField.VIEWS: "views",
    SortField.CREATED_AT: "created_at",
    SortField.UPDATED_AT: "updated_at",
}


class InMemoryVehicleRepository(VehicleRepository):
    """
    Canonical contract implementation for tests.

    - Stores vehicles in insertion order
    - Applies the same typed criteria as the SQL adapter
    - Stable sort, so ties keep insertion order
    - Returns total_count of matching vehicles before paging
    """

    def __init__(
        self,
        vehicles: list[Vehicle] | None = None,
        dealers: Mapping[str, DealerSummary] | None = None,
    ) -> None:
        self._vehicles: dict[str, Vehicle] = {vehicle.id: vehicle for vehicle in vehicles or []}
        self._dealers = dict(dealers or {})

    def search(self, filters: ListingFilters, sort: ListingSort, paging: Paging) -> SearchResult:
        # Trust that UseCase has validated inputs (contract programming)
        criteria = filters.criteria()
        matches = [v for v in self._vehicles.values() if all(_matches(v, c) for c in criteria)]
        total_count = len(matches)

        attribute = _SORT_ATTRIBUTES[sort.field]
        matches.sort(
            key=lambda vehicle: getattr(vehicle, attribute),
            reverse=sort.order == SortOrder.DESC,
        )

        return SearchResult(
            vehicles=matches[paging.offset : paging.offset + paging.limit],
            total_count=total_count,
        )

    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        return self._vehicles.get(vehicle_id)

    def increment_views(self, vehicle_id: str) -> bool:
        vehicle = self._vehicles.get(vehicle_id)
        if vehicle is None:
            return False
        self._vehicles[vehicle_id] = replace(vehicle, views=vehicle.views + 1)
        return True

    def create(self, draft: VehicleDraft, dealer_id: str) -> Vehicle:
        now = datetime.now(timezone.utc)
        dealer = self._dealers.get(dealer_id) or DealerSummary(id=dealer_id, name="", email="")
        vehicle = Vehicle(
            id=str(uuid.uuid4()),
            make=draft.make,
            model=draft.model,
            year=draft.year,
            price=draft.price,
            mileage=draft.mileage,
            fuel_type=draft.fuel_type,
            transmission=draft.transmission,
            body_type=draft.body_type,
            engine=draft.engine,
            condition=draft.condition,
            image=draft.image,
            dealer=dealer,
            original_price=draft.original_price,
            color=draft.color,
            features=tuple(draft.features),
            badge=draft.badge,
            location=draft.location,
            created_at=now,
            updated_at=now,
        )
        self._vehicles[vehicle.id] = vehicle
        return vehicle

    def update(self, vehicle_id: str, changes: Mapping[str, Any]) -> Vehicle | None:
        vehicle = self._vehicles.get(vehicle_id)
        if vehicle is None:
            return None
        values = dict(changes)
        if "features" in values:
            values["features"] = tuple(values["features"])
        updated = replace(vehicle, **values, updated_at=datetime.now(timezone.utc))
        self._vehicles[vehicle_id] = updated
        return updated

    def delete(self, vehicle_id: str) -> bool:
        return self._vehicles.pop(vehicle_id, None) is not None


def _matches(vehicle: Vehicle, criterion: Criterion) -> bool:
    value = getattr(vehicle, criterion.field.value)

    if isinstance(criterion, Contains):
        return criterion.text.lower() in value.lower()
    if isinstance(criterion, Range):
        if criterion.gte is not None and value < criterion.gte:
            return False
        if criterion.lte is not None and value > criterion.lte:
            return False
        return True
    if isinstance(criterion, Equals):
        return value == criterion.value

    raise TypeError(f"Unsupported criterion: {criterion!r}")
