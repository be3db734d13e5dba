from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping

from boxcars.domain.vehicle import ListingFilters, ListingSort, Paging, Vehicle, VehicleDraft


@dataclass(frozen=True)
class SearchResult:
    """Result from a listing search including pagination metadata."""

    vehicles: list[Vehicle]
    total_count: int


class VehicleRepository(ABC):
    """
    Port for vehicle data access.

    Contract (Preconditions):
        - filters, sort and paging are pre-validated by the caller (UseCase)
        - identifiers are well-formed UUID strings
        - implementations trust their inputs and do not re-validate

    Consistency:
        - search() runs the count and the page fetch as two independent reads;
          total_count may disagree with the page under concurrent writes
        - each single-record write is atomic, nothing spans records
    """

    @abstractmethod
    def search(self, filters: ListingFilters, sort: ListingSort, paging: Paging) -> SearchResult:
        """
        Search public listings.

        Applies every criterion of ``filters.criteria()`` (visibility gate
        included) with AND semantics, then the sort, then the page window.

        Returns:
            SearchResult with the page of vehicles and the total match count
        """
        ...

    @abstractmethod
    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        """Fetch one vehicle regardless of visibility, dealer resolved."""
        ...

    @abstractmethod
    def increment_views(self, vehicle_id: str) -> bool:
        """Atomically add one to the view counter. Returns False if the vehicle is gone."""
        ...

    @abstractmethod
    def create(self, draft: VehicleDraft, dealer_id: str) -> Vehicle: ...

    @abstractmethod
    def update(self, vehicle_id: str, changes: Mapping[str, Any]) -> Vehicle | None: ...

    @abstractmethod
    def delete(self, vehicle_id: str) -> bool: ...
