from __future__ import annotations

from dataclasses import dataclass

from boxcars.domain.errors import ValidationError
from boxcars.domain.vehicle import ListingFilters, ListingSort, PageInfo, Paging, Vehicle
from boxcars.ports.vehicle_repository import VehicleRepository


@dataclass(frozen=True, slots=True)
class SearchVehicleListingsRequest:
    filters: ListingFilters
    paging: Paging
    sort: ListingSort = ListingSort()


@dataclass(frozen=True, slots=True)
class SearchVehicleListingsResponse:
    vehicles: list[Vehicle]
    page_info: PageInfo


class SearchVehicleListings:
    """
    Public vehicle listing with filters, sort and pagination.

    Only active, available vehicles are ever returned: the visibility gate is
    part of every criteria list the filters produce, and callers have no
    filter that can override it.

    The count and the page are two reads; under concurrent writes the
    pagination block may briefly disagree with the page contents.
    """

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, request: SearchVehicleListingsRequest) -> SearchVehicleListingsResponse:
        """
        Execute listing search.

        Validates every parameter before the repository is touched; errors
        from filters, sort and paging are reported together.

        Raises:
            ValidationError: If any filter, sort or paging parameter is invalid
        """
        errors: list[dict[str, str]] = []
        for part in (request.filters, request.sort, request.paging):
            try:
                part.validate()
            except ValidationError as exc:
                errors.extend(exc.errors or [])
        if errors:
            raise ValidationError(errors=errors)

        result = self._repository.search(
            filters=request.filters,
            sort=request.sort,
            paging=request.paging,
        )

        return SearchVehicleListingsResponse(
            vehicles=result.vehicles,
            page_info=PageInfo.build(request.paging, result.total_count),
        )
