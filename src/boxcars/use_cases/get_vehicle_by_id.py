"""Get vehicle by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from boxcars.domain.errors import NotFoundError
from boxcars.domain.identifiers import ensure_uuid
from boxcars.domain.vehicle import Vehicle
from boxcars.ports.vehicle_repository import VehicleRepository


@dataclass(frozen=True, slots=True)
class GetVehicleByIdRequest:
    vehicle_id: str


@dataclass(frozen=True, slots=True)
class GetVehicleByIdResponse:
    vehicle: Vehicle


class GetVehicleById:
    """
    Use case for retrieving a single vehicle by ID.

    Responsibilities:
    - Validate vehicle_id format (must be valid UUID)
    - Raise NotFoundError if the vehicle doesn't exist
    - Count the view

    The returned vehicle is the record as read; the counter is bumped right
    after with an atomic increment, so the response shows the views before
    this request.
    """

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, request: GetVehicleByIdRequest) -> GetVehicleByIdResponse:
        """
        Raises:
            ValidationError: If vehicle_id is not a valid UUID format
            NotFoundError: If the vehicle doesn't exist
        """
        ensure_uuid(request.vehicle_id, "id")

        vehicle = self._repository.get_by_id(request.vehicle_id)
        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)

        self._repository.increment_views(request.vehicle_id)

        return GetVehicleByIdResponse(vehicle=vehicle)
