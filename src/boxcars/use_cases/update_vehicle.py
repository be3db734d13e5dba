from __future__ import annotations

from dataclasses import dataclass

from boxcars.domain.errors import ForbiddenError, NotFoundError
from boxcars.domain.identifiers import ensure_uuid
from boxcars.domain.user import User
from boxcars.domain.vehicle import Vehicle, VehicleChanges
from boxcars.ports.vehicle_repository import VehicleRepository


@dataclass(frozen=True, slots=True)
class UpdateVehicleRequest:
    vehicle_id: str
    changes: VehicleChanges
    actor: User


class UpdateVehicle:
    """
    Partial update of a listing by its dealer or an admin.

    Existence is checked before ownership so a stranger gets 403 for a real
    vehicle and 404 only for a missing one.
    """

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, request: UpdateVehicleRequest) -> Vehicle:
        """
        Raises:
            ValidationError: If the id is malformed or a change is invalid
            NotFoundError: If the vehicle doesn't exist
            ForbiddenError: If the caller is neither owner nor admin
        """
        ensure_uuid(request.vehicle_id, "id")
        request.changes.validate()

        vehicle = self._repository.get_by_id(request.vehicle_id)
        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)

        if not request.actor.can_manage(vehicle.dealer.id):
            raise ForbiddenError("Not authorized to update this vehicle")

        updated = self._repository.update(request.vehicle_id, request.changes.values)
        if updated is None:
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)

        return updated
