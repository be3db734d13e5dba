from __future__ import annotations

import logging
from dataclasses import dataclass

from boxcars.domain.errors import ForbiddenError, NotFoundError
from boxcars.domain.identifiers import ensure_uuid
from boxcars.domain.user import User
from boxcars.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeleteVehicleRequest:
    vehicle_id: str
    actor: User


class DeleteVehicle:
    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, request: DeleteVehicleRequest) -> None:
        """
        Raises:
            ValidationError: If the id is malformed
            NotFoundError: If the vehicle doesn't exist
            ForbiddenError: If the caller is neither owner nor admin
        """
        ensure_uuid(request.vehicle_id, "id")

        vehicle = self._repository.get_by_id(request.vehicle_id)
        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)

        if not request.actor.can_manage(vehicle.dealer.id):
            raise ForbiddenError("Not authorized to delete this vehicle")

        self._repository.delete(request.vehicle_id)
        logger.info("Vehicle deleted", extra={"vehicle_id": request.vehicle_id, "actor_id": request.actor.id})
