from __future__ import annotations

import logging
from dataclasses import dataclass

from boxcars.domain.errors import ForbiddenError
from boxcars.domain.user import Role, User
from boxcars.domain.vehicle import Vehicle, VehicleDraft
from boxcars.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreateVehicleRequest:
    draft: VehicleDraft
    actor: User


class CreateVehicle:
    """Dealers and admins publish listings; the caller becomes the dealer."""

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, request: CreateVehicleRequest) -> Vehicle:
        """
        Raises:
            ForbiddenError: If the caller is neither dealer nor admin
            ValidationError: With every invalid field of the draft
        """
        if not request.actor.has_role(Role.DEALER, Role.ADMIN):
            raise ForbiddenError(f"User role {request.actor.role} is not authorized to access this route")

        request.draft.validate()

        vehicle = self._repository.create(request.draft, dealer_id=request.actor.id)
        logger.info("Vehicle created", extra={"vehicle_id": vehicle.id, "dealer_id": request.actor.id})
        return vehicle
