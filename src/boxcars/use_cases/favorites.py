"""Favorite vehicles of the calling user."""

from __future__ import annotations

from boxcars.domain.errors import NotFoundError
from boxcars.domain.identifiers import ensure_uuid
from boxcars.domain.user import User
from boxcars.domain.vehicle import Vehicle
from boxcars.ports.user_repository import UserRepository
from boxcars.ports.vehicle_repository import VehicleRepository


class ListFavorites:
    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, actor: User) -> list[Vehicle]:
        return self._users.list_favorites(actor.id)


class AddFavorite:
    def __init__(self, user_repository: UserRepository, vehicle_repository: VehicleRepository) -> None:
        self._users = user_repository
        self._vehicles = vehicle_repository

    def execute(self, actor: User, vehicle_id: str) -> list[Vehicle]:
        """
        Raises:
            ValidationError: If vehicle_id is malformed
            NotFoundError: If the vehicle doesn't exist
        """
        ensure_uuid(vehicle_id, "vehicleId")
        if self._vehicles.get_by_id(vehicle_id) is None:
            raise NotFoundError(resource="Vehicle", identifier=vehicle_id)

        self._users.add_favorite(actor.id, vehicle_id)
        return self._users.list_favorites(actor.id)


class RemoveFavorite:
    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, actor: User, vehicle_id: str) -> list[Vehicle]:
        ensure_uuid(vehicle_id, "vehicleId")
        self._users.remove_favorite(actor.id, vehicle_id)
        return self._users.list_favorites(actor.id)
