"""PostgreSQL implementation of UserRepository."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload, selectinload

from boxcars.adapters.postgres_vehicle_repository import row_to_vehicle
from boxcars.domain.user import User
from boxcars.domain.vehicle import Vehicle
from boxcars.infra.db.models.user import UserRow, user_favorites
from boxcars.infra.db.models.vehicle import VehicleRow
from boxcars.ports.user_repository import UserRepository


class PostgresUserRepository(UserRepository):
    """Accounts and the user_favorites association table."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, user_id: str) -> User | None:
        row = self._session.get(UserRow, UUID(user_id))
        if row is None:
            return None

        return User(
            id=str(row.id),
            name=row.name,
            email=row.email,
            role=row.role,
            phone=row.phone,
            is_active=row.is_active,
        )

    def list_favorites(self, user_id: str) -> list[Vehicle]:
        query = (
            select(VehicleRow)
            .join(user_favorites, user_favorites.c.vehicle_id == VehicleRow.id)
            .where(user_favorites.c.user_id == UUID(user_id))
            .options(joinedload(VehicleRow.dealer))
        )
        rows = self._session.execute(query).scalars().all()
        return [row_to_vehicle(row) for row in rows]

    def add_favorite(self, user_id: str, vehicle_id: str) -> None:
        user = self._load_with_favorites(user_id)
        vehicle = self._session.get(VehicleRow, UUID(vehicle_id))
        if user is None or vehicle is None:
            return

        if vehicle not in user.favorites:
            user.favorites.append(vehicle)
            self._session.flush()

    def remove_favorite(self, user_id: str, vehicle_id: str) -> None:
        user = self._load_with_favorites(user_id)
        if user is None:
            return

        target = UUID(vehicle_id)
        user.favorites = [vehicle for vehicle in user.favorites if vehicle.id != target]
        self._session.flush()

    def _load_with_favorites(self, user_id: str) -> UserRow | None:
        query = (
            select(UserRow)
            .options(selectinload(UserRow.favorites))
            .where(UserRow.id == UUID(user_id))
        )
        return self._session.execute(query).scalar_one_or_none()
