"""
Dependency injection for FastAPI routes.

Database sessions are per-request; the engine behind them is process-wide.
Only stateless singletons (the identity provider) are cached.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Generator

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from boxcars.adapters.jwt_identity_provider import JwtIdentityProvider
from boxcars.adapters.postgres_contact_repository import PostgresContactRepository
from boxcars.adapters.postgres_user_repository import PostgresUserRepository
from boxcars.adapters.postgres_vehicle_repository import PostgresVehicleRepository
from boxcars.domain.errors import UnauthorizedError
from boxcars.domain.user import User
from boxcars.infra.auth.config import jwt_algorithm, jwt_expires_minutes, jwt_secret
from boxcars.infra.db.session import get_session
from boxcars.ports.identity_provider import IdentityProvider
from boxcars.ports.user_repository import UserRepository
from boxcars.ports.vehicle_repository import VehicleRepository
from boxcars.use_cases.create_vehicle import CreateVehicle
from boxcars.use_cases.delete_vehicle import DeleteVehicle
from boxcars.use_cases.favorites import AddFavorite, ListFavorites, RemoveFavorite
from boxcars.use_cases.get_vehicle_by_id import GetVehicleById
from boxcars.use_cases.list_dealer_contacts import ListDealerContacts
from boxcars.use_cases.search_vehicle_listings import SearchVehicleListings
from boxcars.use_cases.submit_contact import SubmitContact
from boxcars.use_cases.update_contact_status import UpdateContactStatus
from boxcars.use_cases.update_vehicle import UpdateVehicle

bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() commits on success, rolls back on
    exception and always closes the session.

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


@lru_cache
def get_identity_provider() -> IdentityProvider:
    return JwtIdentityProvider(
        secret=jwt_secret(),
        algorithm=jwt_algorithm(),
        expires_minutes=jwt_expires_minutes(),
    )


def get_vehicle_repository(db: Session = Depends(get_db)) -> VehicleRepository:
    return PostgresVehicleRepository(session=db)


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return PostgresUserRepository(session=db)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    identity_provider: IdentityProvider = Depends(get_identity_provider),
    users: UserRepository = Depends(get_user_repository),
) -> User:
    """
    Resolve the caller from the bearer token.

    Raises:
        UnauthorizedError: If the token is missing or invalid, or the user
            no longer exists or is deactivated
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Not authorized, no token")

    user_id = identity_provider.verify(credentials.credentials)

    try:
        user = users.get_by_id(user_id)
    except ValueError:  # sub is not a UUID
        raise UnauthorizedError("Not authorized, token failed")

    if user is None or not user.is_active:
        raise UnauthorizedError("Not authorized, user not found")

    return user


def get_search_listings_use_case(
    vehicles: VehicleRepository = Depends(get_vehicle_repository),
) -> SearchVehicleListings:
    """Per-request use case: fresh repository, isolated session."""
    return SearchVehicleListings(vehicle_repository=vehicles)


def get_vehicle_by_id_use_case(
    vehicles: VehicleRepository = Depends(get_vehicle_repository),
) -> GetVehicleById:
    return GetVehicleById(vehicle_repository=vehicles)


def get_create_vehicle_use_case(
    vehicles: VehicleRepository = Depends(get_vehicle_repository),
) -> CreateVehicle:
    return CreateVehicle(vehicle_repository=vehicles)


def get_update_vehicle_use_case(
    vehicles: VehicleRepository = Depends(get_vehicle_repository),
) -> UpdateVehicle:
    return UpdateVehicle(vehicle_repository=vehicles)


def get_delete_vehicle_use_case(
    vehicles: VehicleRepository = Depends(get_vehicle_repository),
) -> DeleteVehicle:
    return DeleteVehicle(vehicle_repository=vehicles)


def get_submit_contact_use_case(
    db: Session = Depends(get_db),
    vehicles: VehicleRepository = Depends(get_vehicle_repository),
) -> SubmitContact:
    return SubmitContact(
        contact_repository=PostgresContactRepository(session=db),
        vehicle_repository=vehicles,
    )


def get_list_dealer_contacts_use_case(db: Session = Depends(get_db)) -> ListDealerContacts:
    return ListDealerContacts(contact_repository=PostgresContactRepository(session=db))


def get_update_contact_status_use_case(db: Session = Depends(get_db)) -> UpdateContactStatus:
    return UpdateContactStatus(contact_repository=PostgresContactRepository(session=db))


def get_list_favorites_use_case(
    users: UserRepository = Depends(get_user_repository),
) -> ListFavorites:
    return ListFavorites(user_repository=users)


def get_add_favorite_use_case(
    users: UserRepository = Depends(get_user_repository),
    vehicles: VehicleRepository = Depends(get_vehicle_repository),
) -> AddFavorite:
    return AddFavorite(user_repository=users, vehicle_repository=vehicles)


def get_remove_favorite_use_case(
    users: UserRepository = Depends(get_user_repository),
) -> RemoveFavorite:
    return RemoveFavorite(user_repository=users)
