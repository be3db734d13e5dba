"""Tests for the favorites use cases."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from boxcars.domain.errors import NotFoundError, ValidationError
from boxcars.domain.user import User
from boxcars.ports.user_repository import UserRepository
from boxcars.ports.vehicle_repository import VehicleRepository
from boxcars.use_cases.favorites import AddFavorite, ListFavorites, RemoveFavorite

VEHICLE_ID = "550e8400-e29b-41d4-a716-446655440000"


@pytest.fixture()
def users() -> Mock:
    return Mock(spec=UserRepository)


@pytest.fixture()
def vehicles() -> Mock:
    return Mock(spec=VehicleRepository)


def test_list_favorites(users: Mock, buyer: User, make_vehicle) -> None:
    favorites = [make_vehicle(), make_vehicle(make="Honda")]
    users.list_favorites.return_value = favorites

    assert ListFavorites(user_repository=users).execute(buyer) == favorites
    users.list_favorites.assert_called_once_with(buyer.id)


def test_add_favorite(users: Mock, vehicles: Mock, buyer: User, make_vehicle) -> None:
    vehicle = make_vehicle(id=VEHICLE_ID)
    vehicles.get_by_id.return_value = vehicle
    users.list_favorites.return_value = [vehicle]

    result = AddFavorite(user_repository=users, vehicle_repository=vehicles).execute(buyer, VEHICLE_ID)

    assert result == [vehicle]
    users.add_favorite.assert_called_once_with(buyer.id, VEHICLE_ID)


def test_add_unknown_vehicle(users: Mock, vehicles: Mock, buyer: User) -> None:
    vehicles.get_by_id.return_value = None

    with pytest.raises(NotFoundError):
        AddFavorite(user_repository=users, vehicle_repository=vehicles).execute(buyer, VEHICLE_ID)

    users.add_favorite.assert_not_called()


def test_add_malformed_id(users: Mock, vehicles: Mock, buyer: User) -> None:
    with pytest.raises(ValidationError):
        AddFavorite(user_repository=users, vehicle_repository=vehicles).execute(buyer, "x")


def test_remove_favorite(users: Mock, buyer: User) -> None:
    users.list_favorites.return_value = []

    assert RemoveFavorite(user_repository=users).execute(buyer, VEHICLE_ID) == []
    users.remove_favorite.assert_called_once_with(buyer.id, VEHICLE_ID)
