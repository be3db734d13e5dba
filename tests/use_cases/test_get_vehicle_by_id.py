"""Test suite for GetVehicleById use case."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from boxcars.adapters.in_memory_vehicle_repository import InMemoryVehicleRepository
from boxcars.domain.errors import NotFoundError, ValidationError
from boxcars.ports.vehicle_repository import VehicleRepository
from boxcars.use_cases.get_vehicle_by_id import (
    GetVehicleById,
    GetVehicleByIdRequest,
    GetVehicleByIdResponse,
)

VEHICLE_ID = "550e8400-e29b-41d4-a716-446655440000"


@pytest.fixture()
def mock_repository() -> Mock:
    return Mock(spec=VehicleRepository)


def test_returns_vehicle_and_counts_the_view(mock_repository: Mock, make_vehicle) -> None:
    vehicle = make_vehicle(id=VEHICLE_ID, views=4)
    mock_repository.get_by_id.return_value = vehicle

    result = GetVehicleById(vehicle_repository=mock_repository).execute(
        GetVehicleByIdRequest(vehicle_id=VEHICLE_ID)
    )

    assert isinstance(result, GetVehicleByIdResponse)
    assert result.vehicle == vehicle
    mock_repository.get_by_id.assert_called_once_with(VEHICLE_ID)
    mock_repository.increment_views.assert_called_once_with(VEHICLE_ID)


def test_snapshot_excludes_current_view(make_vehicle) -> None:
    repository = InMemoryVehicleRepository(vehicles=[make_vehicle(id=VEHICLE_ID)])
    use_case = GetVehicleById(vehicle_repository=repository)

    first = use_case.execute(GetVehicleByIdRequest(vehicle_id=VEHICLE_ID))
    second = use_case.execute(GetVehicleByIdRequest(vehicle_id=VEHICLE_ID))

    assert first.vehicle.views == 0
    assert second.vehicle.views == 1
    assert repository.get_by_id(VEHICLE_ID).views == 2


def test_unlisted_vehicle_is_still_readable_by_id(make_vehicle) -> None:
    repository = InMemoryVehicleRepository(vehicles=[make_vehicle(id=VEHICLE_ID, status="sold")])

    result = GetVehicleById(vehicle_repository=repository).execute(
        GetVehicleByIdRequest(vehicle_id=VEHICLE_ID)
    )

    assert result.vehicle.status == "sold"


def test_raises_not_found_when_missing(mock_repository: Mock) -> None:
    mock_repository.get_by_id.return_value = None

    with pytest.raises(NotFoundError) as exc_info:
        GetVehicleById(vehicle_repository=mock_repository).execute(
            GetVehicleByIdRequest(vehicle_id=VEHICLE_ID)
        )

    assert exc_info.value.context["identifier"] == VEHICLE_ID
    mock_repository.increment_views.assert_not_called()


@pytest.mark.parametrize("vehicle_id", ["123", "abc", ""])
def test_malformed_id_never_reaches_repository(mock_repository: Mock, vehicle_id: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        GetVehicleById(vehicle_repository=mock_repository).execute(
            GetVehicleByIdRequest(vehicle_id=vehicle_id)
        )

    assert exc_info.value.message == "Invalid ID format"
    mock_repository.get_by_id.assert_not_called()
