"""Tests for PostgresContactRepository against an in-memory SQLite database."""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta

import pytest
from sqlalchemy.orm import Session

from boxcars.adapters.postgres_contact_repository import PostgresContactRepository
from boxcars.adapters.postgres_vehicle_repository import PostgresVehicleRepository
from boxcars.domain.contact import ContactDraft, ContactFilters, ContactStatus
from boxcars.domain.vehicle import Paging, VehicleDraft
from boxcars.infra.db.models import ContactRow, UserRow

OTHER_DEALER_ID = "22222222-2222-2222-2222-222222222222"


@pytest.fixture()
def repository(db_session: Session) -> PostgresContactRepository:
    return PostgresContactRepository(session=db_session)


@pytest.fixture()
def vehicle_id(db_session: Session, dealer_row: UserRow, vehicle_draft: VehicleDraft) -> str:
    vehicles = PostgresVehicleRepository(session=db_session)
    return vehicles.create(vehicle_draft, dealer_id=str(dealer_row.id)).id


def _draft(vehicle_id: str, **overrides) -> ContactDraft:
    values = {
        "name": "Jamie Buyer",
        "email": "jamie@example.com",
        "subject": "Is it still available?",
        "message": "Please let me know if I can see it on Saturday.",
        "vehicle_id": vehicle_id,
        "inquiry_type": "vehicle",
    }
    values.update(overrides)
    return ContactDraft(**values)


def test_create_starts_unread_and_new(
    repository: PostgresContactRepository, vehicle_id: str, dealer_row: UserRow
) -> None:
    contact = repository.create(_draft(vehicle_id, phone="+15551234567"), dealer_id=str(dealer_row.id))

    assert contact.status == "new"
    assert contact.is_read is False
    assert contact.dealer_id == str(dealer_row.id)
    assert contact.phone == "+15551234567"
    assert contact.vehicle.id == vehicle_id
    assert contact.vehicle.make == "Honda"
    assert contact.vehicle.year == 2022


def test_list_is_scoped_to_dealer(
    repository: PostgresContactRepository, vehicle_id: str, dealer_row: UserRow
) -> None:
    repository.create(_draft(vehicle_id), dealer_id=str(dealer_row.id))
    repository.create(_draft(vehicle_id), dealer_id=OTHER_DEALER_ID)

    result = repository.list_for_dealer(str(dealer_row.id), ContactFilters(), Paging())

    assert result.total_count == 1
    assert result.contacts[0].dealer_id == str(dealer_row.id)


def test_list_filters_and_pages(
    repository: PostgresContactRepository, vehicle_id: str, dealer_row: UserRow
) -> None:
    dealer_id = str(dealer_row.id)
    for _ in range(3):
        repository.create(_draft(vehicle_id, inquiry_type="financing"), dealer_id=dealer_id)
    repository.create(_draft(vehicle_id, inquiry_type="trade_in"), dealer_id=dealer_id)

    result = repository.list_for_dealer(
        dealer_id, ContactFilters(inquiry_type="financing"), Paging(page=2, limit=2)
    )

    assert result.total_count == 3
    assert len(result.contacts) == 1
    assert result.contacts[0].inquiry_type == "financing"


def test_list_is_newest_first(
    repository: PostgresContactRepository, vehicle_id: str, dealer_row: UserRow, db_session: Session
) -> None:
    dealer_id = str(dealer_row.id)
    older = repository.create(_draft(vehicle_id, subject="Older inquiry"), dealer_id=dealer_id)
    newer = repository.create(_draft(vehicle_id, subject="Newer inquiry"), dealer_id=dealer_id)
    row = db_session.get(ContactRow, uuid.UUID(older.id))
    row.created_at = datetime(2020, 1, 1) - timedelta(days=1)
    db_session.flush()

    result = repository.list_for_dealer(dealer_id, ContactFilters(), Paging())

    assert [c.id for c in result.contacts] == [newer.id, older.id]


@pytest.mark.parametrize("status", list(ContactStatus))
def test_update_status_marks_read(
    repository: PostgresContactRepository, vehicle_id: str, dealer_row: UserRow, status: ContactStatus
) -> None:
    contact = repository.create(_draft(vehicle_id), dealer_id=str(dealer_row.id))

    updated = repository.update_status(contact.id, status)

    assert updated.status == status.value
    assert updated.is_read is True


def test_closed_inquiry_can_be_reopened(
    repository: PostgresContactRepository, vehicle_id: str, dealer_row: UserRow
) -> None:
    contact = repository.create(_draft(vehicle_id), dealer_id=str(dealer_row.id))
    repository.update_status(contact.id, ContactStatus.CLOSED)

    assert repository.update_status(contact.id, ContactStatus.IN_PROGRESS).status == "in_progress"


def test_update_status_missing(repository: PostgresContactRepository) -> None:
    assert repository.update_status(str(uuid.uuid4()), ContactStatus.RESOLVED) is None
