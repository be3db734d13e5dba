"""Shared fixtures: sample domain objects and an in-memory SQLite store."""

from __future__ import annotations

import uuid
from collections.abc import Callable, Iterator
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from boxcars.domain.user import User
from boxcars.domain.vehicle import DealerSummary, Vehicle, VehicleDraft
from boxcars.infra.db.models import Base, UserRow

DEALER_ID = "11111111-1111-1111-1111-111111111111"
OTHER_DEALER_ID = "22222222-2222-2222-2222-222222222222"
ADMIN_ID = "33333333-3333-3333-3333-333333333333"
BUYER_ID = "44444444-4444-4444-4444-444444444444"

BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


@pytest.fixture()
def dealer() -> User:
    return User(id=DEALER_ID, name="Sunrise Motors", email="sales@sunrise.example", role="dealer")


@pytest.fixture()
def other_dealer() -> User:
    return User(id=OTHER_DEALER_ID, name="Harbor Autos", email="hello@harbor.example", role="dealer")


@pytest.fixture()
def admin() -> User:
    return User(id=ADMIN_ID, name="Site Admin", email="admin@boxcars.example", role="admin")


@pytest.fixture()
def buyer() -> User:
    return User(id=BUYER_ID, name="Jamie Buyer", email="jamie@example.com", role="user")


@pytest.fixture()
def make_vehicle() -> Callable[..., Vehicle]:
    """Factory for domain vehicles owned by DEALER_ID; each call is one second newer."""
    counter = {"n": 0}

    def factory(**overrides: Any) -> Vehicle:
        counter["n"] += 1
        created = BASE_TIME + timedelta(seconds=counter["n"])
        values: dict[str, Any] = {
            "id": str(uuid.uuid4()),
            "make": "Toyota",
            "model": "Corolla",
            "year": 2021,
            "price": Decimal("25000.00"),
            "mileage": 30000,
            "fuel_type": "Petrol",
            "transmission": "Automatic",
            "body_type": "Sedan",
            "engine": "1.8L I4",
            "condition": "Used",
            "image": "https://images.example/corolla.jpg",
            "dealer": DealerSummary(
                id=DEALER_ID, name="Sunrise Motors", email="sales@sunrise.example", phone="+15550100"
            ),
            "created_at": created,
            "updated_at": created,
        }
        values.update(overrides)
        return Vehicle(**values)

    return factory


@pytest.fixture()
def vehicle_draft() -> VehicleDraft:
    return VehicleDraft(
        make="Honda",
        model="Civic",
        year=2022,
        price=Decimal("27500.00"),
        mileage=12000,
        fuel_type="Petrol",
        transmission="CVT",
        body_type="Sedan",
        engine="2.0L I4",
        condition="Used",
        image="https://images.example/civic.jpg",
        features=("Bluetooth", "Backup Camera"),
    )


# ==============================================================================
# SQLite store for repository tests
# ==============================================================================


@pytest.fixture()
def db_session() -> Iterator[Session]:
    """Fresh in-memory database per test, shared across threads of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    session = sessionmaker(bind=engine, expire_on_commit=False)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture()
def dealer_row(db_session: Session) -> UserRow:
    row = UserRow(
        id=uuid.UUID(DEALER_ID),
        name="Sunrise Motors",
        email="sales@sunrise.example",
        phone="+15550100",
        role="dealer",
    )
    db_session.add(row)
    db_session.flush()
    return row


@pytest.fixture()
def buyer_row(db_session: Session) -> UserRow:
    row = UserRow(id=uuid.UUID(BUYER_ID), name="Jamie Buyer", email="jamie@example.com", role="user")
    db_session.add(row)
    db_session.flush()
    return row
