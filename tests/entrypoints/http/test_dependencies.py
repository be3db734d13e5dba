"""
Unit tests for FastAPI dependency injection functions.

Verifies the per-request wiring (session → repository → use case) and the
bearer-token resolution of the calling user, using mocks instead of a
database.
"""

from __future__ import annotations

from types import GeneratorType
from unittest.mock import MagicMock, Mock, patch

import pytest
from fastapi.security import HTTPAuthorizationCredentials

from boxcars.adapters.jwt_identity_provider import JwtIdentityProvider
from boxcars.adapters.postgres_contact_repository import PostgresContactRepository
from boxcars.adapters.postgres_user_repository import PostgresUserRepository
from boxcars.adapters.postgres_vehicle_repository import PostgresVehicleRepository
from boxcars.domain.errors import UnauthorizedError
from boxcars.domain.user import User
from boxcars.entrypoints.http.dependencies import (
    get_add_favorite_use_case,
    get_current_user,
    get_db,
    get_identity_provider,
    get_search_listings_use_case,
    get_submit_contact_use_case,
    get_user_repository,
    get_vehicle_repository,
)
from boxcars.ports.user_repository import UserRepository
from boxcars.use_cases.search_vehicle_listings import SearchVehicleListings

SECRET = "dependency-test-secret-long-enough-for-hs256"


# ==============================================================================
# get_db() - Database Session Provider
# ==============================================================================


def _session_context(session: Mock) -> MagicMock:
    context = MagicMock()
    context.__enter__.return_value = session
    context.__exit__.return_value = None
    return context


def test_get_db_yields_session_from_get_session() -> None:
    session = Mock()
    context = _session_context(session)

    with patch("boxcars.entrypoints.http.dependencies.get_session", return_value=context) as get_session:
        generator = get_db()
        assert isinstance(generator, GeneratorType)
        assert next(generator) is session

        with pytest.raises(StopIteration):
            next(generator)

    get_session.assert_called_once()
    context.__exit__.assert_called_once()


def test_get_db_exits_context_on_exception() -> None:
    context = _session_context(Mock())

    with patch("boxcars.entrypoints.http.dependencies.get_session", return_value=context):
        generator = get_db()
        next(generator)

        with pytest.raises(RuntimeError):
            generator.throw(RuntimeError("request failed"))

    context.__exit__.assert_called_once()


# ==============================================================================
# Repository and use case factories
# ==============================================================================


def test_repositories_share_the_request_session() -> None:
    session = Mock()

    vehicles = get_vehicle_repository(db=session)
    users = get_user_repository(db=session)

    assert isinstance(vehicles, PostgresVehicleRepository)
    assert isinstance(users, PostgresUserRepository)
    assert vehicles._session is session
    assert users._session is session


def test_search_use_case_is_fresh_per_request() -> None:
    first = get_search_listings_use_case(vehicles=get_vehicle_repository(db=Mock()))
    second = get_search_listings_use_case(vehicles=get_vehicle_repository(db=Mock()))

    assert isinstance(first, SearchVehicleListings)
    assert first is not second
    assert first._repository is not second._repository


def test_submit_contact_wiring() -> None:
    session = Mock()
    vehicles = get_vehicle_repository(db=session)

    use_case = get_submit_contact_use_case(db=session, vehicles=vehicles)

    assert isinstance(use_case._contacts, PostgresContactRepository)
    assert use_case._contacts._session is session
    assert use_case._vehicles is vehicles


def test_add_favorite_wiring() -> None:
    users = Mock(spec=UserRepository)
    vehicles = Mock()

    use_case = get_add_favorite_use_case(users=users, vehicles=vehicles)

    assert use_case._users is users
    assert use_case._vehicles is vehicles


def test_identity_provider_reads_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWT_SECRET", SECRET)
    get_identity_provider.cache_clear()
    try:
        provider = get_identity_provider()
        assert isinstance(provider, JwtIdentityProvider)
        assert provider is get_identity_provider()
    finally:
        get_identity_provider.cache_clear()


def test_identity_provider_requires_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("JWT_SECRET", raising=False)
    get_identity_provider.cache_clear()

    with pytest.raises(RuntimeError):
        get_identity_provider()


# ==============================================================================
# get_current_user() - Bearer token resolution
# ==============================================================================


@pytest.fixture()
def provider() -> JwtIdentityProvider:
    return JwtIdentityProvider(secret=SECRET)


@pytest.fixture()
def users() -> Mock:
    return Mock(spec=UserRepository)


def _bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


def test_current_user_from_token(provider: JwtIdentityProvider, users: Mock, dealer: User) -> None:
    users.get_by_id.return_value = dealer

    user = get_current_user(_bearer(provider.issue(dealer.id)), provider, users)

    assert user == dealer
    users.get_by_id.assert_called_once_with(dealer.id)


def test_missing_token(provider: JwtIdentityProvider, users: Mock) -> None:
    with pytest.raises(UnauthorizedError) as exc_info:
        get_current_user(None, provider, users)

    assert exc_info.value.message == "Not authorized, no token"


def test_invalid_token(provider: JwtIdentityProvider, users: Mock) -> None:
    with pytest.raises(UnauthorizedError):
        get_current_user(_bearer("not-a-token"), provider, users)

    users.get_by_id.assert_not_called()


def test_subject_that_is_not_a_uuid(provider: JwtIdentityProvider) -> None:
    users = Mock(spec=UserRepository)
    users.get_by_id.side_effect = ValueError("badly formed hexadecimal UUID string")

    with pytest.raises(UnauthorizedError):
        get_current_user(_bearer(provider.issue("admin")), provider, users)


def test_unknown_user(provider: JwtIdentityProvider, users: Mock, dealer: User) -> None:
    users.get_by_id.return_value = None

    with pytest.raises(UnauthorizedError):
        get_current_user(_bearer(provider.issue(dealer.id)), provider, users)


def test_inactive_user(provider: JwtIdentityProvider, users: Mock, dealer: User) -> None:
    users.get_by_id.return_value = User(
        id=dealer.id, name=dealer.name, email=dealer.email, role="dealer", is_active=False
    )

    with pytest.raises(UnauthorizedError):
        get_current_user(_bearer(provider.issue(dealer.id)), provider, users)
