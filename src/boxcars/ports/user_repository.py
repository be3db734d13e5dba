from __future__ import annotations

from abc import ABC, abstractmethod

from boxcars.domain.user import User
from boxcars.domain.vehicle import Vehicle


class UserRepository(ABC):
    """Port for account lookups and the favorites set."""

    @abstractmethod
    def get_by_id(self, user_id: str) -> User | None: ...

    @abstractmethod
    def list_favorites(self, user_id: str) -> list[Vehicle]:
        """Favorite vehicles with their dealer summaries resolved."""
        ...

    @abstractmethod
    def add_favorite(self, user_id: str, vehicle_id: str) -> None:
        """Idempotent: adding an existing favorite is a no-op."""
        ...

    @abstractmethod
    def remove_favorite(self, user_id: str, vehicle_id: str) -> None:
        """Idempotent: removing a missing favorite is a no-op."""
        ...
