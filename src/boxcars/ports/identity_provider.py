from __future__ import annotations

from abc import ABC, abstractmethod


class IdentityProvider(ABC):
    """
    Port for signed identity tokens.

    verify() raises UnauthorizedError for missing, malformed or expired tokens.
    """

    @abstractmethod
    def issue(self, user_id: str) -> str: ...

    @abstractmethod
    def verify(self, token: str) -> str:
        """Return the user id carried by a valid token."""
        ...
