from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    USER = "user"
    DEALER = "dealer"
    ADMIN = "admin"


@dataclass(frozen=True, slots=True)
class User:
    """An account as seen by the marketplace (credentials stay with the identity service)."""

    id: str
    name: str
    email: str
    role: str = Role.USER.value
    phone: str | None = None
    is_active: bool = True

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value

    def has_role(self, *roles: Role) -> bool:
        return self.role in {role.value for role in roles}

    def can_manage(self, dealer_id: str) -> bool:
        """Owner of the listing, or an admin acting on anyone's listing."""
        return self.id == dealer_id or self.is_admin
