from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from boxcars.domain.contact import Contact, ContactDraft, ContactFilters, ContactStatus
from boxcars.domain.vehicle import Paging


@dataclass(frozen=True)
class ContactSearchResult:
    contacts: list[Contact]
    total_count: int


class ContactRepository(ABC):
    """Port for inquiry storage."""

    @abstractmethod
    def create(self, draft: ContactDraft, dealer_id: str) -> Contact:
        """Persist a new inquiry with status new and unread."""
        ...

    @abstractmethod
    def list_for_dealer(
        self, dealer_id: str, filters: ContactFilters, paging: Paging
    ) -> ContactSearchResult:
        """Inquiries addressed to one dealer, newest first."""
        ...

    @abstractmethod
    def update_status(self, contact_id: str, status: ContactStatus) -> Contact | None:
        """Set the status and mark as read in one write. None if the inquiry is gone."""
        ...
