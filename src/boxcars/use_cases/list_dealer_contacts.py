from __future__ import annotations

from dataclasses import dataclass

from boxcars.domain.contact import Contact, ContactFilters
from boxcars.domain.errors import ForbiddenError
from boxcars.domain.user import Role, User
from boxcars.domain.vehicle import PageInfo, Paging
from boxcars.ports.contact_repository import ContactRepository


@dataclass(frozen=True, slots=True)
class ListDealerContactsRequest:
    actor: User
    filters: ContactFilters = ContactFilters()
    paging: Paging = Paging()


@dataclass(frozen=True, slots=True)
class ListDealerContactsResponse:
    contacts: list[Contact]
    page_info: PageInfo


class ListDealerContacts:
    """Inquiries addressed to the calling dealer, newest first."""

    def __init__(self, contact_repository: ContactRepository) -> None:
        self._repository = contact_repository

    def execute(self, request: ListDealerContactsRequest) -> ListDealerContactsResponse:
        """
        Raises:
            ForbiddenError: If the caller is not a dealer
            ValidationError: If paging is out of range
        """
        if not request.actor.has_role(Role.DEALER):
            raise ForbiddenError(f"User role {request.actor.role} is not authorized to access this route")

        request.paging.validate()

        result = self._repository.list_for_dealer(
            dealer_id=request.actor.id,
            filters=request.filters,
            paging=request.paging,
        )
        return ListDealerContactsResponse(
            contacts=result.contacts,
            page_info=PageInfo.build(request.paging, result.total_count),
        )
