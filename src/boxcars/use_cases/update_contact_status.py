from __future__ import annotations

from dataclasses import dataclass

from boxcars.domain.contact import Contact, ContactStatus
from boxcars.domain.errors import ForbiddenError, NotFoundError, ValidationError
from boxcars.domain.identifiers import ensure_uuid
from boxcars.domain.user import Role, User
from boxcars.ports.contact_repository import ContactRepository


@dataclass(frozen=True, slots=True)
class UpdateContactStatusRequest:
    contact_id: str
    status: str
    actor: User


class UpdateContactStatus:
    """
    Admin-only status transition.

    No adjacency rules: any of the four states can follow any other, and the
    inquiry is always marked as read.
    """

    def __init__(self, contact_repository: ContactRepository) -> None:
        self._repository = contact_repository

    def execute(self, request: UpdateContactStatusRequest) -> Contact:
        """
        Raises:
            ForbiddenError: If the caller is not an admin
            ValidationError: If the id is malformed or the status unknown
            NotFoundError: If the inquiry doesn't exist
        """
        if not request.actor.has_role(Role.ADMIN):
            raise ForbiddenError(f"User role {request.actor.role} is not authorized to access this route")

        ensure_uuid(request.contact_id, "id")
        try:
            status = ContactStatus(request.status)
        except ValueError:
            raise ValidationError(
                errors=[{"field": "status", "message": "Invalid status", "code": "INVALID_CHOICE"}]
            )

        contact = self._repository.update_status(request.contact_id, status)
        if contact is None:
            raise NotFoundError(resource="Contact", identifier=request.contact_id)

        return contact
