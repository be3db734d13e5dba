from __future__ import annotations

import logging

from boxcars.domain.contact import Contact, ContactDraft
from boxcars.domain.errors import NotFoundError
from boxcars.ports.contact_repository import ContactRepository
from boxcars.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)


class SubmitContact:
    """
    Public inquiry about a vehicle.

    The vehicle's dealer is copied onto the inquiry so dealers can list their
    inquiries without a join. A vehicle that does not exist fails the whole
    submission with NotFoundError.
    """

    def __init__(
        self,
        contact_repository: ContactRepository,
        vehicle_repository: VehicleRepository,
    ) -> None:
        self._contacts = contact_repository
        self._vehicles = vehicle_repository

    def execute(self, draft: ContactDraft) -> Contact:
        """
        Raises:
            ValidationError: With every invalid field, a malformed vehicle_id included
            NotFoundError: If the referenced vehicle doesn't exist
        """
        draft.validate()

        vehicle = self._vehicles.get_by_id(draft.vehicle_id)
        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=draft.vehicle_id)

        contact = self._contacts.create(draft, dealer_id=vehicle.dealer.id)
        logger.info(
            "Contact inquiry received",
            extra={"contact_id": contact.id, "vehicle_id": vehicle.id, "dealer_id": vehicle.dealer.id},
        )
        return contact
