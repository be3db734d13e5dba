from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from boxcars.domain.errors import ValidationError
from boxcars.domain.identifiers import is_uuid


class ContactStatus(str, Enum):
    """
    Inquiry workflow states.

    Any state may move to any other state (closed can be reopened); every
    transition marks the inquiry as read.
    """

    NEW = "new"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


class InquiryType(str, Enum):
    GENERAL = "general"
    VEHICLE = "vehicle"
    FINANCING = "financing"
    TEST_DRIVE = "test_drive"
    TRADE_IN = "trade_in"


PHONE_PATTERN = re.compile(r"\+?[1-9]\d{0,15}")


@dataclass(frozen=True, slots=True)
class VehicleSummary:
    id: str
    make: str
    model: str
    year: int


@dataclass(frozen=True)
class Contact:
    id: str
    name: str
    email: str
    subject: str
    message: str
    vehicle_id: str | None
    dealer_id: str
    phone: str | None = None
    inquiry_type: str = InquiryType.GENERAL.value
    is_read: bool = False
    status: str = ContactStatus.NEW.value
    vehicle: VehicleSummary | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class ContactDraft:
    name: str
    email: str
    subject: str
    message: str
    vehicle_id: str
    phone: str | None = None
    inquiry_type: str = InquiryType.GENERAL.value

    def validate(self) -> None:
        """
        Raises:
            ValidationError: With every failing field
        """
        errors: list[dict[str, str]] = []

        for name, minimum in (("name", 2), ("subject", 5), ("message", 10)):
            if len(getattr(self, name).strip()) < minimum:
                errors.append(
                    {
                        "field": name,
                        "message": f"{name.capitalize()} must be at least {minimum} characters",
                        "code": "TOO_SHORT",
                    }
                )

        if "@" not in self.email:
            errors.append({"field": "email", "message": "Please enter a valid email", "code": "INVALID_EMAIL"})

        if self.phone is not None and not PHONE_PATTERN.fullmatch(self.phone):
            errors.append(
                {"field": "phone", "message": "Please enter a valid phone number", "code": "INVALID_PHONE"}
            )

        if self.inquiry_type not in {member.value for member in InquiryType}:
            errors.append(
                {
                    "field": "inquiry_type",
                    "message": f"Must be one of: {', '.join(m.value for m in InquiryType)}",
                    "code": "INVALID_CHOICE",
                }
            )

        if not is_uuid(self.vehicle_id):
            errors.append(
                {"field": "vehicleId", "message": "Must be a valid UUID format", "code": "INVALID_UUID"}
            )

        if errors:
            raise ValidationError(errors=errors)


@dataclass(frozen=True, slots=True)
class ContactFilters:
    status: str | None = None
    inquiry_type: str | None = None
