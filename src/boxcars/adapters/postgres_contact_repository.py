"""PostgreSQL implementation of ContactRepository."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import Session, joinedload

from boxcars.domain.contact import (
    Contact,
    ContactDraft,
    ContactFilters,
    ContactStatus,
    VehicleSummary,
)
from boxcars.domain.vehicle import Paging
from boxcars.infra.db.models.contact import ContactRow
from boxcars.ports.contact_repository import ContactRepository, ContactSearchResult


def row_to_contact(row: ContactRow) -> Contact:
    vehicle = row.vehicle
    return Contact(
        id=str(row.id),
        name=row.name,
        email=row.email,
        subject=row.subject,
        message=row.message,
        vehicle_id=str(row.vehicle_id) if row.vehicle_id else None,
        dealer_id=str(row.dealer_id),
        phone=row.phone,
        inquiry_type=row.inquiry_type,
        is_read=row.is_read,
        status=row.status,
        vehicle=(
            VehicleSummary(id=str(vehicle.id), make=vehicle.make, model=vehicle.model, year=vehicle.year)
            if vehicle is not None
            else None
        ),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class PostgresContactRepository(ContactRepository):
    """Inquiries, scoped by the dealer id copied at submission."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def create(self, draft: ContactDraft, dealer_id: str) -> Contact:
        row = ContactRow(
            name=draft.name.strip(),
            email=draft.email,
            phone=draft.phone,
            subject=draft.subject.strip(),
            message=draft.message.strip(),
            inquiry_type=draft.inquiry_type,
            vehicle_id=UUID(draft.vehicle_id),
            dealer_id=UUID(dealer_id),
            is_read=False,
            status=ContactStatus.NEW.value,
        )
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)

        return row_to_contact(row)

    def list_for_dealer(
        self, dealer_id: str, filters: ContactFilters, paging: Paging
    ) -> ContactSearchResult:
        conditions = [ContactRow.dealer_id == UUID(dealer_id)]
        if filters.status:
            conditions.append(ContactRow.status == filters.status)
        if filters.inquiry_type:
            conditions.append(ContactRow.inquiry_type == filters.inquiry_type)

        count_query = select(func.count()).select_from(ContactRow).where(*conditions)
        total_count = self._session.execute(count_query).scalar() or 0

        query = (
            select(ContactRow)
            .options(joinedload(ContactRow.vehicle))
            .where(*conditions)
            .order_by(ContactRow.created_at.desc())
            .offset(paging.offset)
            .limit(paging.limit)
        )
        rows = self._session.execute(query).scalars().all()

        return ContactSearchResult(contacts=[row_to_contact(row) for row in rows], total_count=total_count)

    def update_status(self, contact_id: str, status: ContactStatus) -> Contact | None:
        row = self._session.get(ContactRow, UUID(contact_id))
        if row is None:
            return None

        row.status = status.value
        row.is_read = True
        self._session.flush()
        self._session.refresh(row)

        return row_to_contact(row)
