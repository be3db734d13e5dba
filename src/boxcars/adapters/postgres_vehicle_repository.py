"""PostgreSQL implementation of VehicleRepository."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping
from uuid import UUID

from sqlalchemy import and_, delete, func, select, update
from sqlalchemy.orm import Session, joinedload

from boxcars.domain.vehicle import (
    Contains,
    Criterion,
    DealerSummary,
    Equals,
    FilterField,
    ListingFilters,
    ListingSort,
    Location,
    Paging,
    Range,
    SortField,
    SortOrder,
    Vehicle,
    VehicleDraft,
)
from boxcars.infra.db.models.vehicle import VehicleRow
from boxcars.ports.vehicle_repository import SearchResult, VehicleRepository

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement


_FILTER_COLUMNS = {
    FilterField.MAKE: VehicleRow.make,
    FilterField.MODEL: VehicleRow.model,
    FilterField.YEAR: VehicleRow.year,
    FilterField.PRICE: VehicleRow.price,
    FilterField.CONDITION: VehicleRow.condition,
    FilterField.FUEL_TYPE: VehicleRow.fuel_type,
    FilterField.TRANSMISSION: VehicleRow.transmission,
    FilterField.BODY_TYPE: VehicleRow.body_type,
    FilterField.STATUS: VehicleRow.status,
    FilterField.IS_ACTIVE: VehicleRow.is_active,
}

_SORT_COLUMNS = {
    SortField.PRICE: VehicleRow.price,
    SortField.YEAR: VehicleRow.year,
    SortField.MILEAGE: VehicleRow.mileage,
    SortField.MAKE: VehicleRow.make,
    SortField.MODEL: VehicleRow.model,
    SortField.VIEWS: VehicleRow.views,
    SortField.CREATED_AT: VehicleRow.created_at,
    SortField.UPDATED_AT: VehicleRow.updated_at,
}


def criterion_clause(criterion: Criterion) -> ColumnElement[bool]:
    """Translate one typed criterion into a SQL boolean expression."""
    column = _FILTER_COLUMNS[criterion.field]

    if isinstance(criterion, Contains):
        # autoescape: the caller's text is matched literally, % and _ included
        return column.icontains(criterion.text, autoescape=True)
    if isinstance(criterion, Range):
        clauses = []
        if criterion.gte is not None:
            clauses.append(column >= criterion.gte)
        if criterion.lte is not None:
            clauses.append(column <= criterion.lte)
        return and_(*clauses)
    if isinstance(criterion, Equals):
        return column == criterion.value

    raise TypeError(f"Unsupported criterion: {criterion!r}")


def row_to_vehicle(row: VehicleRow) -> Vehicle:
    """Convert a VehicleRow (with its dealer loaded) to the domain entity."""
    location = Location(**row.location) if row.location else None
    dealer = row.dealer
    return Vehicle(
        id=str(row.id),
        make=row.make,
        model=row.model,
        year=row.year,
        price=row.price,
        mileage=row.mileage,
        fuel_type=row.fuel_type,
        transmission=row.transmission,
        body_type=row.body_type,
        engine=row.engine,
        condition=row.condition,
        image=row.image,
        dealer=DealerSummary(
            id=str(dealer.id),
            name=dealer.name,
            email=dealer.email,
            phone=dealer.phone,
        ),
        original_price=row.original_price,
        color=row.color,
        features=tuple(row.features or ()),
        badge=row.badge,
        location=location,
        status=row.status,
        views=row.views,
        is_active=row.is_active,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _location_to_json(location: Location | None) -> dict[str, Any] | None:
    if location is None:
        return None
    return {
        "city": location.city,
        "state": location.state,
        "country": location.country,
        "zip_code": location.zip_code,
    }


class PostgresVehicleRepository(VehicleRepository):
    """
    PostgreSQL implementation of VehicleRepository.

    - Translates typed criteria to SQL WHERE clauses
    - Returns total_count via a separate COUNT(*) query
    - Resolves the dealer with a joined load
    - Increments views with a single UPDATE (no read-modify-write)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def search(self, filters: ListingFilters, sort: ListingSort, paging: Paging) -> SearchResult:
        """
        Search listings with filters, sort and paging.

        Executes two queries:
        1. COUNT(*) over the filtered set
        2. SELECT with ORDER BY / OFFSET / LIMIT for the page

        Note:
            Assumes inputs are validated by UseCase (contract programming).
        """
        conditions = [criterion_clause(criterion) for criterion in filters.criteria()]

        count_query = select(func.count()).select_from(VehicleRow).where(*conditions)
        total_count = self._session.execute(count_query).scalar() or 0

        column = _SORT_COLUMNS[sort.field]
        ordering = column.desc() if sort.order == SortOrder.DESC else column.asc()

        query = (
            select(VehicleRow)
            .options(joinedload(VehicleRow.dealer))
            .where(*conditions)
            .order_by(ordering)
            .offset(paging.offset)
            .limit(paging.limit)
        )
        rows = self._session.execute(query).scalars().all()

        return SearchResult(vehicles=[row_to_vehicle(row) for row in rows], total_count=total_count)

    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        row = self._get_row(vehicle_id)
        return row_to_vehicle(row) if row else None

    def increment_views(self, vehicle_id: str) -> bool:
        statement = (
            update(VehicleRow)
            .where(VehicleRow.id == UUID(vehicle_id))
            .values(views=VehicleRow.views + 1)
            .execution_options(synchronize_session=False)
        )
        result = self._session.execute(statement)
        return result.rowcount > 0

    def create(self, draft: VehicleDraft, dealer_id: str) -> Vehicle:
        row = VehicleRow(
            make=draft.make.strip(),
            model=draft.model.strip(),
            year=draft.year,
            price=draft.price,
            original_price=draft.original_price,
            mileage=draft.mileage,
            fuel_type=draft.fuel_type,
            transmission=draft.transmission,
            body_type=draft.body_type,
            engine=draft.engine.strip(),
            color=draft.color,
            image=draft.image.strip(),
            features=list(draft.features),
            condition=draft.condition,
            badge=draft.badge,
            location=_location_to_json(draft.location),
            dealer_id=UUID(dealer_id),
            status="available",
            views=0,
            is_active=True,
        )
        self._session.add(row)
        self._session.flush()
        # Load server-side timestamps and the dealer relationship
        self._session.refresh(row)

        return row_to_vehicle(row)

    def update(self, vehicle_id: str, changes: Mapping[str, Any]) -> Vehicle | None:
        row = self._get_row(vehicle_id)
        if row is None:
            return None

        for name, value in changes.items():
            if name == "location":
                value = _location_to_json(value)
            elif name == "features":
                value = list(value)
            setattr(row, name, value)

        self._session.flush()
        self._session.refresh(row)

        return row_to_vehicle(row)

    def delete(self, vehicle_id: str) -> bool:
        statement = delete(VehicleRow).where(VehicleRow.id == UUID(vehicle_id))
        result = self._session.execute(statement)
        return result.rowcount > 0

    def _get_row(self, vehicle_id: str) -> VehicleRow | None:
        query = (
            select(VehicleRow)
            .options(joinedload(VehicleRow.dealer))
            .where(VehicleRow.id == UUID(vehicle_id))
            .execution_options(populate_existing=True)
        )
        return self._session.execute(query).scalar_one_or_none()
