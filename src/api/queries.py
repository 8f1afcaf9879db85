"""Load ledger rows from the database as report-engine value objects."""

from datetime import date
from decimal import Decimal
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.db import (
    BudgetEntryRecord,
    MaintenanceRecord,
    PropertyRecord,
    ProspectRecord,
    TenantRecord,
    TransactionRecord,
)
from src.models.ledger import (
    ACTIVE_PROSPECT_STATUSES,
    OPEN_MAINTENANCE_STATUSES,
    BudgetItem,
    LedgerEntry,
    PropertySnapshot,
    PropertyStatus,
    TransactionType,
    UpcomingTask,
)


def year_range(year: int) -> tuple[date, date]:
    return date(year, 1, 1), date(year, 12, 31)


async def load_ledger(
    db: AsyncSession,
    year: int | None = None,
    property_id: UUID | None = None,
) -> list[LedgerEntry]:
    stmt = select(TransactionRecord)
    if year is not None:
        start, end = year_range(year)
        stmt = stmt.where(TransactionRecord.date >= start, TransactionRecord.date <= end)
    if property_id is not None:
        stmt = stmt.where(TransactionRecord.property_id == property_id)

    result = await db.execute(stmt)
    return [
        LedgerEntry(
            date=tx.date,
            amount=Decimal(tx.amount),
            type=TransactionType(tx.type),
            category=tx.category,
            property_id=tx.property_id,
        )
        for tx in result.scalars()
    ]


async def load_budget(
    db: AsyncSession, year: int, property_id: UUID | None = None
) -> list[BudgetItem]:
    stmt = select(BudgetEntryRecord).where(BudgetEntryRecord.year == year)
    if property_id is not None:
        stmt = stmt.where(BudgetEntryRecord.property_id == property_id)

    result = await db.execute(stmt)
    return [
        BudgetItem(
            category=entry.category,
            annual=Decimal(entry.annual_amount),
            monthly=tuple(Decimal(str(m)) for m in entry.monthly_amounts or ()),
        )
        for entry in result.scalars()
    ]


async def load_properties(db: AsyncSession) -> list[PropertySnapshot]:
    result = await db.execute(select(PropertyRecord).order_by(PropertyRecord.address))
    return [
        PropertySnapshot(
            id=p.id,
            address=p.address,
            city=p.city,
            status=PropertyStatus(p.status),
            current_value=Decimal(p.current_value or 0),
            mortgage_balance=Decimal(p.mortgage_balance or 0),
        )
        for p in result.scalars()
    ]


async def count_active_prospects(db: AsyncSession) -> int:
    statuses = [s.value for s in ACTIVE_PROSPECT_STATUSES]
    result = await db.execute(
        select(func.count()).select_from(ProspectRecord).where(ProspectRecord.status.in_(statuses))
    )
    return result.scalar_one()


async def load_lease_ends(db: AsyncSession) -> list[UpcomingTask]:
    result = await db.execute(
        select(TenantRecord, PropertyRecord.address)
        .join(PropertyRecord, TenantRecord.property_id == PropertyRecord.id)
        .where(TenantRecord.status == "active", TenantRecord.lease_end.is_not(None))
    )
    return [
        UpcomingTask(
            kind="lease",
            task=f"Lease renewal: {tenant.name}",
            property=address,
            date=tenant.lease_end,
            source_id=tenant.id,
        )
        for tenant, address in result.all()
    ]


async def load_open_maintenance(db: AsyncSession) -> list[UpcomingTask]:
    statuses = [s.value for s in OPEN_MAINTENANCE_STATUSES]
    result = await db.execute(
        select(MaintenanceRecord, PropertyRecord.address)
        .join(PropertyRecord, MaintenanceRecord.property_id == PropertyRecord.id)
        .where(MaintenanceRecord.status.in_(statuses))
    )
    return [
        UpcomingTask(
            kind="maintenance",
            task=item.description,
            property=address,
            date=item.date,
            source_id=item.id,
        )
        for item, address in result.all()
    ]
