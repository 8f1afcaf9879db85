"""Budget routes: annual budget entries and budget-vs-actual report."""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.deps import get_db, get_or_404
from src.api.queries import load_budget, load_ledger
from src.api.schemas import (
    BudgetEntryCreate,
    BudgetEntryResponse,
    BudgetEntryUpdate,
    BudgetReportResponse,
)
from src.engine.reports import budget_vs_actual
from src.models.db import BudgetEntryRecord

router = APIRouter(prefix="/api/v1/budget", tags=["budget"])


def _monthly_json(amounts) -> list[str] | None:
    # JSON column; Decimal is not JSON serializable
    return [str(m) for m in amounts] if amounts is not None else None


@router.get("/entries", response_model=list[BudgetEntryResponse])
async def list_budget_entries(
    year: int | None = Query(None, ge=1900, le=2200),
    property_id: UUID | None = None,
    db: AsyncSession = Depends(get_db),
):
    stmt = select(BudgetEntryRecord).order_by(BudgetEntryRecord.year, BudgetEntryRecord.category)
    if year is not None:
        stmt = stmt.where(BudgetEntryRecord.year == year)
    if property_id is not None:
        stmt = stmt.where(BudgetEntryRecord.property_id == property_id)
    result = await db.execute(stmt)
    return result.scalars().all()


@router.post("/entries", response_model=BudgetEntryResponse, status_code=201)
async def create_budget_entry(req: BudgetEntryCreate, db: AsyncSession = Depends(get_db)):
    record = BudgetEntryRecord(
        property_id=req.property_id,
        year=req.year,
        category=req.category,
        annual_amount=req.annual_amount,
        monthly_amounts=_monthly_json(req.monthly_amounts),
    )
    db.add(record)
    await db.commit()
    await db.refresh(record)
    return record


@router.put("/entries/{entry_id}", response_model=BudgetEntryResponse)
async def update_budget_entry(
    entry_id: UUID,
    req: BudgetEntryUpdate,
    db: AsyncSession = Depends(get_db),
):
    record = await get_or_404(db, BudgetEntryRecord, entry_id, "Budget entry")
    changes = req.model_dump(exclude_unset=True)
    if changes.get("category") is not None:
        record.category = changes["category"]
    if changes.get("annual_amount") is not None:
        record.annual_amount = changes["annual_amount"]
    if "monthly_amounts" in changes:
        record.monthly_amounts = _monthly_json(changes["monthly_amounts"])
    await db.commit()
    await db.refresh(record)
    return record


@router.delete("/entries/{entry_id}", status_code=204)
async def delete_budget_entry(entry_id: UUID, db: AsyncSession = Depends(get_db)):
    record = await get_or_404(db, BudgetEntryRecord, entry_id, "Budget entry")
    await db.delete(record)
    await db.commit()


@router.get("/report", response_model=BudgetReportResponse)
async def budget_report(
    year: int | None = Query(None, ge=1900, le=2200),
    property_id: UUID | None = None,
    db: AsyncSession = Depends(get_db),
):
    """Budget vs actual by category; actuals are expense transactions only."""
    year = year or date.today().year
    budget_items = await load_budget(db, year, property_id)
    transactions = await load_ledger(db, year, property_id)
    return budget_vs_actual(budget_items, transactions, year, property_id)
