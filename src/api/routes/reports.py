"""Report routes: income statement, Schedule E, property comparison, portfolio."""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.deps import get_db
from src.api.queries import (
    count_active_prospects,
    load_lease_ends,
    load_ledger,
    load_open_maintenance,
    load_properties,
)
from src.api.schemas import (
    IncomeStatementResponse,
    PortfolioSummaryResponse,
    PropertyPerformanceResponse,
    ScheduleEResponse,
    UpcomingTaskResponse,
)
from src.engine.reports import (
    income_statement,
    portfolio_summary,
    property_comparison,
    schedule_e_summary,
    upcoming_tasks,
)

router = APIRouter(prefix="/api/v1", tags=["reports"])


@router.get("/reports/income-statement", response_model=IncomeStatementResponse)
async def get_income_statement(
    year: int | None = Query(None, ge=1900, le=2200),
    property_id: UUID | None = None,
    db: AsyncSession = Depends(get_db),
):
    year = year or date.today().year
    transactions = await load_ledger(db, year, property_id)
    return income_statement(transactions, year, property_id)


@router.get("/reports/schedule-e", response_model=ScheduleEResponse)
async def get_schedule_e(
    year: int | None = Query(None, ge=1900, le=2200),
    property_id: UUID | None = None,
    db: AsyncSession = Depends(get_db),
):
    """Deductible expenses grouped by Schedule E line. Not tax advice."""
    year = year or date.today().year
    transactions = await load_ledger(db, year, property_id)
    return schedule_e_summary(transactions, year, property_id)


@router.get("/reports/property-comparison", response_model=list[PropertyPerformanceResponse])
async def get_property_comparison(
    year: int | None = Query(None, ge=1900, le=2200),
    db: AsyncSession = Depends(get_db),
):
    year = year or date.today().year
    properties = await load_properties(db)
    transactions = await load_ledger(db, year)
    return property_comparison(properties, transactions, year)


@router.get("/portfolio/summary", response_model=PortfolioSummaryResponse)
async def get_portfolio_summary(db: AsyncSession = Depends(get_db)):
    today = date.today()
    properties = await load_properties(db)
    transactions = await load_ledger(db, today.year)
    active = await count_active_prospects(db)
    return portfolio_summary(properties, active, transactions, today)


@router.get("/portfolio/tasks", response_model=list[UpcomingTaskResponse])
async def get_upcoming_tasks(db: AsyncSession = Depends(get_db)):
    """Leases ending in the next 30 days and the five oldest open maintenance items."""
    lease_ends = await load_lease_ends(db)
    maintenance = await load_open_maintenance(db)
    return upcoming_tasks(lease_ends, maintenance, date.today())
