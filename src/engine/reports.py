"""Ledger reporting: budget vs actual, income statement, Schedule E,
per-property comparison, portfolio summary and upcoming tasks.

Pure functions over ledger value objects. No I/O.
"""

from collections import defaultdict
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Sequence

from src.models.ledger import (
    SCHEDULE_E_CATEGORIES,
    BudgetItem,
    BudgetLine,
    BudgetReport,
    IncomeStatement,
    LedgerEntry,
    MonthlyTotals,
    PortfolioSummary,
    PropertyPerformance,
    PropertySnapshot,
    PropertyStatus,
    ScheduleESummary,
    TransactionType,
    UpcomingTask,
)
from src.models.scenario import MONTH_NAMES

ZERO = Decimal("0")
TWO_PLACES = Decimal("0.01")


def _in_period(
    entries: Iterable[LedgerEntry], year: int, property_id: object | None = None
) -> list[LedgerEntry]:
    return [
        e for e in entries
        if e.date.year == year and (property_id is None or e.property_id == property_id)
    ]


def _total(entries: Iterable[LedgerEntry], tx_type: TransactionType) -> Decimal:
    return sum((e.amount for e in entries if e.type == tx_type), ZERO)


def _merge_budget(budget_items: Sequence[BudgetItem]) -> dict[str, BudgetItem]:
    """One item per category; entries for several properties are summed."""
    merged: dict[str, BudgetItem] = {}
    for item in budget_items:
        prev = merged.get(item.category)
        if prev is None:
            merged[item.category] = item
            continue
        monthly = ()
        if len(prev.monthly) == 12 and len(item.monthly) == 12:
            monthly = tuple(a + b for a, b in zip(prev.monthly, item.monthly))
        merged[item.category] = BudgetItem(
            category=item.category, annual=prev.annual + item.annual, monthly=monthly
        )
    return merged


def budget_vs_actual(
    budget_items: Sequence[BudgetItem],
    transactions: Iterable[LedgerEntry],
    year: int,
    property_id: object | None = None,
) -> BudgetReport:
    """Compare budgeted against actual spending by category.

    Only expense transactions count toward actuals. Lines are sorted by
    actual spend, largest first.
    """
    expenses = [
        e for e in _in_period(transactions, year, property_id)
        if e.type == TransactionType.EXPENSE
    ]

    actual_total: dict[str, Decimal] = defaultdict(lambda: ZERO)
    actual_monthly: dict[str, list[Decimal]] = defaultdict(lambda: [ZERO] * 12)
    for e in expenses:
        actual_total[e.category] += e.amount
        actual_monthly[e.category][e.date.month - 1] += e.amount

    budgets = _merge_budget(budget_items)
    categories = list(dict.fromkeys([*budgets, *actual_total]))

    lines: list[BudgetLine] = []
    for category in categories:
        item = budgets.get(category)
        budget = item.annual if item else ZERO
        actual = actual_total.get(category, ZERO)
        variance = budget - actual

        if item and len(item.monthly) == 12:
            monthly_budget = list(item.monthly)
        else:
            monthly_budget = [(budget / 12).quantize(TWO_PLACES, ROUND_HALF_UP)] * 12

        lines.append(BudgetLine(
            category=category,
            budget=budget,
            actual=actual,
            variance=variance,
            variance_pct=(
                (variance / budget * 100).quantize(TWO_PLACES, ROUND_HALF_UP)
                if budget > 0 else ZERO
            ),
            monthly_budget=monthly_budget,
            monthly_actual=list(actual_monthly.get(category, [ZERO] * 12)),
        ))

    lines.sort(key=lambda line: line.actual, reverse=True)

    total_budget = sum((line.budget for line in lines), ZERO)
    total_actual = sum((line.actual for line in lines), ZERO)
    return BudgetReport(
        year=year,
        lines=lines,
        total_budget=total_budget,
        total_actual=total_actual,
        total_variance=total_budget - total_actual,
    )


def income_statement(
    transactions: Iterable[LedgerEntry],
    year: int,
    property_id: object | None = None,
) -> IncomeStatement:
    """Income, expenses by category and a Jan-Dec breakdown for one year."""
    entries = _in_period(transactions, year, property_id)

    by_category: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for e in entries:
        if e.type == TransactionType.EXPENSE:
            by_category[e.category] += e.amount

    monthly = []
    for index, name in enumerate(MONTH_NAMES, start=1):
        month_entries = [e for e in entries if e.date.month == index]
        income = _total(month_entries, TransactionType.INCOME)
        spent = _total(month_entries, TransactionType.EXPENSE)
        monthly.append(MonthlyTotals(month=name, income=income, expenses=spent, net=income - spent))

    income = _total(entries, TransactionType.INCOME)
    total_expenses = sum(by_category.values(), ZERO)
    return IncomeStatement(
        year=year,
        income=income,
        expenses_by_category=dict(by_category),
        total_expenses=total_expenses,
        net_income=income - total_expenses,
        monthly=monthly,
    )


def schedule_e_summary(
    transactions: Iterable[LedgerEntry],
    year: int,
    property_id: object | None = None,
) -> ScheduleESummary:
    """Group deductible expenses into Schedule E lines; empty lines are omitted."""
    entries = _in_period(transactions, year, property_id)

    deductions: dict[str, Decimal] = {}
    for line, categories in SCHEDULE_E_CATEGORIES.items():
        amount = sum(
            (e.amount for e in entries
             if e.type == TransactionType.EXPENSE and e.category in categories),
            ZERO,
        )
        if amount > 0:
            deductions[line] = amount

    rental_income = _total(entries, TransactionType.INCOME)
    total_deductions = sum(deductions.values(), ZERO)
    return ScheduleESummary(
        year=year,
        rental_income=rental_income,
        deductions=deductions,
        total_deductions=total_deductions,
        net_rental_income=rental_income - total_deductions,
    )


def property_comparison(
    properties: Iterable[PropertySnapshot],
    transactions: Sequence[LedgerEntry],
    year: int,
) -> list[PropertyPerformance]:
    """Cash flow and ROI on equity for each property still held."""
    results: list[PropertyPerformance] = []
    for prop in properties:
        if prop.status == PropertyStatus.SOLD:
            continue

        entries = _in_period(transactions, year, prop.id)
        income = _total(entries, TransactionType.INCOME)
        spent = _total(entries, TransactionType.EXPENSE)
        cash_flow = income - spent
        equity = prop.current_value - prop.mortgage_balance

        results.append(PropertyPerformance(
            property_id=prop.id,
            address=prop.address,
            city=prop.city,
            income=income,
            expenses=spent,
            cash_flow=cash_flow,
            value=prop.current_value,
            equity=equity,
            roi=(
                (cash_flow / equity * 100).quantize(TWO_PLACES, ROUND_HALF_UP)
                if equity > 0 else ZERO
            ),
        ))
    return results


def portfolio_summary(
    properties: Iterable[PropertySnapshot],
    active_prospects: int,
    transactions: Iterable[LedgerEntry],
    today: date,
) -> PortfolioSummary:
    """Headline numbers: holdings, value, equity and this month's net cash flow."""
    held = [p for p in properties if p.status != PropertyStatus.SOLD]
    this_month = [
        e for e in transactions
        if e.date.year == today.year and e.date.month == today.month
    ]

    portfolio_value = sum((p.current_value for p in held), ZERO)
    total_debt = sum((p.mortgage_balance for p in held), ZERO)
    return PortfolioSummary(
        total_properties=len(held),
        portfolio_value=portfolio_value,
        total_equity=portfolio_value - total_debt,
        monthly_cash_flow=(
            _total(this_month, TransactionType.INCOME)
            - _total(this_month, TransactionType.EXPENSE)
        ),
        active_prospects=active_prospects,
    )


def upcoming_tasks(
    lease_ends: Iterable[UpcomingTask],
    open_maintenance: Iterable[UpcomingTask],
    today: date,
    window_days: int = 30,
    maintenance_limit: int = 5,
) -> list[UpcomingTask]:
    """Lease renewals due within the window plus the oldest open maintenance, by date."""
    horizon = today + timedelta(days=window_days)
    leases = [t for t in lease_ends if today <= t.date <= horizon]
    maintenance = sorted(open_maintenance, key=lambda t: t.date)[:maintenance_limit]
    return sorted(leases + maintenance, key=lambda t: t.date)
