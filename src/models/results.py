from dataclasses import dataclass, field
from decimal import Decimal

from src.models.scenario import RentalType


@dataclass
class YearlyProjection:
    year: int
    property_value: Decimal = Decimal("0")
    equity: Decimal = Decimal("0")  # Value - loan balance
    annual_rent: Decimal = Decimal("0")  # Gross revenue for STR
    annual_cash_flow: Decimal = Decimal("0")
    cumulative_cash_flow: Decimal = Decimal("0")
    loan_balance: Decimal = Decimal("0")


@dataclass
class STRRevenue:
    monthly_revenue: list[Decimal] = field(default_factory=list)
    annual_revenue: Decimal = Decimal("0")


@dataclass
class ProformaResults:
    rental_type: RentalType = RentalType.LTR

    # Monthly
    gross_monthly_rent: Decimal = Decimal("0")
    effective_gross_income: Decimal = Decimal("0")
    total_monthly_expenses: Decimal = Decimal("0")
    monthly_mortgage_payment: Decimal = Decimal("0")
    monthly_cash_flow: Decimal = Decimal("0")

    # Annual
    gross_annual_rent: Decimal = Decimal("0")
    annual_vacancy_loss: Decimal = Decimal("0")
    effective_gross_annual_income: Decimal = Decimal("0")
    total_annual_expenses: Decimal = Decimal("0")
    annual_debt_service: Decimal = Decimal("0")
    annual_cash_flow: Decimal = Decimal("0")
    noi: Decimal = Decimal("0")  # Before debt service

    # Metrics (percent except dscr)
    total_cash_invested: Decimal = Decimal("0")
    loan_amount: Decimal = Decimal("0")
    cap_rate: Decimal = Decimal("0")
    cash_on_cash_return: Decimal = Decimal("0")
    dscr: Decimal = Decimal("0")

    # Projections
    yearly_projections: list[YearlyProjection] = field(default_factory=list)
    irr: Decimal = Decimal("0")  # Percent
    npv: Decimal = Decimal("0")

    # Display detail
    expense_breakdown: dict[str, Decimal] = field(default_factory=dict)  # Annual, year 1
    monthly_revenue: list[Decimal] = field(default_factory=list)  # STR only
