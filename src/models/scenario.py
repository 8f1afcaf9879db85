"""Calculator inputs for long-term and short-term rental deals.

All rate fields are whole-number percentages: 7 means 7%.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class RentalType(str, Enum):
    LTR = "ltr"
    STR = "str"


class SeasonalityMode(str, Enum):
    RATE = "rate"      # Entries are absolute nightly rates
    WEIGHT = "weight"  # Entries multiply the average daily rate


MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Non-leap year
DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

DEFAULT_SEASONALITY_WEIGHTS = tuple(
    Decimal(w) for w in (
        "0.8", "0.8", "0.9", "1.0", "1.1", "1.2",
        "1.3", "1.3", "1.1", "1.0", "0.8", "0.9",
    )
)


@dataclass(frozen=True)
class PurchaseTerms:
    purchase_price: Decimal = Decimal("0")
    down_payment_pct: Decimal = Decimal("0")
    interest_rate: Decimal = Decimal("0")  # Annual
    loan_term_years: int = 30
    closing_costs: Decimal = Decimal("0")
    rehab_budget: Decimal = Decimal("0")

    @property
    def down_payment(self) -> Decimal:
        return self.purchase_price * self.down_payment_pct / 100

    @property
    def loan_amount(self) -> Decimal:
        return self.purchase_price - self.down_payment

    @property
    def total_cash_invested(self) -> Decimal:
        return self.down_payment + self.closing_costs + self.rehab_budget


@dataclass(frozen=True)
class LTRScenario(PurchaseTerms):
    # Income
    monthly_rent: Decimal = Decimal("0")
    vacancy_rate_pct: Decimal = Decimal("0")

    # Expenses
    property_mgmt_pct: Decimal = Decimal("0")  # % of gross rent
    insurance_annual: Decimal = Decimal("0")
    taxes_annual: Decimal = Decimal("0")
    maintenance_reserve_pct: Decimal = Decimal("0")  # % of gross rent
    hoa_monthly: Decimal = Decimal("0")
    utilities_monthly: Decimal = Decimal("0")

    # Growth
    appreciation_rate_pct: Decimal = Decimal("0")
    rent_growth_rate_pct: Decimal = Decimal("0")


@dataclass(frozen=True)
class STRScenario(PurchaseTerms):
    # Income
    avg_daily_rate: Decimal = Decimal("0")
    occupancy_rate_pct: Decimal = Decimal("0")
    seasonality: tuple[Decimal, ...] = DEFAULT_SEASONALITY_WEIGHTS
    seasonality_mode: SeasonalityMode = SeasonalityMode.WEIGHT

    # Expenses (percentages are of gross revenue)
    property_mgmt_pct: Decimal = Decimal("0")
    listing_service_pct: Decimal = Decimal("0")
    cleaning_cost_per_turnover: Decimal = Decimal("0")
    turnovers_per_year: int = 0
    capital_reserve_pct: Decimal = Decimal("0")
    insurance_annual: Decimal = Decimal("0")
    taxes_annual: Decimal = Decimal("0")
    hoa_monthly: Decimal = Decimal("0")
    utilities_monthly: Decimal = Decimal("0")

    # Growth
    appreciation_rate_pct: Decimal = Decimal("0")
    adr_growth_rate_pct: Decimal = Decimal("0")
