"""Ledger, budget and report value objects."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class ImportSource(str, Enum):
    MANUAL = "manual"
    CSV = "csv"


class PropertyStatus(str, Enum):
    ACTIVE = "active"
    PENDING = "pending"
    SOLD = "sold"


class ProspectStatus(str, Enum):
    RESEARCHING = "researching"
    OFFER_MADE = "offer_made"
    PASSED = "passed"
    WON = "won"
    LOST = "lost"


ACTIVE_PROSPECT_STATUSES = (ProspectStatus.RESEARCHING, ProspectStatus.OFFER_MADE)


class MaintenanceStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class MaintenanceCategory(str, Enum):
    PLUMBING = "plumbing"
    ELECTRICAL = "electrical"
    HVAC = "hvac"
    APPLIANCE = "appliance"
    STRUCTURAL = "structural"
    COSMETIC = "cosmetic"
    LANDSCAPING = "landscaping"
    OTHER = "other"


OPEN_MAINTENANCE_STATUSES = (MaintenanceStatus.PENDING, MaintenanceStatus.IN_PROGRESS)


INCOME_CATEGORIES = (
    "Rent",
    "Late Fee",
    "Pet Fee",
    "Application Fee",
    "Security Deposit",
    "Other Income",
)

EXPENSE_CATEGORIES = (
    "Mortgage",
    "Insurance",
    "Property Tax",
    "HOA",
    "Utilities",
    "Repairs",
    "Maintenance",
    "Property Management",
    "Landscaping",
    "Pest Control",
    "Legal",
    "Advertising",
    "Supplies",
    "Travel",
    "Other Expense",
)

# Schedule E line -> ledger categories
SCHEDULE_E_CATEGORIES: dict[str, tuple[str, ...]] = {
    "Advertising": ("Advertising",),
    "Auto and Travel": ("Travel",),
    "Cleaning and Maintenance": ("Maintenance", "Cleaning", "Landscaping", "Pest Control"),
    "Insurance": ("Insurance",),
    "Legal and Professional": ("Legal", "Tax Prep"),
    "Management Fees": ("Property Management",),
    "Mortgage Interest": ("Mortgage",),
    "Repairs": ("Repairs",),
    "Supplies": ("Supplies",),
    "Taxes": ("Property Tax",),
    "Utilities": ("Utilities", "HOA"),
    "Other": ("Other Expense",),
}


@dataclass(frozen=True)
class ParsedTransaction:
    """A bank statement row after parsing, before the user confirms it."""
    date: date
    description: str
    amount: Decimal  # Always positive; direction is in `type`
    type: TransactionType
    category: str


@dataclass(frozen=True)
class LedgerEntry:
    date: date
    amount: Decimal
    type: TransactionType
    category: str
    property_id: object | None = None


@dataclass(frozen=True)
class BudgetItem:
    category: str
    annual: Decimal
    monthly: tuple[Decimal, ...] = ()  # Empty = spread evenly


@dataclass(frozen=True)
class PropertySnapshot:
    id: object
    address: str
    city: str = ""
    status: PropertyStatus = PropertyStatus.ACTIVE
    current_value: Decimal = Decimal("0")
    mortgage_balance: Decimal = Decimal("0")


@dataclass
class BudgetLine:
    category: str
    budget: Decimal = Decimal("0")
    actual: Decimal = Decimal("0")
    variance: Decimal = Decimal("0")  # Budget - actual; positive = under budget
    variance_pct: Decimal = Decimal("0")
    monthly_budget: list[Decimal] = field(default_factory=list)
    monthly_actual: list[Decimal] = field(default_factory=list)


@dataclass
class BudgetReport:
    year: int
    lines: list[BudgetLine] = field(default_factory=list)
    total_budget: Decimal = Decimal("0")
    total_actual: Decimal = Decimal("0")
    total_variance: Decimal = Decimal("0")


@dataclass
class MonthlyTotals:
    month: str
    income: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")
    net: Decimal = Decimal("0")


@dataclass
class IncomeStatement:
    year: int
    income: Decimal = Decimal("0")
    expenses_by_category: dict[str, Decimal] = field(default_factory=dict)
    total_expenses: Decimal = Decimal("0")
    net_income: Decimal = Decimal("0")
    monthly: list[MonthlyTotals] = field(default_factory=list)


@dataclass
class ScheduleESummary:
    year: int
    rental_income: Decimal = Decimal("0")
    deductions: dict[str, Decimal] = field(default_factory=dict)
    total_deductions: Decimal = Decimal("0")
    net_rental_income: Decimal = Decimal("0")


@dataclass
class PropertyPerformance:
    property_id: object
    address: str
    city: str = ""
    income: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")
    cash_flow: Decimal = Decimal("0")
    value: Decimal = Decimal("0")
    equity: Decimal = Decimal("0")
    roi: Decimal = Decimal("0")  # Percent of equity


@dataclass
class PortfolioSummary:
    total_properties: int = 0
    portfolio_value: Decimal = Decimal("0")
    total_equity: Decimal = Decimal("0")
    monthly_cash_flow: Decimal = Decimal("0")
    active_prospects: int = 0


@dataclass(frozen=True)
class UpcomingTask:
    kind: str  # "lease" or "maintenance"
    task: str
    property: str  # Address
    date: date
    source_id: object = None
