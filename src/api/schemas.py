"""Pydantic schemas for API request/response models.

Rate fields are whole-number percentages (7 means 7%) end to end.
"""

import datetime as dt
from datetime import date, datetime
from decimal import Decimal
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.models.ledger import (
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    MaintenanceCategory,
    MaintenanceStatus,
    PropertyStatus,
    ProspectStatus,
    TransactionType,
)
from src.models.property import ProspectListing
from src.models.scenario import (
    DEFAULT_SEASONALITY_WEIGHTS,
    LTRScenario,
    RentalType,
    SeasonalityMode,
    STRScenario,
)


# ---- Calculator ----

# Whole-number percentages of a price, rent or revenue
Percent = Annotated[Decimal, Field(ge=0, le=100)]
# Yearly growth; negative is decline, never below -100%
GrowthPercent = Annotated[Decimal, Field(gt=-100, le=100)]
Money = Annotated[Decimal, Field(ge=0, le=Decimal("1e12"))]


class LTRScenarioInput(BaseModel):
    # Purchase
    purchase_price: Money = Decimal("250000")
    down_payment_pct: Percent = Decimal("20")
    interest_rate: Percent = Decimal("7.0")
    loan_term_years: int = Field(30, ge=0, le=50)
    closing_costs: Money = Decimal("5000")
    rehab_budget: Money = Decimal("0")

    # Income
    monthly_rent: Money = Decimal("2000")
    vacancy_rate_pct: Percent = Decimal("5")

    # Expenses
    property_mgmt_pct: Percent = Decimal("0")
    insurance_annual: Money = Decimal("1500")
    taxes_annual: Money = Decimal("3000")
    maintenance_reserve_pct: Percent = Decimal("5")
    hoa_monthly: Money = Decimal("0")
    utilities_monthly: Money = Decimal("0")

    # Growth
    appreciation_rate_pct: GrowthPercent = Decimal("3")
    rent_growth_rate_pct: GrowthPercent = Decimal("2")

    def to_scenario(self) -> LTRScenario:
        return LTRScenario(**self.model_dump())


class STRScenarioInput(BaseModel):
    # Purchase
    purchase_price: Money = Decimal("250000")
    down_payment_pct: Percent = Decimal("20")
    interest_rate: Percent = Decimal("7.0")
    loan_term_years: int = Field(30, ge=0, le=50)
    closing_costs: Money = Decimal("5000")
    rehab_budget: Money = Decimal("0")

    # Income
    avg_daily_rate: Money = Decimal("150")
    occupancy_rate_pct: Percent = Decimal("65")
    seasonality: list[Money] = Field(
        default_factory=lambda: list(DEFAULT_SEASONALITY_WEIGHTS),
        min_length=12,
        max_length=12,
    )
    seasonality_mode: SeasonalityMode = SeasonalityMode.WEIGHT

    # Expenses
    property_mgmt_pct: Percent = Decimal("20")
    listing_service_pct: Percent = Decimal("3")
    cleaning_cost_per_turnover: Money = Decimal("100")
    turnovers_per_year: int = Field(75, ge=0, le=366)
    capital_reserve_pct: Percent = Decimal("5")
    insurance_annual: Money = Decimal("2500")
    taxes_annual: Money = Decimal("3000")
    hoa_monthly: Money = Decimal("0")
    utilities_monthly: Money = Decimal("200")

    # Growth
    appreciation_rate_pct: GrowthPercent = Decimal("3")
    adr_growth_rate_pct: GrowthPercent = Decimal("2")

    def to_scenario(self) -> STRScenario:
        data = self.model_dump()
        data["seasonality"] = tuple(data["seasonality"])
        return STRScenario(**data)


SCENARIO_INPUTS: dict[RentalType, type[LTRScenarioInput] | type[STRScenarioInput]] = {
    RentalType.LTR: LTRScenarioInput,
    RentalType.STR: STRScenarioInput,
}


class YearlyProjectionResponse(BaseModel):
    year: int
    property_value: Decimal
    equity: Decimal
    annual_rent: Decimal
    annual_cash_flow: Decimal
    cumulative_cash_flow: Decimal
    loan_balance: Decimal


class ProformaResponse(BaseModel):
    rental_type: RentalType

    gross_monthly_rent: Decimal
    effective_gross_income: Decimal
    total_monthly_expenses: Decimal
    monthly_mortgage_payment: Decimal
    monthly_cash_flow: Decimal

    gross_annual_rent: Decimal
    annual_vacancy_loss: Decimal
    effective_gross_annual_income: Decimal
    total_annual_expenses: Decimal
    annual_debt_service: Decimal
    annual_cash_flow: Decimal
    noi: Decimal

    total_cash_invested: Decimal
    loan_amount: Decimal
    cap_rate: Decimal
    cash_on_cash_return: Decimal
    dscr: Decimal

    yearly_projections: list[YearlyProjectionResponse]
    irr: Decimal
    npv: Decimal

    expense_breakdown: dict[str, Decimal] = {}
    monthly_revenue: list[Decimal] = []


# ---- Saved scenarios ----

class ScenarioCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    rental_type: RentalType
    scenario_data: dict = Field(default_factory=dict)
    prospect_id: UUID | None = None
    property_id: UUID | None = None


class ScenarioUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    rental_type: RentalType | None = None
    scenario_data: dict | None = None


class ScenarioResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    rental_type: RentalType
    scenario_data: dict
    prospect_id: UUID | None = None
    property_id: UUID | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# ---- Properties & tenants ----

class PropertyBase(BaseModel):
    address: str
    city: str = ""
    state: str = Field("", max_length=2)
    zip_code: str = Field("", max_length=10)
    purchase_price: Decimal | None = None
    purchase_date: date | None = None
    current_value: Decimal | None = None
    mortgage_balance: Decimal | None = None
    mortgage_rate: Decimal | None = None
    mortgage_payment: Decimal | None = None
    property_type: str | None = None
    bedrooms: int | None = None
    bathrooms: Decimal | None = None
    sqft: int | None = None
    lot_size: int | None = None
    year_built: int | None = None
    status: PropertyStatus = PropertyStatus.ACTIVE
    notes: str | None = None


class PropertyCreate(PropertyBase):
    pass


class PropertyUpdate(BaseModel):
    address: str | None = None
    city: str | None = None
    state: str | None = Field(None, max_length=2)
    zip_code: str | None = Field(None, max_length=10)
    purchase_price: Decimal | None = None
    purchase_date: date | None = None
    current_value: Decimal | None = None
    mortgage_balance: Decimal | None = None
    mortgage_rate: Decimal | None = None
    mortgage_payment: Decimal | None = None
    property_type: str | None = None
    bedrooms: int | None = None
    bathrooms: Decimal | None = None
    sqft: int | None = None
    lot_size: int | None = None
    year_built: int | None = None
    status: PropertyStatus | None = None
    notes: str | None = None


class PropertyResponse(PropertyBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TenantCreate(BaseModel):
    name: str
    email: str | None = None
    phone: str | None = None
    lease_start: date | None = None
    lease_end: date | None = None
    rent_amount: Decimal | None = None
    security_deposit: Decimal | None = None
    status: str = Field("active", pattern="^(active|past|pending)$")
    notes: str | None = None


class TenantResponse(TenantCreate):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    property_id: UUID


# ---- Maintenance & service providers ----

class MaintenanceCreate(BaseModel):
    date: date
    description: str = Field(..., min_length=1)
    cost: Decimal | None = Field(None, ge=0)
    vendor: str | None = None
    category: MaintenanceCategory | None = None
    status: MaintenanceStatus = MaintenanceStatus.PENDING
    notes: str | None = None


class MaintenanceUpdate(BaseModel):
    date: dt.date | None = None  # field name shadows the date type here
    description: str | None = Field(None, min_length=1)
    cost: Decimal | None = Field(None, ge=0)
    vendor: str | None = None
    category: MaintenanceCategory | None = None
    status: MaintenanceStatus | None = None
    notes: str | None = None


class MaintenanceResponse(MaintenanceCreate):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    property_id: UUID


class ServiceProviderCreate(BaseModel):
    name: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1, max_length=50)
    contact_name: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    rating: int | None = Field(None, ge=1, le=5)
    total_spend: Decimal | None = Field(None, ge=0)
    notes: str | None = None


class ServiceProviderUpdate(BaseModel):
    name: str | None = Field(None, min_length=1)
    type: str | None = Field(None, min_length=1, max_length=50)
    contact_name: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    rating: int | None = Field(None, ge=1, le=5)
    total_spend: Decimal | None = Field(None, ge=0)
    notes: str | None = None


class ServiceProviderResponse(ServiceProviderCreate):
    model_config = ConfigDict(from_attributes=True)

    id: UUID


# ---- Prospects ----

class ProspectBase(BaseModel):
    address: str
    city: str = ""
    state: str = Field("", max_length=2)
    zip_code: str = Field("", max_length=10)
    mls_number: str | None = None
    list_price: Decimal | None = None
    property_type: str | None = None
    bedrooms: int | None = None
    bathrooms: Decimal | None = None
    sqft: int | None = None
    lot_size: int | None = None
    year_built: int | None = None
    days_on_market: int | None = None
    status: ProspectStatus = ProspectStatus.RESEARCHING
    notes: str | None = None


class ProspectCreate(ProspectBase):
    # Raw RentCast record from a lookup or search, kept with the prospect
    api_data: dict | None = None


class ProspectUpdate(BaseModel):
    address: str | None = None
    city: str | None = None
    state: str | None = Field(None, max_length=2)
    zip_code: str | None = Field(None, max_length=10)
    mls_number: str | None = None
    list_price: Decimal | None = None
    property_type: str | None = None
    bedrooms: int | None = None
    bathrooms: Decimal | None = None
    sqft: int | None = None
    lot_size: int | None = None
    year_built: int | None = None
    days_on_market: int | None = None
    status: ProspectStatus | None = None
    notes: str | None = None


class ProspectResponse(ProspectBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    api_data: dict | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ListingLookupRequest(BaseModel):
    address: str = Field(..., description="Street address, or a full US address string")
    city: str = ""
    state: str = ""
    zip_code: str = ""


class ListingSearchRequest(BaseModel):
    city: str = ""
    state: str = Field("", max_length=2)
    zip_code: str = Field("", max_length=10)

    @model_validator(mode="after")
    def check_location(self):
        if not self.zip_code and not (self.city and self.state):
            raise ValueError("zip_code, or both city and state, are required")
        return self


class ListingResponse(BaseModel):
    street: str
    city: str
    state: str
    zip_code: str
    bedrooms: int
    bathrooms: Decimal
    sqft: int
    lot_sqft: int
    year_built: int
    property_type: str
    last_sale_price: Decimal
    last_sale_date: date | None = None
    annual_tax: Decimal
    listing_id: str = ""
    api_data: dict | None = None

    @classmethod
    def from_listing(cls, listing: ProspectListing) -> "ListingResponse":
        return cls(
            street=listing.address.street,
            city=listing.address.city,
            state=listing.address.state,
            zip_code=listing.address.zip_code,
            bedrooms=listing.bedrooms,
            bathrooms=listing.bathrooms,
            sqft=listing.sqft,
            lot_sqft=listing.lot_sqft,
            year_built=listing.year_built,
            property_type=listing.property_type,
            last_sale_price=listing.last_sale_price,
            last_sale_date=listing.last_sale_date,
            annual_tax=listing.annual_tax,
            listing_id=listing.listing_id,
            api_data=listing.raw_data or None,
        )


# ---- Transactions ----

class TransactionBase(BaseModel):
    property_id: UUID | None = None
    date: date
    amount: Decimal = Field(..., gt=0)
    type: TransactionType
    category: str = Field(..., min_length=1, max_length=50)
    description: str | None = None
    vendor: str | None = None


class TransactionCreate(TransactionBase):
    """A manually entered transaction; category must belong to its type."""

    @model_validator(mode="after")
    def check_category(self):
        allowed = INCOME_CATEGORIES if self.type == TransactionType.INCOME else EXPENSE_CATEGORIES
        if self.category not in allowed:
            raise ValueError(f"unknown {self.type.value} category: {self.category}")
        return self


class TransactionResponse(TransactionBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    imported_from: str
    external_id: str | None = None
    created_at: datetime | None = None


class ImportPreviewRequest(BaseModel):
    csv_text: str


class ParsedTransactionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    date: date
    description: str
    amount: Decimal
    type: TransactionType
    category: str


class ImportPreviewResponse(BaseModel):
    count: int
    transactions: list[ParsedTransactionResponse]


class ImportRequest(BaseModel):
    property_id: UUID | None = None
    # Reviewed CSV rows keep whatever category the import assigned
    transactions: list[TransactionBase] = Field(..., min_length=1)


class ImportResponse(BaseModel):
    count: int


# ---- Budget ----

class BudgetEntryCreate(BaseModel):
    property_id: UUID | None = None
    year: int = Field(..., ge=1900, le=2200)
    category: str = Field(..., min_length=1, max_length=50)
    annual_amount: Decimal = Field(..., ge=0)
    monthly_amounts: list[Decimal] | None = Field(None, min_length=12, max_length=12)


class BudgetEntryUpdate(BaseModel):
    category: str | None = Field(None, min_length=1, max_length=50)
    annual_amount: Decimal | None = Field(None, ge=0)
    monthly_amounts: list[Decimal] | None = Field(None, min_length=12, max_length=12)


class BudgetEntryResponse(BudgetEntryCreate):
    model_config = ConfigDict(from_attributes=True)

    id: UUID


class BudgetLineResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    category: str
    budget: Decimal
    actual: Decimal
    variance: Decimal
    variance_pct: Decimal
    monthly_budget: list[Decimal]
    monthly_actual: list[Decimal]


class BudgetReportResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    year: int
    lines: list[BudgetLineResponse]
    total_budget: Decimal
    total_actual: Decimal
    total_variance: Decimal


# ---- Reports ----

class MonthlyTotalsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    month: str
    income: Decimal
    expenses: Decimal
    net: Decimal


class IncomeStatementResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    year: int
    income: Decimal
    expenses_by_category: dict[str, Decimal]
    total_expenses: Decimal
    net_income: Decimal
    monthly: list[MonthlyTotalsResponse]


class ScheduleEResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    year: int
    rental_income: Decimal
    deductions: dict[str, Decimal]
    total_deductions: Decimal
    net_rental_income: Decimal


class PropertyPerformanceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    property_id: UUID
    address: str
    city: str
    income: Decimal
    expenses: Decimal
    cash_flow: Decimal
    value: Decimal
    equity: Decimal
    roi: Decimal


class PortfolioSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_properties: int
    portfolio_value: Decimal
    total_equity: Decimal
    monthly_cash_flow: Decimal
    active_prospects: int


class UpcomingTaskResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    kind: str
    task: str
    property: str
    date: date
    source_id: UUID | None = None
