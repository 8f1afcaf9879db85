"""Canonical test fixtures used across engine and API tests.

LTR fixture: $250K purchase, 20% down, 7% rate, 30yr fixed, $2,000/mo rent,
5% vacancy, $1,500 insurance, $3,000 taxes. No other expenses.
STR fixture: same financing, $150 ADR at 65% occupancy with default
seasonality weights.
"""

from dataclasses import replace
from decimal import Decimal

import pytest

from src.models.scenario import LTRScenario, STRScenario


@pytest.fixture
def canonical_ltr() -> LTRScenario:
    return LTRScenario(
        purchase_price=Decimal("250000"),
        down_payment_pct=Decimal("20"),
        interest_rate=Decimal("7.0"),
        loan_term_years=30,
        closing_costs=Decimal("5000"),
        rehab_budget=Decimal("0"),
        monthly_rent=Decimal("2000"),
        vacancy_rate_pct=Decimal("5"),
        insurance_annual=Decimal("1500"),
        taxes_annual=Decimal("3000"),
    )


@pytest.fixture
def canonical_ltr_with_growth(canonical_ltr) -> LTRScenario:
    """Canonical deal plus management, maintenance reserve and growth."""
    return replace(
        canonical_ltr,
        property_mgmt_pct=Decimal("8"),
        maintenance_reserve_pct=Decimal("5"),
        appreciation_rate_pct=Decimal("3"),
        rent_growth_rate_pct=Decimal("2"),
    )


@pytest.fixture
def canonical_str() -> STRScenario:
    return STRScenario(
        purchase_price=Decimal("250000"),
        down_payment_pct=Decimal("20"),
        interest_rate=Decimal("7.0"),
        loan_term_years=30,
        closing_costs=Decimal("5000"),
        avg_daily_rate=Decimal("150"),
        occupancy_rate_pct=Decimal("65"),
        property_mgmt_pct=Decimal("20"),
        listing_service_pct=Decimal("3"),
        cleaning_cost_per_turnover=Decimal("100"),
        turnovers_per_year=75,
        capital_reserve_pct=Decimal("5"),
        insurance_annual=Decimal("2500"),
        taxes_annual=Decimal("3000"),
        utilities_monthly=Decimal("200"),
        appreciation_rate_pct=Decimal("3"),
        adr_growth_rate_pct=Decimal("2"),
    )
