"""Pro forma orchestrator: long-term and short-term rental deal analysis.

Pure computation. No I/O. Scenario dataclass in, ProformaResults out.
"""

from decimal import Decimal
from typing import Callable

from src.models.results import ProformaResults, YearlyProjection
from src.models.scenario import LTRScenario, PurchaseTerms, RentalType, STRScenario

from src.engine.cashflow import appreciate, cap_rate, cash_on_cash, dscr, net_sale_proceeds
from src.engine.debt import monthly_mortgage_payment, remaining_loan_balance
from src.engine.irr import internal_rate_of_return, net_present_value
from src.engine.seasonality import calculate_str_revenue

DEFAULT_PROJECTION_YEARS = 30
DEFAULT_DISCOUNT_RATE = Decimal("8")


def _ltr_expenses(scenario: LTRScenario, annual_rent: Decimal) -> dict[str, Decimal]:
    """Annual operating expenses. Maintenance and management are % of gross rent."""
    return {
        "insurance": scenario.insurance_annual,
        "taxes": scenario.taxes_annual,
        "maintenance": annual_rent * scenario.maintenance_reserve_pct / 100,
        "property_management": annual_rent * scenario.property_mgmt_pct / 100,
        "hoa": scenario.hoa_monthly * 12,
        "utilities": scenario.utilities_monthly * 12,
    }


def _str_expenses(scenario: STRScenario, annual_revenue: Decimal) -> dict[str, Decimal]:
    """Annual operating expenses. Percentage lines scale with gross revenue."""
    return {
        "listing_fees": annual_revenue * scenario.listing_service_pct / 100,
        "cleaning": scenario.cleaning_cost_per_turnover * scenario.turnovers_per_year,
        "capital_reserve": annual_revenue * scenario.capital_reserve_pct / 100,
        "property_management": annual_revenue * scenario.property_mgmt_pct / 100,
        "insurance": scenario.insurance_annual,
        "taxes": scenario.taxes_annual,
        "hoa": scenario.hoa_monthly * 12,
        "utilities": scenario.utilities_monthly * 12,
    }


def _project(
    terms: PurchaseTerms,
    appreciation_rate_pct: Decimal,
    base_annual_income: Decimal,
    income_growth_pct: Decimal,
    year_cash_flow: Callable[[Decimal], Decimal],
    projection_years: int,
) -> tuple[list[YearlyProjection], list[Decimal]]:
    """Year-by-year value, equity and cash flow, plus the IRR cash-flow series.

    Income escalation starts in year 2: year 1 reflects the deal as underwritten.
    The final year carries net sale proceeds.
    """
    projections: list[YearlyProjection] = []
    cash_flows: list[Decimal] = [-terms.total_cash_invested]

    property_value = terms.purchase_price
    annual_income = base_annual_income
    cumulative = Decimal("0")

    for year in range(1, projection_years + 1):
        property_value = appreciate(property_value, appreciation_rate_pct)
        if year > 1:
            annual_income = appreciate(annual_income, income_growth_pct)

        cf = year_cash_flow(annual_income)
        cumulative += cf

        loan_balance = remaining_loan_balance(
            terms.loan_amount, terms.interest_rate, terms.loan_term_years, year * 12
        )

        projections.append(YearlyProjection(
            year=year,
            property_value=property_value,
            equity=property_value - loan_balance,
            annual_rent=annual_income,
            annual_cash_flow=cf,
            cumulative_cash_flow=cumulative,
            loan_balance=loan_balance,
        ))

        if year == projection_years:
            cash_flows.append(cf + net_sale_proceeds(property_value, loan_balance))
        else:
            cash_flows.append(cf)

    return projections, cash_flows


def calculate_proforma(
    scenario: LTRScenario,
    projection_years: int = DEFAULT_PROJECTION_YEARS,
    discount_rate_pct: Decimal = DEFAULT_DISCOUNT_RATE,
) -> ProformaResults:
    """Run the long-term rental pro forma.

    Returns monthly/annual income statement, cap rate, CoC, DSCR, a
    projection per year of the horizon, and IRR/NPV assuming a sale at the
    end of the horizon.
    """
    loan_amount = scenario.loan_amount
    total_cash_invested = scenario.total_cash_invested

    # Monthly
    gross_monthly_rent = scenario.monthly_rent
    monthly_vacancy_loss = gross_monthly_rent * scenario.vacancy_rate_pct / 100
    effective_gross_income = gross_monthly_rent - monthly_vacancy_loss
    mortgage_payment = monthly_mortgage_payment(
        loan_amount, scenario.interest_rate, scenario.loan_term_years
    )

    gross_annual_rent = gross_monthly_rent * 12
    expenses = _ltr_expenses(scenario, gross_annual_rent)
    total_monthly_expenses = sum(expenses.values(), Decimal("0")) / 12
    monthly_cash_flow = effective_gross_income - total_monthly_expenses - mortgage_payment

    # Annual
    effective_gross_annual_income = effective_gross_income * 12
    total_annual_expenses = total_monthly_expenses * 12
    annual_debt_service = mortgage_payment * 12
    annual_cash_flow = monthly_cash_flow * 12
    noi = effective_gross_annual_income - total_annual_expenses

    def year_cash_flow(annual_rent: Decimal) -> Decimal:
        effective = annual_rent - annual_rent * scenario.vacancy_rate_pct / 100
        year_expenses = sum(_ltr_expenses(scenario, annual_rent).values(), Decimal("0"))
        return effective - year_expenses - annual_debt_service

    projections, irr_cash_flows = _project(
        scenario,
        appreciation_rate_pct=scenario.appreciation_rate_pct,
        base_annual_income=gross_annual_rent,
        income_growth_pct=scenario.rent_growth_rate_pct,
        year_cash_flow=year_cash_flow,
        projection_years=projection_years,
    )

    return ProformaResults(
        rental_type=RentalType.LTR,
        gross_monthly_rent=gross_monthly_rent,
        effective_gross_income=effective_gross_income,
        total_monthly_expenses=total_monthly_expenses,
        monthly_mortgage_payment=mortgage_payment,
        monthly_cash_flow=monthly_cash_flow,
        gross_annual_rent=gross_annual_rent,
        annual_vacancy_loss=monthly_vacancy_loss * 12,
        effective_gross_annual_income=effective_gross_annual_income,
        total_annual_expenses=total_annual_expenses,
        annual_debt_service=annual_debt_service,
        annual_cash_flow=annual_cash_flow,
        noi=noi,
        total_cash_invested=total_cash_invested,
        loan_amount=loan_amount,
        cap_rate=cap_rate(noi, scenario.purchase_price),
        cash_on_cash_return=cash_on_cash(annual_cash_flow, total_cash_invested),
        dscr=dscr(noi, annual_debt_service),
        yearly_projections=projections,
        irr=internal_rate_of_return(irr_cash_flows),
        npv=net_present_value(irr_cash_flows, discount_rate_pct),
        expense_breakdown=expenses,
    )


def calculate_str_proforma(
    scenario: STRScenario,
    projection_years: int = DEFAULT_PROJECTION_YEARS,
    discount_rate_pct: Decimal = DEFAULT_DISCOUNT_RATE,
) -> ProformaResults:
    """Run the short-term rental pro forma.

    Revenue comes from ADR, occupancy and seasonality. Occupancy is already
    in revenue, so there is no vacancy loss: EGI equals gross revenue.
    """
    loan_amount = scenario.loan_amount
    total_cash_invested = scenario.total_cash_invested

    revenue = calculate_str_revenue(
        scenario.avg_daily_rate,
        scenario.occupancy_rate_pct,
        scenario.seasonality,
        scenario.seasonality_mode,
    )
    gross_annual_rent = revenue.annual_revenue

    mortgage_payment = monthly_mortgage_payment(
        loan_amount, scenario.interest_rate, scenario.loan_term_years
    )
    annual_debt_service = mortgage_payment * 12

    expenses = _str_expenses(scenario, gross_annual_rent)
    total_annual_expenses = sum(expenses.values(), Decimal("0"))
    noi = gross_annual_rent - total_annual_expenses
    annual_cash_flow = noi - annual_debt_service

    def year_cash_flow(annual_revenue: Decimal) -> Decimal:
        year_expenses = sum(_str_expenses(scenario, annual_revenue).values(), Decimal("0"))
        return annual_revenue - year_expenses - annual_debt_service

    projections, irr_cash_flows = _project(
        scenario,
        appreciation_rate_pct=scenario.appreciation_rate_pct,
        base_annual_income=gross_annual_rent,
        income_growth_pct=scenario.adr_growth_rate_pct,
        year_cash_flow=year_cash_flow,
        projection_years=projection_years,
    )

    return ProformaResults(
        rental_type=RentalType.STR,
        gross_monthly_rent=gross_annual_rent / 12,
        effective_gross_income=gross_annual_rent / 12,
        total_monthly_expenses=total_annual_expenses / 12,
        monthly_mortgage_payment=mortgage_payment,
        monthly_cash_flow=annual_cash_flow / 12,
        gross_annual_rent=gross_annual_rent,
        annual_vacancy_loss=Decimal("0"),
        effective_gross_annual_income=gross_annual_rent,
        total_annual_expenses=total_annual_expenses,
        annual_debt_service=annual_debt_service,
        annual_cash_flow=annual_cash_flow,
        noi=noi,
        total_cash_invested=total_cash_invested,
        loan_amount=loan_amount,
        cap_rate=cap_rate(noi, scenario.purchase_price),
        cash_on_cash_return=cash_on_cash(annual_cash_flow, total_cash_invested),
        dscr=dscr(noi, annual_debt_service),
        yearly_projections=projections,
        irr=internal_rate_of_return(irr_cash_flows),
        npv=net_present_value(irr_cash_flows, discount_rate_pct),
        expense_breakdown=expenses,
        monthly_revenue=revenue.monthly_revenue,
    )
