"""Calculator routes: run an LTR or STR pro forma without saving anything."""

from decimal import Context, Decimal, ROUND_HALF_UP

from fastapi import APIRouter, Query

from src.api.schemas import (
    LTRScenarioInput,
    ProformaResponse,
    STRScenarioInput,
    YearlyProjectionResponse,
)
from src.config import settings
from src.engine.proforma import calculate_proforma, calculate_str_proforma
from src.models.results import ProformaResults

router = APIRouter(prefix="/api/v1/calculator", tags=["calculator"])

TWO_PLACES = Decimal("0.01")
FOUR_PLACES = Decimal("0.0001")
# Growth compounds over long horizons past the default 28 digits
WIDE = Context(prec=60)


def _money(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, ROUND_HALF_UP, WIDE)


def _ratio(value: Decimal) -> Decimal:
    return value.quantize(FOUR_PLACES, ROUND_HALF_UP, WIDE)


def result_to_response(result: ProformaResults) -> ProformaResponse:
    """Convert engine ProformaResults to API response, rounded for display."""
    yearly = [
        YearlyProjectionResponse(
            year=p.year,
            property_value=_money(p.property_value),
            equity=_money(p.equity),
            annual_rent=_money(p.annual_rent),
            annual_cash_flow=_money(p.annual_cash_flow),
            cumulative_cash_flow=_money(p.cumulative_cash_flow),
            loan_balance=_money(p.loan_balance),
        )
        for p in result.yearly_projections
    ]

    return ProformaResponse(
        rental_type=result.rental_type,
        gross_monthly_rent=_money(result.gross_monthly_rent),
        effective_gross_income=_money(result.effective_gross_income),
        total_monthly_expenses=_money(result.total_monthly_expenses),
        monthly_mortgage_payment=_money(result.monthly_mortgage_payment),
        monthly_cash_flow=_money(result.monthly_cash_flow),
        gross_annual_rent=_money(result.gross_annual_rent),
        annual_vacancy_loss=_money(result.annual_vacancy_loss),
        effective_gross_annual_income=_money(result.effective_gross_annual_income),
        total_annual_expenses=_money(result.total_annual_expenses),
        annual_debt_service=_money(result.annual_debt_service),
        annual_cash_flow=_money(result.annual_cash_flow),
        noi=_money(result.noi),
        total_cash_invested=_money(result.total_cash_invested),
        loan_amount=_money(result.loan_amount),
        cap_rate=_ratio(result.cap_rate),
        cash_on_cash_return=_ratio(result.cash_on_cash_return),
        dscr=_ratio(result.dscr),
        yearly_projections=yearly,
        irr=_ratio(result.irr),
        npv=_money(result.npv),
        expense_breakdown={k: _money(v) for k, v in result.expense_breakdown.items()},
        monthly_revenue=[_money(v) for v in result.monthly_revenue],
    )


@router.post("/ltr", response_model=ProformaResponse)
async def calculate_ltr(
    req: LTRScenarioInput,
    projection_years: int = Query(settings.default_projection_years, ge=1, le=50),
    discount_rate: Decimal = Query(Decimal(str(settings.default_discount_rate)), gt=-100),
):
    """Long-term rental pro forma for the submitted calculator fields."""
    result = calculate_proforma(req.to_scenario(), projection_years, discount_rate)
    return result_to_response(result)


@router.post("/str", response_model=ProformaResponse)
async def calculate_str(
    req: STRScenarioInput,
    projection_years: int = Query(settings.default_projection_years, ge=1, le=50),
    discount_rate: Decimal = Query(Decimal(str(settings.default_discount_rate)), gt=-100),
):
    """Short-term rental pro forma: seasonal revenue, no vacancy line."""
    result = calculate_str_proforma(req.to_scenario(), projection_years, discount_rate)
    return result_to_response(result)
