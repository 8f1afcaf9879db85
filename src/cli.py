"""Terminal pro forma calculator.

Usage:
    python -m src.cli ltr --purchase-price 300000 --monthly-rent 2400
    python -m src.cli str --avg-daily-rate 180 --occupancy-rate-pct 70 --years 10
    python -m src.cli str --seasonality 140 140 150 160 180 210 230 230 190 160 140 150 --seasonality-mode rate
"""

import argparse
import sys
from decimal import Decimal, InvalidOperation

from pydantic import BaseModel, ValidationError

from src.api.schemas import LTRScenarioInput, STRScenarioInput
from src.config import settings
from src.engine.formatting import format_currency, format_percent
from src.engine.proforma import calculate_proforma, calculate_str_proforma
from src.models.results import ProformaResults
from src.models.scenario import MONTH_NAMES, SeasonalityMode

MIN_YEARS = 1
MAX_YEARS = 50


def _decimal(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")


def _years(value: str) -> int:
    """Projection horizon, held to the same 1-50 range as the API."""
    try:
        years = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a whole number: {value!r}")
    if not MIN_YEARS <= years <= MAX_YEARS:
        raise argparse.ArgumentTypeError(f"must be between {MIN_YEARS} and {MAX_YEARS}")
    return years


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


def _add_scenario_flags(parser: argparse.ArgumentParser, schema: type[BaseModel]) -> None:
    """One --flag per calculator field, defaulting to the calculator default."""
    for name, field in schema.model_fields.items():
        flag = f"--{name.replace('_', '-')}"
        default = field.get_default(call_default_factory=True)
        if name == "seasonality":
            parser.add_argument(flag, type=_decimal, nargs=12, default=default,
                                help="Twelve Jan-Dec weights or nightly rates")
        elif name == "seasonality_mode":
            parser.add_argument(flag, choices=[m.value for m in SeasonalityMode],
                                default=default.value)
        elif field.annotation is int:
            parser.add_argument(flag, type=int, default=default, help=f"(default: {default})")
        else:
            parser.add_argument(flag, type=_decimal, default=default, help=f"(default: {default})")


def print_summary(result: ProformaResults) -> None:
    _header(f"{result.rental_type.value.upper()} Pro Forma")
    print(f"  Cash Invested:        {format_currency(result.total_cash_invested)}")
    print(f"  Loan Amount:          {format_currency(result.loan_amount)}")
    print(f"  Mortgage Payment:     {format_currency(result.monthly_mortgage_payment, show_cents=True)}/mo")
    print()
    print(f"  Gross Income:         {format_currency(result.gross_annual_rent)}/yr")
    print(f"  Vacancy Loss:         {format_currency(result.annual_vacancy_loss)}/yr")
    print(f"  Operating Expenses:   {format_currency(result.total_annual_expenses)}/yr")
    print(f"  NOI:                  {format_currency(result.noi)}/yr")
    print(f"  Cash Flow:            {format_currency(result.monthly_cash_flow)}/mo "
          f"({format_currency(result.annual_cash_flow)}/yr)")
    print()
    print(f"  Cap Rate:             {format_percent(result.cap_rate, 2)}")
    print(f"  Cash-on-Cash:         {format_percent(result.cash_on_cash_return, 2)}")
    print(f"  DSCR:                 {result.dscr:.2f}")
    print(f"  IRR:                  {format_percent(result.irr, 2)}")
    print(f"  NPV:                  {format_currency(result.npv)}")

    if result.expense_breakdown:
        _header("Expenses (Year 1)")
        for name, amount in result.expense_breakdown.items():
            label = name.replace("_", " ").title()
            print(f"  {label:<22}{format_currency(amount):>12}")

    if result.monthly_revenue:
        _header("Monthly Revenue")
        for month, amount in zip(MONTH_NAMES, result.monthly_revenue):
            print(f"  {month:<22}{format_currency(amount):>12}")


def print_projections(result: ProformaResults) -> None:
    _header("Projections")
    print(f"  {'Year':>4}  {'Value':>12}  {'Loan':>12}  {'Equity':>12}  {'Income':>10}  {'Cash Flow':>10}")
    for p in result.yearly_projections:
        print(
            f"  {p.year:>4}  {format_currency(p.property_value):>12}"
            f"  {format_currency(p.loan_balance):>12}  {format_currency(p.equity):>12}"
            f"  {format_currency(p.annual_rent):>10}  {format_currency(p.annual_cash_flow):>10}"
        )
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rental property pro forma calculator")
    sub = parser.add_subparsers(dest="rental_type", required=True)

    for name, schema, help_text in (
        ("ltr", LTRScenarioInput, "Long-term rental"),
        ("str", STRScenarioInput, "Short-term rental"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        _add_scenario_flags(cmd, schema)
        cmd.add_argument("--years", type=_years, default=settings.default_projection_years,
                         help="Projection horizon in years")
        cmd.add_argument("--discount-rate", type=_decimal,
                         default=Decimal(str(settings.default_discount_rate)),
                         help="NPV discount rate, percent")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    schema = LTRScenarioInput if args.rental_type == "ltr" else STRScenarioInput
    fields = {name: getattr(args, name) for name in schema.model_fields}
    try:
        scenario = schema.model_validate(fields).to_scenario()
    except ValidationError as e:
        print(f"Invalid scenario: {e}", file=sys.stderr)
        return 2

    if args.rental_type == "ltr":
        result = calculate_proforma(scenario, args.years, args.discount_rate)
    else:
        result = calculate_str_proforma(scenario, args.years, args.discount_rate)

    print_summary(result)
    print_projections(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
