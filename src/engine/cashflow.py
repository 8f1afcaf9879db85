"""Cash flow ratios: cap rate, CoC return, DSCR.

Pure functions: Decimal in, Decimal out. No I/O. Each ratio degrades to 0
when its denominator is not positive.
"""

from decimal import Decimal

SELLING_COSTS_PCT = Decimal("6")  # Agent fees + closing at disposition


def cap_rate(noi: Decimal, purchase_price: Decimal) -> Decimal:
    """Cap rate (%) = NOI / purchase price x 100."""
    if purchase_price <= 0:
        return Decimal("0")
    return noi / purchase_price * 100


def cash_on_cash(annual_cash_flow: Decimal, total_cash_invested: Decimal) -> Decimal:
    """Cash-on-cash return (%) = annual cash flow / total cash invested x 100."""
    if total_cash_invested <= 0:
        return Decimal("0")
    return annual_cash_flow / total_cash_invested * 100


def dscr(noi: Decimal, annual_debt_service: Decimal) -> Decimal:
    """Debt Service Coverage Ratio = NOI / annual debt service."""
    if annual_debt_service <= 0:
        return Decimal("0")
    return noi / annual_debt_service


def appreciate(value: Decimal, rate_pct: Decimal) -> Decimal:
    """One year of compounding at a whole-number percent rate."""
    return value * (1 + Decimal(rate_pct) / 100)


def net_sale_proceeds(property_value: Decimal, loan_balance: Decimal) -> Decimal:
    """Equity released by a sale after selling costs and loan payoff."""
    return property_value * (1 - SELLING_COSTS_PCT / 100) - loan_balance
