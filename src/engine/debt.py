"""Fixed-rate mortgage math.

Pure functions: Decimal in, Decimal out. No I/O.
Rates are whole-number annual percentages (7 means 7%).
"""

from decimal import Decimal


def monthly_mortgage_payment(
    principal: Decimal, annual_rate_pct: Decimal, term_years: int
) -> Decimal:
    """Calculate fixed monthly mortgage payment.

    Returns 0 for a non-positive principal or term, and straight-line
    principal / n for an interest-free loan.
    """
    if principal <= 0 or term_years <= 0:
        return Decimal("0")

    n = term_years * 12
    if annual_rate_pct <= 0:
        return Decimal(principal) / n

    r = Decimal(annual_rate_pct) / 100 / 12
    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** n
    return principal * r * factor / (factor - 1)


def remaining_loan_balance(
    principal: Decimal,
    annual_rate_pct: Decimal,
    term_years: int,
    months_paid: int,
) -> Decimal:
    """Outstanding principal after `months_paid` payments.

    B = P(1+r)^m - M((1+r)^m - 1)/r, or linear reduction at 0%.
    """
    if principal <= 0 or months_paid >= term_years * 12:
        return Decimal("0")

    n = term_years * 12
    if annual_rate_pct <= 0:
        return principal - (Decimal(principal) / n) * months_paid

    r = Decimal(annual_rate_pct) / 100 / 12
    payment = monthly_mortgage_payment(principal, annual_rate_pct, term_years)
    growth = (1 + r) ** months_paid
    return principal * growth - payment * (growth - 1) / r
