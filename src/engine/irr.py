"""IRR and NPV over annual cash-flow series.

Pure functions. No I/O.
"""

from decimal import Decimal
from typing import Sequence

MAX_ITERATIONS = 100
TOLERANCE = Decimal("0.0001")
MIN_DERIVATIVE = Decimal("1e-10")


def internal_rate_of_return(
    cash_flows: Sequence[Decimal], initial_guess: Decimal = Decimal("0.10")
) -> Decimal:
    """Compute IRR (as a percentage) with Newton-Raphson on the NPV function.

    cash_flows[0] is the initial (negative) investment.
    cash_flows[-1] should include sale proceeds.

    Iteration stops when a step moves the rate by less than 0.0001, after
    100 iterations, or when the NPV derivative flattens below 1e-10. In the
    last two cases the most recent rate is returned as-is: series with
    several sign changes (multiple roots) or no root at all come back
    unconverged rather than as an error.
    """
    rate = Decimal(initial_guess)

    for _ in range(MAX_ITERATIONS):
        base = 1 + rate
        if base == 0:
            break

        npv = Decimal("0")
        derivative = Decimal("0")
        for j, cf in enumerate(cash_flows):
            npv += cf / base ** j
            derivative -= j * cf / base ** (j + 1)

        if abs(derivative) < MIN_DERIVATIVE:
            break

        new_rate = rate - npv / derivative
        if abs(new_rate - rate) < TOLERANCE:
            return new_rate * 100

        rate = new_rate

    return rate * 100


def net_present_value(cash_flows: Sequence[Decimal], discount_rate_pct: Decimal) -> Decimal:
    """NPV = sum(cf[t] / (1 + rate)^t); cash_flows[0] is undiscounted."""
    base = 1 + Decimal(discount_rate_pct) / 100
    return sum(
        (cf / base ** year for year, cf in enumerate(cash_flows)),
        Decimal("0"),
    )
