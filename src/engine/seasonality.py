"""Short-term rental revenue from ADR, occupancy and monthly seasonality."""

from decimal import Decimal
from typing import Sequence

from src.models.results import STRRevenue
from src.models.scenario import DAYS_IN_MONTH, SeasonalityMode


def calculate_str_revenue(
    avg_daily_rate: Decimal,
    occupancy_rate_pct: Decimal,
    seasonality: Sequence[Decimal],
    mode: SeasonalityMode | str = SeasonalityMode.WEIGHT,
) -> STRRevenue:
    """Monthly and annual gross booking revenue.

    In rate mode each seasonality entry is that month's nightly rate; in
    weight mode it scales the average daily rate. Occupied nights use
    non-leap month lengths.
    """
    mode = SeasonalityMode(mode)
    adr = Decimal(str(avg_daily_rate))
    occupancy = Decimal(str(occupancy_rate_pct)) / 100

    monthly: list[Decimal] = []
    for days, entry in zip(DAYS_IN_MONTH, seasonality):
        entry = Decimal(str(entry))
        nightly = entry if mode is SeasonalityMode.RATE else adr * entry
        monthly.append(nightly * days * occupancy)

    return STRRevenue(
        monthly_revenue=monthly,
        annual_revenue=sum(monthly, Decimal("0")),
    )
