"""Display helpers for engine output (USD, whole-number percent)."""

from decimal import Decimal, ROUND_HALF_UP


def _round(value, decimals: int) -> Decimal:
    return Decimal(str(value)).quantize(Decimal(1).scaleb(-decimals), ROUND_HALF_UP)


def format_currency(value, show_cents: bool = False) -> str:
    """$1,234 (or $1,234.56 with cents); negatives render as -$1,234."""
    decimals = 2 if show_cents else 0
    amount = _round(value, decimals)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.{decimals}f}"


def format_currency_compact(value) -> str:
    """Chart-axis style: $1.2M, $250K, $950."""
    amount = Decimal(str(value))
    if abs(amount) >= 1_000_000:
        return f"${_round(amount / 1_000_000, 1)}M"
    if abs(amount) >= 1_000:
        return f"${_round(amount / 1_000, 0)}K"
    return f"${_round(amount, 0)}"


def format_percent(value, decimals: int = 1) -> str:
    return f"{_round(value, decimals)}%"
