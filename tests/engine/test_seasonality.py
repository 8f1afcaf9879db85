from decimal import Decimal

from src.engine.seasonality import calculate_str_revenue
from src.models.scenario import DEFAULT_SEASONALITY_WEIGHTS, SeasonalityMode


class TestSTRRevenue:
    def test_weight_and_rate_modes_agree(self):
        """Uniform weight of 1 at $100 ADR equals a flat $100 nightly rate."""
        by_weight = calculate_str_revenue(
            Decimal("100"), Decimal("50"), [Decimal("1")] * 12, SeasonalityMode.WEIGHT
        )
        by_rate = calculate_str_revenue(
            Decimal("100"), Decimal("50"), [Decimal("100")] * 12, SeasonalityMode.RATE
        )
        assert by_weight.annual_revenue == by_rate.annual_revenue == Decimal("18250")

    def test_non_leap_year(self):
        result = calculate_str_revenue(
            Decimal("100"), Decimal("100"), [Decimal("1")] * 12, SeasonalityMode.WEIGHT
        )
        assert result.monthly_revenue[1] == Decimal("2800")  # Feb, 28 nights
        assert result.annual_revenue == Decimal("36500")

    def test_rate_mode_ignores_adr(self):
        rates = [Decimal("200")] * 12
        low = calculate_str_revenue(Decimal("50"), Decimal("60"), rates, SeasonalityMode.RATE)
        high = calculate_str_revenue(Decimal("500"), Decimal("60"), rates, SeasonalityMode.RATE)
        assert low.annual_revenue == high.annual_revenue

    def test_default_weights(self):
        result = calculate_str_revenue(
            Decimal("150"), Decimal("65"), DEFAULT_SEASONALITY_WEIGHTS
        )
        assert result.monthly_revenue[0] == Decimal("2418")
        assert result.monthly_revenue[6] == Decimal("3929.25")  # Jul, weight 1.3
        assert result.annual_revenue == Decimal("36240.75")

    def test_mode_accepts_string(self):
        result = calculate_str_revenue(Decimal("0"), Decimal("50"), [Decimal("120")] * 12, "rate")
        assert result.annual_revenue == Decimal("21900")

    def test_monthly_sums_to_annual(self):
        result = calculate_str_revenue(
            Decimal("175"), Decimal("72"), DEFAULT_SEASONALITY_WEIGHTS
        )
        assert len(result.monthly_revenue) == 12
        assert sum(result.monthly_revenue, Decimal("0")) == result.annual_revenue

    def test_zero_occupancy(self):
        result = calculate_str_revenue(Decimal("150"), Decimal("0"), DEFAULT_SEASONALITY_WEIGHTS)
        assert result.annual_revenue == Decimal("0")

    def test_plain_numbers_accepted(self):
        """Floats and ints behave like the equivalent Decimals in either mode."""
        weights = [1.0] * 12
        from_floats = calculate_str_revenue(150.5, 65, weights)
        from_decimals = calculate_str_revenue(
            Decimal("150.5"), Decimal("65"), [Decimal("1.0")] * 12
        )
        assert from_floats == from_decimals

        rated = calculate_str_revenue(0.0, 50.0, [100.0] * 12, SeasonalityMode.RATE)
        assert rated.annual_revenue == Decimal("18250")
