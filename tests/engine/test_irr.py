from decimal import Decimal

from src.engine.irr import MAX_ITERATIONS, internal_rate_of_return, net_present_value


class CountingFlows(list):
    """Cash flows that count how many times the solver walks them."""

    passes = 0

    def __iter__(self):
        self.passes += 1
        return super().__iter__()


class TestIRR:
    def test_single_period(self):
        """Invest $100, get $110 after 1 year = 10% IRR."""
        irr = internal_rate_of_return([Decimal("-100"), Decimal("110")])
        assert abs(irr - Decimal("10")) < Decimal("0.01")

    def test_annuity(self):
        """$1,000 returning $500/yr for 3 years is ~23.38%."""
        cfs = [Decimal("-1000"), Decimal("500"), Decimal("500"), Decimal("500")]
        irr = internal_rate_of_return(cfs)
        assert Decimal("23.3") < irr < Decimal("23.45")

    def test_multi_year_with_sale(self):
        cfs = [Decimal("-100000"), Decimal("10000"), Decimal("10000"),
               Decimal("10000"), Decimal("10000"), Decimal("130000")]
        irr = internal_rate_of_return(cfs)
        assert Decimal("10") < irr < Decimal("20")

    def test_npv_is_zero_at_irr(self):
        cfs = [Decimal("-55000"), Decimal("2400"), Decimal("2600"), Decimal("80000")]
        irr = internal_rate_of_return(cfs)
        assert abs(net_present_value(cfs, irr)) < Decimal("1")

    def test_initial_guess(self):
        irr = internal_rate_of_return([Decimal("-100"), Decimal("110")], Decimal("0.5"))
        assert abs(irr - Decimal("10")) < Decimal("0.01")

    def test_flat_npv_returns_initial_guess(self):
        """A lone outflow has a zero derivative; the guess comes back unconverged."""
        assert internal_rate_of_return([Decimal("-100")]) == Decimal("10")
        assert internal_rate_of_return([]) == Decimal("10")

    def test_minus_one_guess_stops_immediately(self):
        """A -100% rate zeroes the discount base; the guess is returned untouched."""
        cfs = [Decimal("-100"), Decimal("110")]
        assert internal_rate_of_return(cfs, Decimal("-1")) == Decimal("-100")

    def test_no_root_stops_at_iteration_cap(self):
        """NPV of -100, +50, -100 is negative at every rate, so Newton never settles."""
        cfs = CountingFlows([Decimal("-100"), Decimal("50"), Decimal("-100")])
        irr = internal_rate_of_return(cfs)
        assert irr.is_finite()
        assert 0 < cfs.passes <= MAX_ITERATIONS


class TestNPV:
    def test_zero_discount_is_plain_sum(self):
        cfs = [Decimal("-1000"), Decimal("300"), Decimal("400"), Decimal("500")]
        assert net_present_value(cfs, Decimal("0")) == Decimal("200")

    def test_first_flow_undiscounted(self):
        assert net_present_value([Decimal("-100")], Decimal("50")) == Decimal("-100")

    def test_discounting(self):
        npv = net_present_value([Decimal("-100"), Decimal("110")], Decimal("10"))
        assert npv == Decimal("0")

    def test_higher_rate_lowers_npv(self):
        cfs = [Decimal("-1000"), Decimal("600"), Decimal("600")]
        assert net_present_value(cfs, Decimal("12")) < net_present_value(cfs, Decimal("5"))
