from decimal import Decimal

from src.engine.debt import monthly_mortgage_payment, remaining_loan_balance

CENTS = Decimal("0.01")


class TestMonthlyMortgagePayment:
    def test_standard_mortgage(self):
        """$200K loan at 7% for 30 years."""
        pmt = monthly_mortgage_payment(Decimal("200000"), Decimal("7.0"), 30)
        assert pmt.quantize(CENTS) == Decimal("1330.60")

    def test_larger_loan(self):
        pmt = monthly_mortgage_payment(Decimal("400000"), Decimal("7"), 30)
        assert pmt.quantize(CENTS) == Decimal("2661.21")

    def test_zero_rate_is_straight_line(self):
        assert monthly_mortgage_payment(Decimal("1200"), Decimal("0"), 10) == Decimal("10")
        assert monthly_mortgage_payment(Decimal("360000"), Decimal("0"), 30) == Decimal("1000")

    def test_zero_principal(self):
        assert monthly_mortgage_payment(Decimal("0"), Decimal("7"), 30) == Decimal("0")

    def test_negative_principal(self):
        assert monthly_mortgage_payment(Decimal("-5000"), Decimal("7"), 30) == Decimal("0")

    def test_zero_term(self):
        assert monthly_mortgage_payment(Decimal("200000"), Decimal("7"), 0) == Decimal("0")


class TestRemainingLoanBalance:
    def test_no_payments_made(self):
        bal = remaining_loan_balance(Decimal("200000"), Decimal("7"), 30, 0)
        assert bal == Decimal("200000")

    def test_fully_amortized_at_term(self):
        assert remaining_loan_balance(Decimal("200000"), Decimal("7"), 30, 360) == Decimal("0")

    def test_past_term(self):
        assert remaining_loan_balance(Decimal("200000"), Decimal("7"), 30, 400) == Decimal("0")

    def test_last_month_leaves_one_payment(self):
        """One month before payoff, the balance is roughly one payment of principal."""
        pmt = monthly_mortgage_payment(Decimal("200000"), Decimal("7"), 30)
        bal = remaining_loan_balance(Decimal("200000"), Decimal("7"), 30, 359)
        assert Decimal("0") < bal < pmt

    def test_balance_decreases(self):
        balances = [
            remaining_loan_balance(Decimal("200000"), Decimal("7"), 30, m)
            for m in range(0, 361, 12)
        ]
        for earlier, later in zip(balances, balances[1:]):
            assert later < earlier

    def test_matches_month_by_month_amortization(self):
        principal = Decimal("200000")
        r = Decimal("7") / 100 / 12
        pmt = monthly_mortgage_payment(principal, Decimal("7"), 30)

        balance = principal
        for _ in range(60):
            balance = balance + balance * r - pmt

        closed_form = remaining_loan_balance(principal, Decimal("7"), 30, 60)
        assert abs(closed_form - balance) < CENTS

    def test_zero_rate_linear(self):
        assert remaining_loan_balance(Decimal("1200"), Decimal("0"), 10, 60) == Decimal("600")

    def test_zero_principal(self):
        assert remaining_loan_balance(Decimal("0"), Decimal("7"), 30, 12) == Decimal("0")
