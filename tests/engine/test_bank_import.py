from datetime import date
from decimal import Decimal

from src.engine.bank_import import (
    categorize_transaction,
    parse_amount,
    parse_bank_csv,
    parse_date,
)
from src.models.ledger import TransactionType

SAMPLE_CSV = """Date,Description,Amount
01/15/2024,"Tenant rent, unit A","$1,500.00"
01/20/2024,HOME DEPOT,-245.67
2024-02-01,Mortgage payment,-1330.60
"""


class TestParseBankCSV:
    def test_parses_rows(self):
        rows = parse_bank_csv(SAMPLE_CSV)
        assert len(rows) == 3

        rent = rows[0]
        assert rent.date == date(2024, 1, 15)
        assert rent.description == "Tenant rent, unit A"
        assert rent.amount == Decimal("1500.00")
        assert rent.category == "Rent"
        assert rent.type == TransactionType.INCOME

    def test_amounts_are_absolute(self):
        rows = parse_bank_csv(SAMPLE_CSV)
        assert rows[1].amount == Decimal("245.67")
        assert rows[1].category == "Repairs"
        assert rows[1].type == TransactionType.EXPENSE

    def test_iso_dates(self):
        rows = parse_bank_csv(SAMPLE_CSV)
        assert rows[2].date == date(2024, 2, 1)
        assert rows[2].category == "Mortgage"

    def test_column_order_does_not_matter(self):
        text = "Amount,Date,Memo\n-89.99,03/02/2024,City water utility\n"
        rows = parse_bank_csv(text)
        assert len(rows) == 1
        assert rows[0].date == date(2024, 3, 2)
        assert rows[0].amount == Decimal("89.99")
        assert rows[0].category == "Utilities"

    def test_type_column_first(self):
        text = (
            "Details,Posting Date,Description,Amount\n"
            "CREDIT,01/15/2024,TENANT RENT UNIT A,1500.00\n"
            "DEBIT,01/18/2024,STATE FARM INSURANCE,-210.00\n"
        )
        rent, insurance = parse_bank_csv(text)
        assert rent.description == "TENANT RENT UNIT A"
        assert rent.category == "Rent"
        assert rent.type == TransactionType.INCOME
        assert insurance.description == "STATE FARM INSURANCE"
        assert insurance.amount == Decimal("210.00")

    def test_description_tie_prefers_later_cell(self):
        rows = parse_bank_csv("Date,Description,Amount\n01/20/2024,HOME DEPOT,-45.00\n")
        assert rows[0].description == "HOME DEPOT"

    def test_headerless_file(self):
        text = "01/15/2024,Tenant payment,1500\n01/16/2024,Insurance premium,-900\n"
        rows = parse_bank_csv(text)
        assert [r.category for r in rows] == ["Rent", "Insurance"]

    def test_single_line_is_empty(self):
        assert parse_bank_csv("01/15/2024,Tenant payment,1500") == []

    def test_garbage_is_empty(self):
        assert parse_bank_csv("hello\nworld\nnot a statement") == []

    def test_empty_text(self):
        assert parse_bank_csv("") == []

    def test_short_rows_skipped(self):
        text = "Date,Description,Amount\n01/15/2024,,1500\n01/16/2024,Tenant rent,1500\n"
        rows = parse_bank_csv(text)
        assert len(rows) == 1
        assert rows[0].date == date(2024, 1, 16)

    def test_zero_amount_skipped(self):
        text = "Date,Description,Amount\n01/15/2024,Tenant rent,0.00\n01/16/2024,Tenant rent,10\n"
        rows = parse_bank_csv(text)
        assert len(rows) == 1
        assert rows[0].amount == Decimal("10")

    def test_row_without_date_skipped(self):
        text = "Date,Description,Amount\nyesterday,Tenant rent,1500\n01/16/2024,Tenant rent,1500\n"
        assert len(parse_bank_csv(text)) == 1


class TestCategorize:
    def test_rent_is_income(self):
        assert categorize_transaction("ZELLE FROM TENANT") == ("Rent", TransactionType.INCOME)

    def test_rules_in_order(self):
        assert categorize_transaction("Loan servicing")[0] == "Mortgage"
        assert categorize_transaction("State Farm Insurance")[0] == "Insurance"
        assert categorize_transaction("Lowes store")[0] == "Repairs"
        assert categorize_transaction("Electric company")[0] == "Utilities"
        assert categorize_transaction("County tax bill")[0] == "Property Tax"

    def test_first_match_wins(self):
        # Mentions both rent and insurance; rent rule comes first
        assert categorize_transaction("Renters insurance refund")[0] == "Rent"

    def test_fallback(self):
        assert categorize_transaction("Coffee shop") == ("Other", TransactionType.EXPENSE)


class TestParsers:
    def test_us_dates(self):
        assert parse_date("1/5/24") == date(2024, 1, 5)
        assert parse_date("12/31/2023") == date(2023, 12, 31)

    def test_iso_date(self):
        assert parse_date("2024-02-29") == date(2024, 2, 29)

    def test_invalid_dates(self):
        assert parse_date("13/45/2024") is None
        assert parse_date("2023-02-29") is None
        assert parse_date("Tenant rent") is None

    def test_amounts(self):
        assert parse_amount("$1,500.00") == Decimal("1500.00")
        assert parse_amount("-245.67") == Decimal("-245.67")
        assert parse_amount("no digits") is None
