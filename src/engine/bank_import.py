"""Bank statement CSV parsing with keyword categorization.

Exports from different banks disagree on column order, so each row is
scanned cell by cell for something that looks like a date, an amount and a
description rather than relying on a header mapping.

Pure functions. No I/O.
"""

import csv
import logging
import re
from datetime import date
from decimal import Decimal, InvalidOperation

from src.models.ledger import ParsedTransaction, TransactionType

logger = logging.getLogger(__name__)

US_DATE_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{2,4})$")
ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")
NUMBER_RE = re.compile(r"-?\d+\.?\d*")
BARE_NUMBER_RE = re.compile(r"^\d+\.?\d*$")

HEADER_HINTS = ("date", "description", "amount")

# (keywords, category, type); first match wins
CATEGORY_RULES: tuple[tuple[tuple[str, ...], str, TransactionType], ...] = (
    (("rent", "tenant"), "Rent", TransactionType.INCOME),
    (("mortgage", "loan"), "Mortgage", TransactionType.EXPENSE),
    (("insurance",), "Insurance", TransactionType.EXPENSE),
    (("home depot", "lowes", "repair"), "Repairs", TransactionType.EXPENSE),
    (("electric", "gas", "water", "utility"), "Utilities", TransactionType.EXPENSE),
    (("tax",), "Property Tax", TransactionType.EXPENSE),
)


def categorize_transaction(description: str) -> tuple[str, TransactionType]:
    """Guess ledger category and direction from a bank description."""
    desc = description.lower()
    for keywords, category, tx_type in CATEGORY_RULES:
        if any(k in desc for k in keywords):
            return category, tx_type
    return "Other", TransactionType.EXPENSE


def parse_date(cell: str) -> date | None:
    """M/D/YY, M/D/YYYY or YYYY-MM-DD; None if not a valid date."""
    m = US_DATE_RE.match(cell)
    if m:
        month, day, year = (int(g) for g in m.groups())
        if len(m.group(3)) == 2:
            year += 2000
    else:
        m = ISO_DATE_RE.match(cell)
        if not m:
            return None
        year, month, day = (int(g) for g in m.groups())

    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_amount(cell: str) -> Decimal | None:
    """First number in the cell once $ and thousands separators are removed."""
    m = NUMBER_RE.search(cell.replace("$", "").replace(",", ""))
    if not m:
        return None
    try:
        return Decimal(m.group(0))
    except InvalidOperation:
        return None


def _parse_row(cells: list[str]) -> ParsedTransaction | None:
    tx_date: date | None = None
    description = ""
    amount = Decimal("0")

    for cell in cells:
        parsed_date = parse_date(cell) if tx_date is None else None
        if parsed_date is not None:
            tx_date = parsed_date
        elif not amount:
            # text cells seen before the amount are left to the longest-cell fallback
            num = parse_amount(cell)
            if num:
                amount = abs(num)
        elif not description and len(cell) > 3 and not BARE_NUMBER_RE.match(cell):
            description = cell

    if not description:
        # ties go to the later cell
        description = max(reversed(cells), key=len)

    if tx_date is None or not description or amount <= 0:
        return None

    category, tx_type = categorize_transaction(description)
    return ParsedTransaction(
        date=tx_date,
        description=description,
        amount=amount,
        type=tx_type,
        category=category,
    )


def parse_bank_csv(text: str) -> list[ParsedTransaction]:
    """Parse a bank export into categorized transactions.

    Rows without a recognizable date, a non-zero amount and a description
    are skipped. Amounts are absolute; direction comes from categorization.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        return []

    header = lines[0].lower()
    if any(hint in header for hint in HEADER_HINTS):
        lines = lines[1:]

    parsed: list[ParsedTransaction] = []
    skipped = 0
    for row in csv.reader(lines, skipinitialspace=True):
        cells = [c.strip() for c in row if c.strip()]
        if len(cells) < 3:
            skipped += 1
            continue

        tx = _parse_row(cells)
        if tx is None:
            skipped += 1
            continue
        parsed.append(tx)

    if skipped:
        logger.debug("Skipped %d unparsable CSV rows", skipped)
    return parsed
