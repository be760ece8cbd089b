"""Rebuilds transaction rows of the Other Debits and Deposits/Other Credits sections.

Row heights vary with the number of description lines, so rows are split on
the MM-DD stamp that opens each of them. Columns shift slightly from line to
line, so they are told apart by rank (leftmost, second, ...) rather than by
absolute X.
"""

import re
from datetime import date, datetime
from typing import Dict, List, Optional, Sequence

from ...exceptions import AmbiguousMatchError, LookupNotFoundError, StructuralMismatchError
from ...interfaces.base_reader import parse_amount
from ...interfaces.text_fragment import TextFragment
from ...interfaces.transaction import Transaction
from ...logging_setup import get_logger
from .synovus_config import get_synovus_config
from .synovus_sections import SectionBand

logger = get_logger(__name__)


def is_row_marker(fragment: TextFragment, config=None) -> bool:
    pattern = (config or get_synovus_config())["row_marker_pattern"]
    return re.match(pattern, fragment.text) is not None


def parse_row_date(text: str, year: int, config=None) -> date:
    """Combine an MM-DD stamp with the statement year"""
    fmt = (config or get_synovus_config())["row_date_format"]
    try:
        return datetime.strptime(f"{text.strip()}-{year}", fmt).date()
    except ValueError:
        raise StructuralMismatchError(f"Unable to parse row date: '{text}' (year {year})") from None


def split_rows(fragments: Sequence[TextFragment], band: SectionBand, config=None) -> List[List[TextFragment]]:
    """Group the fragments strictly inside ``band`` into one list per row marker, top row first"""
    region = [f for f in fragments if band.bottom_y < f.y < band.top_y]
    bounds = sorted((f.y for f in region if is_row_marker(f, config)), reverse=True)
    bounds.append(band.bottom_y)

    rows = []
    for top, bottom in zip(bounds, bounds[1:]):
        rows.append([f for f in region if bottom < f.y <= top])
    return rows


def _single(column: List[TextFragment], name: str, row_y: float) -> TextFragment:
    criteria = {"column": name, "row_y": row_y}
    if not column:
        raise LookupNotFoundError(criteria)
    if len(column) > 1:
        raise AmbiguousMatchError(criteria, len(column))
    return column[0]


def assign_columns(row: Sequence[TextFragment], config=None) -> Dict[str, List[TextFragment]]:
    """Map each column name of the row's layout to the fragments in that column.

    The layout is chosen by the number of distinct X values in the row.
    """
    config = config or get_synovus_config()
    xs = sorted({f.x for f in row})
    layout = config["row_layouts"].get(len(xs))
    if layout is None:
        row_y = max((f.y for f in row), default=None)
        known = ", ".join(str(n) for n in sorted(config["row_layouts"]))
        raise StructuralMismatchError(
            f"Row at y={row_y} has {len(xs)} distinct columns; expected one of: {known}"
        )
    return {name: [f for f in row if f.x == x] for name, x in zip(layout, xs)}


def build_transaction(row: Sequence[TextFragment], are_credits: bool, year: int, config=None) -> Transaction:
    """Turn one row's fragments into a Transaction; amounts are negated unless ``are_credits``"""
    columns = assign_columns(row, config)
    row_y = max(f.y for f in row)

    date_fragment = _single(columns["date"], "date", row_y)
    type_fragment = _single(columns["transaction_type"], "transaction_type", row_y)
    amount_fragment = _single(columns["amount"], "amount", row_y)

    description: Optional[tuple] = None
    if "description" in columns:
        lines = sorted(columns["description"], key=lambda f: f.y, reverse=True)
        description = tuple(f.text for f in lines)

    amount = parse_amount(amount_fragment.text)
    if not are_credits:
        amount = -amount

    return Transaction(
        date=parse_row_date(date_fragment.text, year, config),
        transaction_type=type_fragment.text,
        description=description,
        amount=amount,
    )


def get_section_transactions(
    fragments: Sequence[TextFragment],
    band: SectionBand,
    are_credits: bool,
    year: int,
    config=None,
) -> List[Transaction]:
    """All transactions of one debits or credits section, top to bottom"""
    transactions = [build_transaction(row, are_credits, year, config) for row in split_rows(fragments, band, config)]
    logger.debug(
        "%d %s rows between y=%s and y=%s",
        len(transactions), "credit" if are_credits else "debit", band.bottom_y, band.top_y,
    )
    return transactions
