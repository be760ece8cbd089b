"""Parses the Checks subsection.

Checks are printed two per line: ``number date amount   number date amount``.
A trailing ``*`` on a number flags a gap in the check sequence; the footnote
explaining it starts with ``*`` and is dropped.
"""

from collections import OrderedDict
from datetime import date
from typing import List, Sequence

from ...exceptions import StructuralMismatchError
from ...interfaces.base_reader import parse_amount
from ...interfaces.text_fragment import TextFragment
from ...interfaces.transaction import Transaction
from ...logging_setup import get_logger
from ...text_query import find_fragments
from .synovus_config import get_synovus_config
from .synovus_rows import is_row_marker, parse_row_date
from .synovus_sections import SectionBand

logger = get_logger(__name__)


def clean_check_number(text: str) -> str:
    return text.rstrip("* ").strip()


def split_check_slots(line: Sequence[TextFragment], config=None) -> List[Sequence[TextFragment]]:
    """Split one printed line into its left and (optional) right slot"""
    slot_size = len((config or get_synovus_config())["check_slot_fields"])
    ordered = sorted(line, key=lambda f: f.x)
    if len(ordered) == slot_size:
        return [ordered]
    if len(ordered) == 2 * slot_size:
        return [ordered[:slot_size], ordered[slot_size:]]
    row_y = ordered[0].y if ordered else None
    raise StructuralMismatchError(
        f"Checks line at y={row_y} has {len(ordered)} fragments; expected {slot_size} or {2 * slot_size}"
    )


def build_check(slot: Sequence[TextFragment], year: int, config=None) -> Transaction:
    config = config or get_synovus_config()
    fields = dict(zip(config["check_slot_fields"], slot))
    number = clean_check_number(fields["check_number"].text)
    check_date: date = parse_row_date(fields["date"].text, year, config)
    return Transaction(
        date=check_date,
        transaction_type=config["check_transaction_type"],
        description=(f"Check #{number}",),
        amount=-parse_amount(fields["amount"].text),
        check_number=number,
    )


def get_checks(fragments: Sequence[TextFragment], band: SectionBand, year: int, config=None) -> List[Transaction]:
    """All checks inside ``band``, line by line from the top, left slot before right slot"""
    config = config or get_synovus_config()
    footnote = config["check_footnote_prefix"]
    section = [
        f for f in find_fragments(fragments, on_or_above_y=band.bottom_y, below_y=band.top_y)
        if not f.text.startswith(footnote)
    ]
    line_ys = OrderedDict.fromkeys(sorted((f.y for f in section if is_row_marker(f, config)), reverse=True))

    transactions = []
    for line_y in line_ys:
        line = [f for f in section if f.y == line_y]
        for slot in split_check_slots(line, config):
            transactions.append(build_check(slot, year, config))

    logger.debug("%d checks between y=%s and y=%s", len(transactions), band.bottom_y, band.top_y)
    return transactions
