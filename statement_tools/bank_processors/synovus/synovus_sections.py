"""Locates the vertical bands holding each transaction section of a Synovus page.

Bands never span pages. A section whose top-level anchor is missing simply
isn't on the page; any other missing anchor means the template changed and
the lookup error propagates.
"""

from typing import NamedTuple, Optional, Sequence

from ...interfaces.text_fragment import TextFragment
from ...text_query import find_fragment, find_fragments, find_optional_fragment
from .synovus_config import get_synovus_config

# Used when nothing closes a section before the end of the page
PAGE_BOTTOM_Y = 0.0


class SectionBand(NamedTuple):
    """Y interval of a section's rows. ``top_y`` is the column header line."""
    bottom_y: float
    top_y: float


def find_debits_section_bounds(fragments: Sequence[TextFragment], config=None) -> Optional[SectionBand]:
    """Band for the Other Debits section, or None if the page has none"""
    anchors = (config or get_synovus_config())["anchors"]
    other_debits = find_optional_fragment(fragments, anchors["other_debits"])
    if other_debits is None:
        return None

    closing = find_optional_fragment(fragments, anchors["deposits_other_credits"], below_y=other_debits.y)
    if closing is None:
        closing = find_optional_fragment(fragments, anchors["balance_summary"], below_y=other_debits.y)
    bottom_y = closing.y if closing is not None else PAGE_BOTTOM_Y

    header = find_fragment(fragments, anchors["transaction_type"], on_or_above_y=bottom_y, below_y=other_debits.y)
    return SectionBand(bottom_y, header.y)


def find_credits_section_bounds(fragments: Sequence[TextFragment], config=None) -> Optional[SectionBand]:
    """Band for the Deposits/Other Credits section, or None if the page has none"""
    anchors = (config or get_synovus_config())["anchors"]
    deposits = find_optional_fragment(fragments, anchors["deposits_other_credits"])
    if deposits is None:
        return None

    balance_summary = find_optional_fragment(fragments, anchors["balance_summary"], below_y=deposits.y)
    bottom_y = balance_summary.y if balance_summary is not None else PAGE_BOTTOM_Y

    header = find_fragment(fragments, anchors["transaction_type"], on_or_above_y=bottom_y, below_y=deposits.y)
    return SectionBand(bottom_y, header.y)


def find_checks_section_bounds(fragments: Sequence[TextFragment], config=None) -> Optional[SectionBand]:
    """Band for the Checks subsection, which sits directly above Other Debits.

    The top is the first "Amount" column header under the "Checks" title.
    """
    config = config or get_synovus_config()
    anchors = config["anchors"]
    checks = find_optional_fragment(fragments, anchors["checks"])
    other_debits = find_optional_fragment(fragments, anchors["other_debits"])
    if checks is None or other_debits is None:
        return None

    bottom_y = other_debits.y + config["anchor_epsilon"]
    amount = find_fragments(fragments, anchors["amount"], on_or_above_y=bottom_y, below_y=checks.y)[0]
    return SectionBand(bottom_y, amount.y)
