"""Geometric search over a page's text fragments.

PDF pages have their origin at the bottom left corner, so "above" means a
larger Y. Lower bounds (``on_or_above_*``) are inclusive and upper bounds
(``below_*``) are exclusive. A bound left as None does not filter.
"""

from collections import OrderedDict
from typing import Iterable, List, Optional

from .exceptions import AmbiguousMatchError, LookupNotFoundError, PreconditionError
from .interfaces.text_fragment import TextFragment
from .logging_setup import get_logger

logger = get_logger(__name__)


def _criteria(text, on_or_above_x, below_x, on_or_above_y, below_y) -> "OrderedDict[str, Optional[object]]":
    return OrderedDict([
        ("text", text),
        ("on_or_above_x", on_or_above_x),
        ("below_x", below_x),
        ("on_or_above_y", on_or_above_y),
        ("below_y", below_y),
    ])


def find_fragments(
    fragments: Iterable[TextFragment],
    text: Optional[str] = None,
    on_or_above_x: Optional[float] = None,
    below_x: Optional[float] = None,
    on_or_above_y: Optional[float] = None,
    below_y: Optional[float] = None,
    fail_if_empty: bool = True,
) -> List[TextFragment]:
    """Finds all fragments matching the given characteristics.

    ``text`` is compared against the whole fragment text, ignoring case.
    Raises LookupNotFoundError when nothing matches and ``fail_if_empty`` is set.
    """
    if fragments is None:
        raise PreconditionError("fragments can't be None")
    wanted = text.casefold() if text and text.strip() else None
    matches = [
        f for f in fragments
        if (on_or_above_x is None or f.x >= on_or_above_x)
        and (below_x is None or f.x < below_x)
        and (on_or_above_y is None or f.y >= on_or_above_y)
        and (below_y is None or f.y < below_y)
        and (wanted is None or f.text.casefold() == wanted)
    ]
    if fail_if_empty and not matches:
        raise LookupNotFoundError(_criteria(text, on_or_above_x, below_x, on_or_above_y, below_y))
    return matches


def find_fragment(
    fragments: Iterable[TextFragment],
    text: Optional[str] = None,
    on_or_above_x: Optional[float] = None,
    below_x: Optional[float] = None,
    on_or_above_y: Optional[float] = None,
    below_y: Optional[float] = None,
    fail_if_empty: bool = True,
) -> Optional[TextFragment]:
    """Finds the single fragment matching the given characteristics.

    More than one match is always an AmbiguousMatchError. No match is a
    LookupNotFoundError, or None when ``fail_if_empty`` is False.
    """
    matches = find_fragments(fragments, text, on_or_above_x, below_x, on_or_above_y, below_y, fail_if_empty)
    if len(matches) > 1:
        raise AmbiguousMatchError(_criteria(text, on_or_above_x, below_x, on_or_above_y, below_y), len(matches))
    return matches[0] if matches else None


def find_optional_fragment(
    fragments: Iterable[TextFragment],
    text: Optional[str] = None,
    on_or_above_x: Optional[float] = None,
    below_x: Optional[float] = None,
    on_or_above_y: Optional[float] = None,
    below_y: Optional[float] = None,
) -> Optional[TextFragment]:
    """Like find_fragment, but a missing fragment is an expected outcome and yields None"""
    return find_fragment(fragments, text, on_or_above_x, below_x, on_or_above_y, below_y, fail_if_empty=False)


def log_fragments(fragments: Iterable[TextFragment]) -> None:
    """Dump fragments at debug level, one ``(x, y) text`` per line"""
    for f in fragments:
        logger.debug("(%s, %s) %s", f.x, f.y, f.text)
