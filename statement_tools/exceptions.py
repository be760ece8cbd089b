"""Errors raised while turning statement pages into transactions.

Every error aborts the parse of the current document. Nothing in the package
catches these to fall back to a partial result.
"""

from typing import Dict, Optional


class StatementParseError(Exception):
    """Base class for all statement parsing failures"""


class LookupNotFoundError(StatementParseError, LookupError):
    """A required anchor or element is missing under the given geometric constraints"""

    def __init__(self, criteria: Dict[str, Optional[object]]):
        self.criteria = dict(criteria)
        super().__init__(f"Unable to find text fragment matching: '{format_criteria(self.criteria)}'")


class AmbiguousMatchError(StatementParseError):
    """A search that must yield exactly one fragment yielded several"""

    def __init__(self, criteria: Dict[str, Optional[object]], count: int):
        self.criteria = dict(criteria)
        self.count = count
        super().__init__(
            f"Expected exactly one text fragment but found {count} matching: '{format_criteria(self.criteria)}'"
        )


class StructuralMismatchError(StatementParseError, ValueError):
    """A row or checks line does not match any known layout"""


class ReconciliationError(StatementParseError):
    """Extracted transactions do not agree with the statement's balance summary"""


class PreconditionError(StatementParseError, ValueError):
    """Required input is missing or empty"""


class UnsupportedStatementError(PreconditionError):
    """The document is not a statement of a supported issuer"""


def format_criteria(criteria: Dict[str, Optional[object]]) -> str:
    """Render search criteria as ``name: value`` pairs, ``(none)`` for absent ones."""
    parts = []
    for name, value in criteria.items():
        if value is None or (isinstance(value, str) and not value.strip()):
            shown = "(none)"
        else:
            shown = str(value)
        parts.append(f"{name}: {shown}")
    return ", ".join(parts)
