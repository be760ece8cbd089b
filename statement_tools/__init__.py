"""Reconstructs bank statement transactions from the positioned text of PDF pages."""

from .exceptions import (
    AmbiguousMatchError,
    LookupNotFoundError,
    PreconditionError,
    ReconciliationError,
    StatementParseError,
    StructuralMismatchError,
    UnsupportedStatementError,
)
from .interfaces import BalanceSummary, Statement, TextFragment, Transaction

__all__ = [
    'AmbiguousMatchError',
    'LookupNotFoundError',
    'PreconditionError',
    'ReconciliationError',
    'StatementParseError',
    'StructuralMismatchError',
    'UnsupportedStatementError',
    'BalanceSummary',
    'Statement',
    'TextFragment',
    'Transaction',
]

__version__ = "0.1.0"
