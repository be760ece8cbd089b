from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from ..exceptions import PreconditionError


@dataclass(frozen=True)
class Transaction:
    """A single statement line. Negative amounts are debits, positive amounts are credits.

    Time of day is not available on statements, so ``date`` is a plain date.
    ``description`` lines are in top-to-bottom order, or None when the row has none.
    """
    date: date
    transaction_type: str
    description: Optional[Tuple[str, ...]]
    amount: float
    check_number: Optional[str] = None

    def __post_init__(self):
        if self.transaction_type is None:
            raise PreconditionError("transaction_type can't be None")
        if self.description is not None and not isinstance(self.description, tuple):
            object.__setattr__(self, "description", tuple(self.description))

    @property
    def is_credit(self) -> bool:
        return self.amount > 0

    @property
    def is_debit(self) -> bool:
        return self.amount < 0

    def display_description(self) -> str:
        """Description lines joined by two spaces, or the transaction type when there are none"""
        if self.description is None:
            return self.transaction_type
        return "  ".join(self.description)
