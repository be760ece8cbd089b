from dataclasses import dataclass
from datetime import date
from typing import Tuple

from .transaction import Transaction


@dataclass(frozen=True)
class BalanceSummary:
    """Figures printed in the statement's balance summary box"""
    beginning_balance: float
    credits: float
    debits: float
    ending_balance: float


@dataclass(frozen=True)
class Statement:
    """One parsed statement. Only ever built once its figures reconcile."""
    statement_date: date
    transactions: Tuple[Transaction, ...]
    balance_summary: BalanceSummary

    @property
    def credits(self) -> float:
        """Sum of all positive transaction amounts"""
        return sum(t.amount for t in self.transactions if t.is_credit)

    @property
    def debits(self) -> float:
        """Sum of all negative transaction amounts (a negative number)"""
        return sum(t.amount for t in self.transactions if t.is_debit)
