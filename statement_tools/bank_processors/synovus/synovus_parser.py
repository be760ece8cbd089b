import math
from datetime import date
from typing import List, Optional, Sequence

from ...exceptions import AmbiguousMatchError, LookupNotFoundError, PreconditionError, ReconciliationError
from ...interfaces.base_reader import BaseStatementReader, parse_amount
from ...interfaces.statement import BalanceSummary, Statement
from ...interfaces.text_fragment import TextFragment
from ...interfaces.transaction import Transaction
from ...logging_setup import get_logger
from ...text_query import find_fragment, find_fragments, find_optional_fragment, log_fragments
from .synovus_checks import get_checks
from .synovus_config import get_synovus_config
from .synovus_rows import get_section_transactions
from .synovus_sections import find_checks_section_bounds, find_credits_section_bounds, find_debits_section_bounds

logger = get_logger(__name__)


class SynovusStatementReader(BaseStatementReader):
    """Reads Synovus Bank statements from the positioned text of their pages"""

    def __init__(self, config=None):
        self.config = config or get_synovus_config()
        self.anchors = self.config["anchors"]
        super().__init__()

    def get_bank_name(self) -> str:
        return self.config["bank_name"]

    def get_detection_keywords(self) -> List[str]:
        return list(self.config["detection_keywords"])

    def create_statement(self, pages: Sequence[Sequence[TextFragment]]) -> Statement:
        """Build a statement from one fragment list per page.

        The first page carries the statement date and the balance summary.
        Raises ReconciliationError unless the extracted transactions add up to
        the summary figures.
        """
        if pages is None:
            raise PreconditionError("pages can't be None")
        if len(pages) == 0:
            raise PreconditionError("pages must contain at least one page")

        statement_date: Optional[date] = None
        summary: Optional[BalanceSummary] = None
        transactions: List[Transaction] = []
        for i, fragments in enumerate(pages):
            if fragments is None:
                raise PreconditionError(f"Page {i} can't be None")
            if i == 0:
                log_fragments(fragments)
                statement_date = self.find_statement_date(fragments)
                summary = self.find_balance_summary(fragments)
            page_transactions = self.get_transactions(fragments, statement_date.year)
            logger.debug("Page %d: %d transactions", i + 1, len(page_transactions))
            transactions.extend(page_transactions)

        self.reconcile(summary, transactions)
        return Statement(statement_date=statement_date, transactions=tuple(transactions), balance_summary=summary)

    def find_statement_date(self, fragments: Sequence[TextFragment]) -> date:
        """The date printed right of "This statement:", above "Last statement:" """
        this_statement = find_fragment(fragments, self.anchors["this_statement"])
        last_statement = find_fragment(fragments, self.anchors["last_statement"])
        date_fragment = find_fragment(
            fragments,
            on_or_above_x=this_statement.x + self.config["anchor_epsilon"],
            below_x=self.config["statement_date_right_stop"],
            on_or_above_y=this_statement.y,
            below_y=last_statement.y,
        )
        return self._parse_date(date_fragment.text, self.config["statement_date_formats"])

    def find_balance_summary(self, fragments: Sequence[TextFragment]) -> BalanceSummary:
        """Read the four balance summary figures off the first page.

        Values sit on the same line as their label, left of the "Low balance"
        column which prints unrelated figures on the same lines.
        """
        checks = find_optional_fragment(fragments, self.anchors["checks"])
        floor_y = checks.y if checks is not None else None

        low_balance = find_fragment(fragments, self.anchors["low_balance"], on_or_above_y=floor_y)
        beginning = find_fragment(fragments, self.anchors["beginning_balance"], on_or_above_y=floor_y)
        deposits = find_fragment(fragments, self.anchors["deposits_credits"], on_or_above_y=floor_y)
        withdrawals = find_fragment(fragments, self.anchors["withdrawals_debits"], on_or_above_y=floor_y)
        ending = find_fragment(fragments, self.anchors["ending_balance"], on_or_above_y=floor_y, below_y=withdrawals.y)

        summary = BalanceSummary(
            beginning_balance=self._value_beside(fragments, beginning, low_balance.x),
            credits=self._value_beside(fragments, deposits, low_balance.x),
            debits=self._value_beside(fragments, withdrawals, low_balance.x),
            ending_balance=self._value_beside(fragments, ending, low_balance.x),
        )
        logger.info(
            "Balance summary: beginning %.2f, credits %.2f, debits %.2f, ending %.2f",
            summary.beginning_balance, summary.credits, summary.debits, summary.ending_balance,
        )
        return summary

    def _value_beside(self, fragments: Sequence[TextFragment], label: TextFragment, right_stop: float) -> float:
        candidates = find_fragments(
            fragments,
            on_or_above_x=label.x + self.config["anchor_epsilon"],
            below_x=right_stop,
            on_or_above_y=label.y,
        )
        same_line = [f for f in candidates if f.y == label.y]
        criteria = {"beside": label.text, "y": label.y, "below_x": right_stop}
        if not same_line:
            raise LookupNotFoundError(criteria)
        if len(same_line) > 1:
            raise AmbiguousMatchError(criteria, len(same_line))
        return parse_amount(same_line[0].text)

    def get_transactions(self, fragments: Sequence[TextFragment], year: int) -> List[Transaction]:
        """All transactions on one page: other debits, then credits, then checks"""
        transactions: List[Transaction] = []

        band = find_debits_section_bounds(fragments, self.config)
        if band is not None:
            transactions.extend(get_section_transactions(fragments, band, False, year, self.config))

        band = find_credits_section_bounds(fragments, self.config)
        if band is not None:
            transactions.extend(get_section_transactions(fragments, band, True, year, self.config))

        # Checks continued on the next page are not picked up; reconcile() catches the shortfall
        band = find_checks_section_bounds(fragments, self.config)
        if band is not None:
            transactions.extend(get_checks(fragments, band, year, self.config))

        return transactions

    def reconcile(self, summary: BalanceSummary, transactions: Sequence[Transaction]) -> None:
        """Raise ReconciliationError unless the summary and the transactions agree"""
        precision = self.config["comparison_precision"]
        expected_ending = summary.beginning_balance + summary.credits - summary.debits
        if not math.isclose(summary.ending_balance, expected_ending, rel_tol=0.0, abs_tol=precision):
            raise ReconciliationError(
                "Mismatch validating balance summary. "
                f"Beginning balance ({summary.beginning_balance}) + credits ({summary.credits}) "
                f"- debits ({summary.debits}) != ending balance ({summary.ending_balance})"
            )

        credits = sum(t.amount for t in transactions if t.is_credit)
        if not math.isclose(credits, summary.credits, rel_tol=0.0, abs_tol=precision):
            raise ReconciliationError(
                f"Extracted credits ({credits:.2f}) don't match the balance summary ({summary.credits:.2f})"
            )

        debits = sum(t.amount for t in transactions if t.is_debit)
        if not math.isclose(debits, -summary.debits, rel_tol=0.0, abs_tol=precision):
            raise ReconciliationError(
                f"Extracted debits ({debits:.2f}) don't match the balance summary ({-summary.debits:.2f})"
            )
