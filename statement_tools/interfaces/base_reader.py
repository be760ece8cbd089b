from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import List, Sequence

from ..exceptions import StructuralMismatchError
from .statement import Statement
from .text_fragment import TextFragment


class BaseStatementReader(ABC):
    """Abstract base class for issuer-specific statement readers"""

    def __init__(self):
        self.bank_name = self.get_bank_name()
        self.detection_keywords = self.get_detection_keywords()

    @abstractmethod
    def get_bank_name(self) -> str:
        """Return the bank name identifier"""
        pass

    @abstractmethod
    def get_detection_keywords(self) -> List[str]:
        """Return keywords to detect this bank type from PDF content"""
        pass

    @abstractmethod
    def create_statement(self, pages: Sequence[Sequence[TextFragment]]) -> Statement:
        """Build a reconciled statement out of one fragment list per page"""
        pass

    def keyword_score(self, pdf_text: str) -> int:
        """Number of detection keywords present in the PDF text"""
        pdf_upper = pdf_text.upper()
        return sum(1 for keyword in self.detection_keywords if keyword in pdf_upper)

    def can_parse(self, pdf_text: str, min_score: int = 1) -> bool:
        """Check if this reader can handle the given PDF content"""
        return self.keyword_score(pdf_text) >= min_score

    # Common utility methods that all readers can use
    def _parse_date(self, text: str, formats: Sequence[str]) -> date:
        """Parse a date trying each format in turn"""
        for fmt in formats:
            try:
                return datetime.strptime(text.strip(), fmt).date()
            except ValueError:
                continue
        raise StructuralMismatchError(f"Unable to parse date: '{text}' (tried {', '.join(formats)})")


def parse_amount(text: str) -> float:
    """Parse a printed money figure such as ``1,234.56`` or ``$17.36``"""
    cleaned = text.replace("$", "").replace(",", "").strip()
    try:
        return float(cleaned)
    except ValueError:
        raise StructuralMismatchError(f"Unable to parse amount: '{text}'") from None
