import os
from typing import List, Sequence, Tuple

from ...csv_export import export_to_csv
from ...exceptions import PreconditionError, UnsupportedStatementError
from ...interfaces.statement import Statement
from ...interfaces.transaction import Transaction
from ...logging_setup import get_logger
from ...pdf_text_extractor import extract_pages, read_author
from .synovus_config import get_synovus_config
from .synovus_parser import SynovusStatementReader

logger = get_logger(__name__)


class SynovusProcessor:
    """Synovus Bank specific PDF processor"""

    def __init__(self):
        self.config = get_synovus_config()
        self.reader = SynovusStatementReader(self.config)
        self.bank_name = self.config["bank_name"]

    def load_statement(self, pdf_path: str) -> Statement:
        """Read one statement PDF. Raises unless it parses and reconciles."""
        if pdf_path is None:
            raise PreconditionError("pdf_path can't be None")
        if not os.path.exists(pdf_path):
            raise PreconditionError(f"File does not exist: {pdf_path}")

        author = read_author(pdf_path)
        if author != self.config["pdf_author"]:
            raise UnsupportedStatementError(
                f"Expected a statement authored by '{self.config['pdf_author']}' but found '{author}': {pdf_path}"
            )

        pages = extract_pages(pdf_path)
        return self.reader.create_statement(pages)

    def extract_transactions(self, pdf_path: str) -> Tuple[str, List[Transaction]]:
        """
        Synovus specific transaction extraction
        Returns: (bank_name, list_of_transactions)
        """
        logger.info("Processing Synovus PDF: %s", pdf_path)
        statement = self.load_statement(pdf_path)
        logger.info("Extracted %d Synovus transactions", len(statement.transactions))
        return self.bank_name, list(statement.transactions)

    def transform_statements(self, output_path: str, input_paths: Sequence[str], add_header: bool = True) -> List[Transaction]:
        """Read every input statement and write all their transactions, oldest first, to one CSV"""
        if output_path is None:
            raise PreconditionError("output_path can't be None")
        if not input_paths:
            raise PreconditionError("input_paths must contain at least one file")

        all_transactions: List[Transaction] = []
        for input_path in input_paths:
            logger.info("Loading %s", input_path)
            statement = self.load_statement(input_path)
            logger.info("  Statement Date: %s", statement.statement_date.isoformat())
            logger.info("  Transactions: %d", len(statement.transactions))
            logger.info("  Credits: %.2f", statement.credits)
            logger.info("  Debits: %.2f", statement.debits)
            all_transactions.extend(statement.transactions)

        # sorted() is stable, so same-day transactions keep their statement order
        ordered = sorted(all_transactions, key=lambda t: t.date)
        export_to_csv(ordered, output_path, add_header=add_header)
        return ordered
