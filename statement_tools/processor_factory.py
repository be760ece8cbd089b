import os
from typing import List, Optional, Tuple

from .bank_detector import BankDetector
from .bank_processors.synovus.synovus_processor import SynovusProcessor
from .exceptions import PreconditionError, UnsupportedStatementError
from .logging_setup import get_logger

logger = get_logger(__name__)

PROCESSOR_CLASSES = {
    "synovus": SynovusProcessor,
}


class ProcessorFactory:
    """Routes statement PDFs to the processor of the bank that issued them"""

    def __init__(self, detector: Optional[BankDetector] = None):
        self.detector = detector or BankDetector()
        self.processor_classes = dict(PROCESSOR_CLASSES)

    def create_processor(self, pdf_path: str) -> Tuple[Optional[str], Optional[SynovusProcessor]]:
        """
        Detect bank and create appropriate processor
        Returns: (bank_name, processor_instance), (None, None) for unknown issuers
        """
        if pdf_path is None or not os.path.exists(pdf_path):
            raise PreconditionError(f"File does not exist: {pdf_path}")

        bank_name = self.detector.detect_bank(pdf_path)
        if not bank_name:
            logger.warning("Could not detect the issuer of %s", pdf_path)
            return None, None

        processor_class = self.processor_classes.get(bank_name)
        if not processor_class:
            logger.warning("No processor available for %s", bank_name)
            return bank_name, None

        logger.debug("Routing %s to the %s processor", pdf_path, bank_name)
        return bank_name, processor_class()

    def processor_for(self, pdf_paths: List[str]) -> SynovusProcessor:
        """The single processor able to read every file of a batch.

        Raises UnsupportedStatementError for a file no processor accepts or
        for a batch mixing issuers.
        """
        if not pdf_paths:
            raise PreconditionError("pdf_paths must contain at least one file")

        banks = {}
        for pdf_path in pdf_paths:
            bank_name, processor = self.create_processor(pdf_path)
            if processor is None:
                raise UnsupportedStatementError(f"Unsupported statement: {pdf_path}")
            banks.setdefault(bank_name, processor)

        if len(banks) > 1:
            raise UnsupportedStatementError(f"Statements from more than one bank: {', '.join(sorted(banks))}")
        return next(iter(banks.values()))

    def get_supported_banks(self) -> List[str]:
        """Get list of banks with available processors"""
        return list(self.processor_classes.keys())
