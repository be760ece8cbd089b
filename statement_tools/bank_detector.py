from typing import Dict, Optional

from .bank_processors.synovus.synovus_parser import SynovusStatementReader
from .interfaces.base_reader import BaseStatementReader
from .logging_setup import get_logger
from .pdf_text_extractor import extract_text, read_author

logger = get_logger(__name__)


class BankDetector:
    """Tells which issuer a statement PDF comes from"""

    def __init__(self, min_keyword_score: int = 2):
        synovus = SynovusStatementReader()
        self.readers: Dict[str, BaseStatementReader] = {synovus.bank_name: synovus}
        self.authors: Dict[str, str] = {synovus.bank_name: synovus.config["pdf_author"]}
        self.min_keyword_score = min_keyword_score

    def detect_bank(self, pdf_path: str) -> Optional[str]:
        """Detect which bank this PDF belongs to.

        The PDF author is authoritative; keyword scoring over the first pages
        is the fallback for documents without one.
        """
        author = read_author(pdf_path)
        if author:
            for bank_name, expected in self.authors.items():
                if author.casefold() == expected.casefold():
                    logger.info("Detected %s from PDF author", bank_name)
                    return bank_name

        text_content = extract_text(pdf_path)
        if not text_content.strip():
            logger.warning("Could not extract text from %s", pdf_path)
            return None

        for bank_name, reader in self.readers.items():
            logger.debug("%s detection score: %d", bank_name, reader.keyword_score(text_content))
            if reader.can_parse(text_content, self.min_keyword_score):
                logger.info("Detected %s from statement text", bank_name)
                return bank_name

        logger.info("No bank patterns matched %s", pdf_path)
        return None
