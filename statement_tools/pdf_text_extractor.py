"""Turns PDF pages into positioned text fragments using pdfplumber.

pdfplumber measures ``top``/``bottom`` from the top of the page; fragments use
the PDF convention of a bottom-left origin, so Y is flipped here. Each call
works on its own document and keeps no state between documents.
"""

from typing import List, Optional

import pdfplumber

from .exceptions import PreconditionError
from .interfaces.text_fragment import TextFragment
from .logging_setup import get_logger

logger = get_logger(__name__)

# Words closer than this (in points) are joined into one fragment, so
# multi-word labels like "Check Card Purchase" stay whole while table
# columns stay apart.
WORD_SETTINGS = {
    "keep_blank_chars": True,
    "x_tolerance": 1.5,
    "y_tolerance": 1.5,
    "use_text_flow": True,
}

COORDINATE_DIGITS = 2


def extract_page_fragments(page) -> List[TextFragment]:
    """Extract all text fragments of a pdfplumber page, in drawing order"""
    if page is None:
        raise PreconditionError("page can't be None")
    fragments = []
    for word in page.extract_words(**WORD_SETTINGS):
        text = (word.get("text") or "").strip()
        if not text:
            continue
        x = round(float(word["x0"]), COORDINATE_DIGITS)
        y = round(float(page.height) - float(word["bottom"]), COORDINATE_DIGITS)
        fragments.append(TextFragment.at(x, y, text))
    return fragments


def extract_pages(pdf_path: str) -> List[List[TextFragment]]:
    """One fragment list per page of the PDF"""
    with pdfplumber.open(pdf_path) as pdf:
        pages = [extract_page_fragments(page) for page in pdf.pages]
    logger.debug("Extracted %d pages from %s", len(pages), pdf_path)
    return pages


def read_author(pdf_path: str) -> Optional[str]:
    """The Author entry of the PDF's document info, if any"""
    with pdfplumber.open(pdf_path) as pdf:
        author = (pdf.metadata or {}).get("Author")
    return author.strip() if isinstance(author, str) else None


def extract_text(pdf_path: str, max_pages: int = 3) -> str:
    """Plain text of the first few pages, used for bank detection"""
    text_content = ""
    with pdfplumber.open(pdf_path) as pdf:
        for page in pdf.pages[:max_pages]:
            text_content += (page.extract_text() or "") + " "
    return text_content
