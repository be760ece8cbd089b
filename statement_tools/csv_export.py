"""Writes transactions out as ``Date,Description,Amount`` CSV lines."""

import csv
from typing import Iterable, List

import pandas as pd

from .interfaces.transaction import Transaction
from .logging_setup import get_logger

logger = get_logger(__name__)

CSV_COLUMNS = ["Date", "Description", "Amount"]

# Plain comma-joined lines: commas are already stripped from descriptions, nothing is quoted
CSV_OPTIONS = {
    "index": False,
    "float_format": "%.2f",
    "quoting": csv.QUOTE_NONE,
    "lineterminator": "\n",
}


def format_short_date(value) -> str:
    """``M/D/YYYY`` without zero padding"""
    return f"{value.month}/{value.day}/{value.year}"


def build_transactions_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    """One row per transaction, oldest first. Transactions on the same date keep their order."""
    ordered = sorted(transactions, key=lambda t: t.date)
    data = []
    for txn in ordered:
        data.append({
            "Date": format_short_date(txn.date),
            "Description": txn.display_description().replace(",", " "),
            "Amount": txn.amount,
        })
    return pd.DataFrame(data, columns=CSV_COLUMNS)


def build_csv_rows(transactions: Iterable[Transaction], add_header: bool = True) -> List[str]:
    df = build_transactions_frame(transactions)
    csv_text = df.to_csv(header=add_header, **CSV_OPTIONS)
    return csv_text.splitlines()


def export_to_csv(transactions: Iterable[Transaction], output_path: str, add_header: bool = True) -> None:
    """Export transactions to CSV in the standardized format"""
    df = build_transactions_frame(transactions)
    df.to_csv(output_path, header=add_header, encoding="utf-8", **CSV_OPTIONS)
    logger.info("Exported %d transactions to %s", len(df), output_path)
