"""Synovus Bank specific configurations"""

SYNOVUS_CONFIG = {
    "bank_name": "synovus",
    "pdf_author": "Synovus Bank",
    "detection_keywords": [
        "SYNOVUS",
        "PRO BUSINESS CHECKING",
        "SUMMARY OF ACCOUNT BALANCE",
    ],
    # English only for now
    "anchors": {
        "amount": "Amount",
        "balance_summary": "Balance Summary",
        "checks": "Checks",
        "deposits_other_credits": "Deposits/Other Credits",
        "last_statement": "Last statement:",
        "other_debits": "Other Debits",
        "this_statement": "This statement:",
        "transaction_type": "Transaction Type",
        "beginning_balance": "Beginning balance",
        "deposits_credits": "Deposits/Credits",
        "withdrawals_debits": "Withdrawals/Debits",
        "ending_balance": "Ending balance",
        "low_balance": "Low balance",
    },
    # Short MM-DD stamp printed once at the start of every transaction row
    "row_marker_pattern": r"^\d\d-\d\d$",
    "row_date_format": "%m-%d-%Y",
    "statement_date_formats": ["%B %d, %Y", "%b %d, %Y", "%m/%d/%Y", "%m/%d/%y"],
    # The statement date sits left of this X on the first page
    "statement_date_right_stop": 500.0,
    "anchor_epsilon": 0.01,
    "comparison_precision": 0.001,
    # Distinct column count -> meaning of each column, left to right
    "row_layouts": {
        3: ("date", "transaction_type", "amount"),
        4: ("date", "transaction_type", "description", "amount"),
    },
    "check_slot_fields": ("check_number", "date", "amount"),
    "check_transaction_type": "Check",
    "check_footnote_prefix": "*",
}


def get_synovus_config():
    return SYNOVUS_CONFIG
