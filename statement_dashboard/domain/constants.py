"""Domain constants for statement analytics."""

# Sentinel account identity for cross-account rollups.
TOTAL_BANK_ACCOUNT = "Total"

# Account filter value that keeps every bank account.
ALL_BANK_ACCOUNTS = "All"

BANK_ACCOUNT_SEPARATOR = "/"

DEFAULT_CURRENCY_CODE = "ZAR"

NULL_PARSE_MESSAGE = (
    "No results from parsing file. "
    "Do you have the right bank and file type selected?"
)


__all__ = [
    "TOTAL_BANK_ACCOUNT",
    "ALL_BANK_ACCOUNTS",
    "BANK_ACCOUNT_SEPARATOR",
    "DEFAULT_CURRENCY_CODE",
    "NULL_PARSE_MESSAGE",
]
