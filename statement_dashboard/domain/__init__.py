"""Domain package for statement models and pure transformations."""

from .constants import ALL_BANK_ACCOUNTS, TOTAL_BANK_ACCOUNT
from .models import (
    AggregationResult,
    BalanceDataPoint,
    BankAccountBalances,
    DenormalizedTransaction,
    InfoLogEvent,
    MonthlyAggregation,
    ParsedStatement,
    Transaction,
)
from .services import (
    aggregate_transactions,
    get_bank_balances,
    group_by_year_week,
    normalize_transaction,
    sample_lowest_balance,
    with_total_balance,
)

__all__ = [
    "ALL_BANK_ACCOUNTS",
    "TOTAL_BANK_ACCOUNT",
    "AggregationResult",
    "BalanceDataPoint",
    "BankAccountBalances",
    "DenormalizedTransaction",
    "InfoLogEvent",
    "MonthlyAggregation",
    "ParsedStatement",
    "Transaction",
    "aggregate_transactions",
    "get_bank_balances",
    "group_by_year_week",
    "normalize_transaction",
    "sample_lowest_balance",
    "with_total_balance",
]
