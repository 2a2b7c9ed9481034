"""Domain models package."""

from .events import InfoLogEvent
from .finance import (
    AggregationResult,
    BalanceDataPoint,
    BankAccountBalances,
    MonthlyAggregation,
)
from .transactions import (
    DenormalizedTransaction,
    ParsedStatement,
    Transaction,
)

__all__ = [
    "InfoLogEvent",
    "AggregationResult",
    "BalanceDataPoint",
    "BankAccountBalances",
    "MonthlyAggregation",
    "DenormalizedTransaction",
    "ParsedStatement",
    "Transaction",
]
