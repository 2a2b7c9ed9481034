"""Domain models for aggregates derived from transactions."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class MonthlyAggregation:
    """Income and expense totals for one month and one account.

    Attributes:
        year_month: Month in ``YYYY-MM`` form.
        bank_account: Account identity or the ``Total`` sentinel.
        income: Sum of positive amounts.
        expenses: Sum of non-positive amounts (zero or negative).
    """

    year_month: str
    bank_account: str
    income: Decimal
    expenses: Decimal


@dataclass(frozen=True)
class AggregationResult:
    """Monthly rollups plus the account identities they cover."""

    monthly_aggregations: list[MonthlyAggregation]
    bank_account_aggregates: list[str]


@dataclass(frozen=True)
class BalanceDataPoint:
    """Balance of an account at a point in time or period."""

    time_stamp: str
    bank_account: str
    balance: Decimal


# Account identity -> chronologically ordered balance points.
BankAccountBalances = dict[str, list[BalanceDataPoint]]


__all__ = [
    "MonthlyAggregation",
    "AggregationResult",
    "BalanceDataPoint",
    "BankAccountBalances",
]
