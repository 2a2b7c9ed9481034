"""Domain services package."""

from .aggregation import aggregate_transactions
from .balance import (
    GroupKeyFn,
    SamplingFn,
    get_bank_balances,
    group_by_year_week,
    sample_highest_balance,
    sample_latest_transaction,
    sample_lowest_balance,
    with_total_balance,
)
from .normalization import bank_account_id, normalize_transaction
from .periods import (
    date_to_period_key,
    generate_periods_for_range,
    period_key_to_date,
    year_month,
    year_week,
)

__all__ = [
    "aggregate_transactions",
    "GroupKeyFn",
    "SamplingFn",
    "get_bank_balances",
    "group_by_year_week",
    "sample_highest_balance",
    "sample_latest_transaction",
    "sample_lowest_balance",
    "with_total_balance",
    "bank_account_id",
    "normalize_transaction",
    "date_to_period_key",
    "generate_periods_for_range",
    "period_key_to_date",
    "year_month",
    "year_week",
]
