"""Monthly income and expense rollups."""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from statement_dashboard.domain.constants import TOTAL_BANK_ACCOUNT
from statement_dashboard.domain.models import (
    AggregationResult,
    DenormalizedTransaction,
    MonthlyAggregation,
)
from statement_dashboard.domain.services.periods import year_month


@dataclass
class _Accumulator:
    year_month: str
    bank_account: str
    income: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")

    def add(self, amount: Decimal) -> None:
        if amount > 0:
            self.income += amount
        else:
            self.expenses += amount

    def freeze(self) -> MonthlyAggregation:
        return MonthlyAggregation(
            year_month=self.year_month,
            bank_account=self.bank_account,
            income=self.income,
            expenses=self.expenses,
        )


def aggregate_transactions(
    transactions: Iterable[DenormalizedTransaction],
) -> AggregationResult:
    """Aggregate transactions by month, per account and in total.

    Every transaction lands in its account bucket and in the ``Total`` bucket
    of the same month, as income when ``amount > 0`` and as expenses
    otherwise.

    Args:
        transactions: Snapshot of denormalized transactions, in any order.

    Returns:
        AggregationResult: Rows sorted by month, newest first, and the
        account identities seen (``Total`` first, then first-seen order).
    """
    buckets: dict[str, _Accumulator] = {}
    bank_accounts = [TOTAL_BANK_ACCOUNT]

    for transaction in transactions:
        month = year_month(transaction.time_stamp)
        account_key = f"{month}-{transaction.bank_account}"
        total_key = f"{month}-total"

        if account_key not in buckets:
            buckets[account_key] = _Accumulator(
                month,
                transaction.bank_account,
            )
        if total_key not in buckets:
            buckets[total_key] = _Accumulator(month, TOTAL_BANK_ACCOUNT)

        buckets[account_key].add(transaction.amount)
        buckets[total_key].add(transaction.amount)

        if transaction.bank_account not in bank_accounts:
            bank_accounts.append(transaction.bank_account)

    aggregations = sorted(
        (bucket.freeze() for bucket in buckets.values()),
        key=lambda aggregation: aggregation.year_month,
        reverse=True,
    )
    return AggregationResult(
        monthly_aggregations=aggregations,
        bank_account_aggregates=bank_accounts,
    )


__all__ = ["aggregate_transactions"]
