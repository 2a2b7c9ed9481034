"""Shared account filtering helpers for application use cases."""

from collections.abc import Iterable

from statement_dashboard.domain.constants import ALL_BANK_ACCOUNTS
from statement_dashboard.domain.models import DenormalizedTransaction


def filter_transactions(
    transactions: Iterable[DenormalizedTransaction],
    account_filter: str = ALL_BANK_ACCOUNTS,
) -> list[DenormalizedTransaction]:
    """Return the transactions selected by an account filter.

    Args:
        transactions: Snapshot of transactions.
        account_filter: ``All`` or a ``<bank>/<account>`` identity.

    Returns:
        list[DenormalizedTransaction]: Matching transactions in input order.
    """
    if account_filter == ALL_BANK_ACCOUNTS:
        return list(transactions)
    return [t for t in transactions if t.bank_account == account_filter]


__all__ = ["filter_transactions"]
