"""Use case to page through stored transactions."""

from collections.abc import Sequence
from dataclasses import dataclass

from statement_dashboard.application.ports.transaction_store import (
    TransactionStorePort,
)
from statement_dashboard.application.use_cases.account_filters import (
    filter_transactions,
)
from statement_dashboard.domain.constants import ALL_BANK_ACCOUNTS
from statement_dashboard.domain.models import DenormalizedTransaction


PAGE_SIZE = 100


@dataclass(frozen=True)
class TransactionPage:
    """One page of the transaction listing."""

    items: list[DenormalizedTransaction]
    page: int
    last_page: int
    total_count: int


def paginate(
    transactions: Sequence[DenormalizedTransaction],
    page: int,
    page_size: int = PAGE_SIZE,
) -> TransactionPage:
    """Return the requested page, clamped to the available pages.

    Args:
        transactions: Full listing in display order.
        page: 1-based page number.
        page_size: Number of rows per page.

    Returns:
        TransactionPage: Rows of the (clamped) page.
    """
    last_page = len(transactions) // page_size + 1
    current = max(1, min(page, last_page))
    start = (current - 1) * page_size
    return TransactionPage(
        items=list(transactions[start:start + page_size]),
        page=current,
        last_page=last_page,
        total_count=len(transactions),
    )


class ListTransactionsUseCase:
    """List stored transactions newest first, one page at a time."""

    def __init__(self, store: TransactionStorePort) -> None:
        self._store = store

    def execute(
        self,
        account_filter: str = ALL_BANK_ACCOUNTS,
        page: int = 1,
        page_size: int = PAGE_SIZE,
    ) -> TransactionPage:
        transactions = sorted(
            filter_transactions(self._store.snapshot(), account_filter),
            key=lambda transaction: transaction.time_stamp,
            reverse=True,
        )
        return paginate(transactions, page, page_size)


__all__ = [
    "PAGE_SIZE",
    "TransactionPage",
    "paginate",
    "ListTransactionsUseCase",
]
