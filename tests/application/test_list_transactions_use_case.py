"""Tests for transaction listing and pagination."""

from decimal import Decimal
from unittest.mock import MagicMock

from statement_dashboard.application.use_cases.list_transactions import (
    ListTransactionsUseCase,
    paginate,
)
from statement_dashboard.domain.models import DenormalizedTransaction


def _tx(index: int, bank_account: str = "A/1") -> DenormalizedTransaction:
    return DenormalizedTransaction(
        hash=str(index),
        time_stamp=f"2024-01-{index % 28 + 1:02d}",
        description="",
        amount=Decimal("1"),
        balance=Decimal("1"),
        bank_account=bank_account,
    )


def test_paginate_clamps_to_last_page() -> None:
    items = [_tx(i) for i in range(250)]

    page = paginate(items, 5, page_size=100)

    assert page.page == 3
    assert page.last_page == 3
    assert page.total_count == 250
    assert len(page.items) == 50


def test_paginate_first_page_and_lower_clamp() -> None:
    items = [_tx(i) for i in range(30)]

    page = paginate(items, 0, page_size=10)

    assert page.page == 1
    assert [t.hash for t in page.items] == [str(i) for i in range(10)]


def test_paginate_empty_listing_has_one_page() -> None:
    page = paginate([], 1)

    assert page.page == 1
    assert page.last_page == 1
    assert page.items == []


def test_execute_sorts_newest_first_and_filters() -> None:
    store = MagicMock()
    store.snapshot.return_value = [
        _tx(1),
        _tx(5, bank_account="B/2"),
        _tx(3),
    ]

    page = ListTransactionsUseCase(store).execute("A/1")

    assert [t.time_stamp for t in page.items] == ["2024-01-04", "2024-01-02"]
    assert page.total_count == 2
