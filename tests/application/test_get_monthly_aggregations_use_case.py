"""Tests for the GetMonthlyAggregationsUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from statement_dashboard.application.use_cases.get_monthly_aggregations import (
    GetMonthlyAggregationsUseCase,
)
from statement_dashboard.domain.models import DenormalizedTransaction


def _tx(bank_account: str, time_stamp: str, amount: str):
    return DenormalizedTransaction(
        hash=f"{bank_account}{time_stamp}{amount}",
        time_stamp=time_stamp,
        description="",
        amount=Decimal(amount),
        balance=Decimal("0"),
        bank_account=bank_account,
    )


def _store(transactions) -> MagicMock:
    store = MagicMock()
    store.snapshot.return_value = transactions
    return store


def test_execute_aggregates_all_accounts_by_default() -> None:
    store = _store(
        [
            _tx("A/1", "2024-01-02", "10"),
            _tx("B/2", "2024-01-03", "-4"),
        ]
    )

    result = GetMonthlyAggregationsUseCase(store, logger=MagicMock()).execute()

    total = [
        row for row in result.monthly_aggregations
        if row.bank_account == "Total"
    ]
    assert total[0].income == Decimal("10")
    assert total[0].expenses == Decimal("-4")
    assert result.bank_account_aggregates == ["Total", "A/1", "B/2"]
    store.snapshot.assert_called_once_with()


def test_execute_applies_account_filter() -> None:
    store = _store(
        [
            _tx("A/1", "2024-01-02", "10"),
            _tx("B/2", "2024-01-03", "-4"),
        ]
    )

    result = GetMonthlyAggregationsUseCase(store, logger=MagicMock()).execute(
        "B/2"
    )

    assert [
        (row.bank_account, row.expenses)
        for row in result.monthly_aggregations
    ] == [("B/2", Decimal("-4")), ("Total", Decimal("-4"))]
    assert result.bank_account_aggregates == ["Total", "B/2"]
