"""Tests for the GetAccountBalancesUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from statement_dashboard.application.use_cases.get_account_balances import (
    GetAccountBalancesUseCase,
)
from statement_dashboard.domain.models import DenormalizedTransaction
from statement_dashboard.domain.services.balance import (
    sample_highest_balance,
)


def _tx(bank_account: str, time_stamp: str, balance: str):
    return DenormalizedTransaction(
        hash=f"{bank_account}{time_stamp}{balance}",
        time_stamp=time_stamp,
        description="",
        amount=Decimal("0"),
        balance=Decimal(balance),
        bank_account=bank_account,
    )


def _store() -> MagicMock:
    store = MagicMock()
    store.snapshot.return_value = [
        _tx("A/1", "2024-01-01", "100"),
        _tx("A/1", "2024-01-02", "150"),
        _tx("B/2", "2024-01-09", "20"),
    ]
    return store


def test_execute_appends_total_series() -> None:
    use_case = GetAccountBalancesUseCase(_store(), logger=MagicMock())

    balances = use_case.execute()

    assert list(balances) == ["A/1", "B/2", "Total"]
    assert [p.balance for p in balances["A/1"]] == [
        Decimal("100"),
        Decimal("100"),
    ]
    assert [p.balance for p in balances["Total"]] == [
        Decimal("100"),
        Decimal("120"),
    ]


def test_execute_uses_configured_sampling_without_total() -> None:
    use_case = GetAccountBalancesUseCase(
        _store(),
        sampling_fn=sample_highest_balance,
        logger=MagicMock(),
        include_total=False,
    )

    balances = use_case.execute("A/1")

    assert list(balances) == ["A/1"]
    assert [p.balance for p in balances["A/1"]] == [Decimal("150")]


def test_execute_with_no_transactions_returns_empty_mapping() -> None:
    store = MagicMock()
    store.snapshot.return_value = []
    logger = MagicMock()

    balances = GetAccountBalancesUseCase(store, logger=logger).execute()

    assert balances == {}
    logger.info.assert_called_once()
