"""Tests for monthly income/expense aggregation."""

from decimal import Decimal

from statement_dashboard.domain.models import DenormalizedTransaction
from statement_dashboard.domain.services.aggregation import (
    aggregate_transactions,
)


def _tx(
    bank_account: str,
    time_stamp: str,
    amount: str,
    balance: str = "0",
) -> DenormalizedTransaction:
    return DenormalizedTransaction(
        hash=f"{bank_account}-{time_stamp}-{amount}",
        time_stamp=time_stamp,
        description="",
        amount=Decimal(amount),
        balance=Decimal(balance),
        bank_account=bank_account,
    )


def _rows(result) -> dict[tuple[str, str], tuple[Decimal, Decimal]]:
    return {
        (row.year_month, row.bank_account): (row.income, row.expenses)
        for row in result.monthly_aggregations
    }


def test_single_account_month_mirrors_total_row() -> None:
    """Income and expenses of one account equal the Total row."""
    result = aggregate_transactions(
        [
            _tx("FNB/1", "2024-01-05", "1000"),
            _tx("FNB/1", "2024-01-20", "-200"),
        ]
    )

    assert _rows(result) == {
        ("2024-01", "FNB/1"): (Decimal("1000"), Decimal("-200")),
        ("2024-01", "Total"): (Decimal("1000"), Decimal("-200")),
    }
    assert result.bank_account_aggregates == ["Total", "FNB/1"]


def test_empty_input_yields_total_sentinel_only() -> None:
    result = aggregate_transactions([])

    assert result.monthly_aggregations == []
    assert result.bank_account_aggregates == ["Total"]


def test_total_rows_sum_accounts_per_month() -> None:
    transactions = [
        _tx("A/1", "2024-01-01", "100"),
        _tx("B/2", "2024-01-03", "50"),
        _tx("B/2", "2024-01-09", "-30"),
        _tx("A/1", "2024-02-01", "-10"),
        _tx("A/1", "2024-02-11", "7.25"),
        _tx("B/2", "2024-02-28", "-0.75"),
    ]

    result = aggregate_transactions(transactions)

    rows = _rows(result)
    for month in ("2024-01", "2024-02"):
        account_rows = [
            value
            for (row_month, account), value in rows.items()
            if row_month == month and account != "Total"
        ]
        income, expenses = rows[(month, "Total")]
        assert sum((r[0] for r in account_rows), Decimal("0")) == income
        assert sum((r[1] for r in account_rows), Decimal("0")) == expenses
    assert rows[("2024-02", "Total")] == (Decimal("7.25"), Decimal("-10.75"))


def test_zero_amount_counts_as_expense_only() -> None:
    """Positive amounts are income; zero and negative are expenses."""
    result = aggregate_transactions(
        [_tx("A/1", "2024-01-01", "0"), _tx("A/1", "2024-01-02", "0.01")]
    )

    assert _rows(result)[("2024-01", "A/1")] == (
        Decimal("0.01"),
        Decimal("0"),
    )
    for row in result.monthly_aggregations:
        assert row.income >= 0
        assert row.expenses <= 0


def test_rows_are_sorted_newest_month_first() -> None:
    result = aggregate_transactions(
        [
            _tx("A/1", "2023-12-31", "1"),
            _tx("B/2", "2024-02-01", "1"),
            _tx("A/1", "2024-01-15", "1"),
        ]
    )

    assert [
        (row.year_month, row.bank_account)
        for row in result.monthly_aggregations
    ] == [
        ("2024-02", "B/2"),
        ("2024-02", "Total"),
        ("2024-01", "A/1"),
        ("2024-01", "Total"),
        ("2023-12", "A/1"),
        ("2023-12", "Total"),
    ]
    assert result.bank_account_aggregates == ["Total", "A/1", "B/2"]


def test_aggregation_is_independent_of_input_order() -> None:
    transactions = [
        _tx("A/1", "2024-01-01", "100"),
        _tx("B/2", "2024-01-03", "-50"),
        _tx("A/1", "2024-03-09", "-30"),
        _tx("B/2", "2024-02-01", "12"),
    ]
    original = list(transactions)

    forward = aggregate_transactions(transactions)
    backward = aggregate_transactions(list(reversed(transactions)))

    assert _rows(forward) == _rows(backward)
    assert transactions == original
