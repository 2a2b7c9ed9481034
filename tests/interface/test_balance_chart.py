"""Tests for the balance chart presentation module."""

from decimal import Decimal

import altair as alt

from statement_dashboard.adapters.interface.streamlit.balance_chart import (
    balance_axis_domain,
    build_balance_chart,
    prepare_balance_chart_data,
)
from statement_dashboard.domain.models import BalanceDataPoint


def _balances():
    return {
        "A/1": [
            BalanceDataPoint("2024-W01", "A/1", Decimal("100")),
            BalanceDataPoint("2024-W02", "A/1", Decimal("-20.5")),
        ],
        "Total": [
            BalanceDataPoint("2024-W01", "Total", Decimal("100")),
            BalanceDataPoint("2024-W02", "Total", Decimal("-20.5")),
        ],
    }


def test_prepare_balance_chart_data_places_weeks_on_mondays():
    data = prepare_balance_chart_data(_balances())

    assert data[0] == {
        "bank_account": "A/1",
        "week": "2024-W01",
        "date": "2024-01-01",
        "balance": 100.0,
    }
    assert data[1]["date"] == "2024-01-08"
    assert [row["bank_account"] for row in data] == [
        "A/1",
        "A/1",
        "Total",
        "Total",
    ]


def test_balance_axis_domain_includes_zero():
    positive = {
        "A/1": [BalanceDataPoint("2024-W01", "A/1", Decimal("50"))],
    }

    assert balance_axis_domain(positive) == (0.0, 50.0)
    assert balance_axis_domain(_balances()) == (-20.5, 100.0)
    assert balance_axis_domain({}) == (0.0, 0.0)


def test_build_balance_chart_encodes_accounts_as_colors():
    chart = build_balance_chart(_balances(), height=300)

    assert isinstance(chart, alt.Chart)
    chart_dict = chart.to_dict()
    assert chart_dict["encoding"]["color"]["field"] == "bank_account"
    assert chart_dict["encoding"]["x"]["field"] == "date"
    assert chart_dict["height"] == 300
