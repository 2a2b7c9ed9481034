"""Monthly income/expense chart for the Streamlit UI."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from statement_dashboard.domain.constants import TOTAL_BANK_ACCOUNT
from statement_dashboard.domain.models import MonthlyAggregation

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


INCOME_COLOR = "#2e7d32"
EXPENSES_COLOR = "#e76f51"


@dataclass(frozen=True)
class MonthlySeries:
    """Income and expenses of one account, oldest month first."""

    bank_account: str
    months: list[str]
    income: list[Decimal]
    expenses: list[Decimal]


def build_monthly_series(
    aggregations: list[MonthlyAggregation],
    bank_account: str = TOTAL_BANK_ACCOUNT,
) -> MonthlySeries:
    """Select one account's rows and order them chronologically.

    Args:
        aggregations: Rows as returned by the aggregation use case.
        bank_account: Account identity or ``Total``.

    Returns:
        MonthlySeries: Parallel lists keyed by month.
    """
    rows = sorted(
        (row for row in aggregations if row.bank_account == bank_account),
        key=lambda row: row.year_month,
    )
    return MonthlySeries(
        bank_account=bank_account,
        months=[row.year_month for row in rows],
        income=[row.income for row in rows],
        expenses=[row.expenses for row in rows],
    )


def build_plotly_figure(series: MonthlySeries) -> "go.Figure":
    """Render grouped income/expense bars.

    Expenses are drawn as positive bar heights so both bars share an axis.
    """
    import plotly.graph_objects as go

    fig = go.Figure(
        data=[
            go.Bar(
                name="Income",
                x=series.months,
                y=[float(value) for value in series.income],
                marker_color=INCOME_COLOR,
            ),
            go.Bar(
                name="Expenses",
                x=series.months,
                y=[float(abs(value)) for value in series.expenses],
                marker_color=EXPENSES_COLOR,
            ),
        ]
    )
    fig.update_layout(
        barmode="group",
        margin=dict(l=8, r=8, t=32, b=8),
        height=420,
        title=series.bank_account,
        xaxis=dict(type="category"),
    )
    return fig


__all__ = ["MonthlySeries", "build_monthly_series", "build_plotly_figure"]
