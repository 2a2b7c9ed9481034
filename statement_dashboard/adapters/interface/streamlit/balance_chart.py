"""Balance chart presentation logic for the Streamlit UI.

Transforms a ``BankAccountBalances`` mapping into Altair-ready rows and a
line chart. Week keys are placed on the time axis at the Monday of each ISO
week.
"""

from decimal import Decimal

import altair as alt

from statement_dashboard.domain.models import BankAccountBalances
from statement_dashboard.domain.services.periods import period_key_to_date


def prepare_balance_chart_data(
    balances: BankAccountBalances,
) -> list[dict[str, str | float]]:
    """Flatten balance series into chart rows.

    Args:
        balances: Dense balance series per account.

    Returns:
        list of dicts with ``bank_account``, ``week``, ``date`` and
        ``balance`` keys, accounts in mapping order.
    """
    data: list[dict[str, str | float]] = []
    for bank_account, points in balances.items():
        for point in points:
            data.append(
                {
                    "bank_account": bank_account,
                    "week": point.time_stamp,
                    "date": period_key_to_date(point.time_stamp).isoformat(),
                    "balance": float(point.balance),
                }
            )
    return data


def balance_axis_domain(
    balances: BankAccountBalances,
) -> tuple[float, float]:
    """Return the y-axis bounds, always including zero."""
    values = [
        point.balance
        for points in balances.values()
        for point in points
    ]
    if not values:
        return 0.0, 0.0
    lower = min(min(values), Decimal("0"))
    upper = max(values)
    return float(lower), float(upper)


def build_balance_chart(
    balances: BankAccountBalances,
    height: int = 480,
) -> alt.Chart:
    """Return a step line chart of the weekly balances.

    Args:
        balances: Dense balance series per account.
        height: Chart height in pixels.

    Returns:
        alt.Chart: Chart with one line per account.
    """
    data = prepare_balance_chart_data(balances)
    lower, upper = balance_axis_domain(balances)
    return alt.Chart(alt.Data(values=data)).mark_line(
        interpolate="step-after",
        strokeWidth=2,
    ).encode(
        x=alt.X("date:T", title="Week"),
        y=alt.Y(
            "balance:Q",
            title="Balance",
            scale=alt.Scale(domain=[lower, upper]),
        ),
        color=alt.Color("bank_account:N", title="Account"),
        tooltip=[
            alt.Tooltip("bank_account:N", title="Account"),
            alt.Tooltip("week:N", title="Week"),
            alt.Tooltip("balance:Q", title="Balance", format=",.2f"),
        ],
    ).properties(height=height)


__all__ = [
    "prepare_balance_chart_data",
    "balance_axis_domain",
    "build_balance_chart",
]
