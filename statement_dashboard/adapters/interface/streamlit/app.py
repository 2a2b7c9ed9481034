"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal

import streamlit as st

from statement_dashboard.adapters.interface.streamlit.balance_chart import (
    build_balance_chart,
)
from statement_dashboard.adapters.interface.streamlit.dashboard_state import (
    VIEW_IDS,
    DashboardState,
    view_label,
)
from statement_dashboard.adapters.interface.streamlit.monthly_chart import (
    build_monthly_series,
    build_plotly_figure,
)
from statement_dashboard.application.ports.transaction_store import (
    TransactionStorePort,
)
from statement_dashboard.application.use_cases.import_statement import (
    ImportStatementResult,
)
from statement_dashboard.application.use_cases.list_transactions import (
    ListTransactionsUseCase,
)
from statement_dashboard.domain.constants import (
    ALL_BANK_ACCOUNTS,
    TOTAL_BANK_ACCOUNT,
)
from statement_dashboard.domain.models import (
    DenormalizedTransaction,
    InfoLogEvent,
    MonthlyAggregation,
)
from statement_dashboard.infrastructure.container import (
    build_aggregations_use_case,
    build_balances_use_case,
    build_import_use_case,
    build_transaction_store,
)
from statement_dashboard.infrastructure.logging.logger import (
    get_usage_logger,
)
from statement_dashboard.infrastructure.settings import DashboardSettings
from statement_dashboard.infrastructure.statement_parser_factory import (
    supported_file_types,
)


STORE_KEY = "transaction_store"
STATE_KEY = "dashboard_state"


def _get_store() -> TransactionStorePort:
    """Return the session's transaction store, creating it on first use."""
    if STORE_KEY not in st.session_state:
        st.session_state[STORE_KEY] = build_transaction_store()
    return st.session_state[STORE_KEY]


def _get_state() -> DashboardState:
    """Return the session's UI state, creating it on first use."""
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = DashboardState()
    return st.session_state[STATE_KEY]


def _import_files(
    files: Sequence,
    file_types: Sequence[str],
    store: TransactionStorePort,
) -> list[ImportStatementResult]:
    """Import uploaded files one after another into ``store``.

    Args:
        files: Uploaded files exposing ``name`` and ``getvalue()``.
        file_types: Statement file type of each file, in the same order.
        store: Session transaction store.

    Returns:
        list[ImportStatementResult]: One result per file, in upload order.
    """
    use_cases = {}
    results = []
    for uploaded, file_type in zip(files, file_types):
        if file_type not in use_cases:
            use_cases[file_type] = build_import_use_case(store, file_type)
        text = uploaded.getvalue().decode("utf-8", errors="replace")
        results.append(use_cases[file_type].execute(text, uploaded.name))
    return results


def _format_amount(value: Decimal, currency_code: str) -> str:
    """Format amounts for display."""
    return f"{value:,.2f} {currency_code}"


def _aggregation_rows(
    aggregations: Sequence[MonthlyAggregation],
    currency_code: str,
) -> list[dict[str, str]]:
    return [
        {
            "Month": row.year_month,
            "Bank/Account": row.bank_account,
            f"Income ({currency_code})": f"{row.income:.2f}",
            f"Expenditures ({currency_code})": f"{row.expenses:.2f}",
        }
        for row in aggregations
    ]


def _transaction_rows(
    transactions: Sequence[DenormalizedTransaction],
    currency_code: str,
) -> list[dict[str, str]]:
    return [
        {
            "Timestamp": transaction.time_stamp,
            "Bank account": transaction.bank_account,
            "Description": transaction.description,
            f"Amount ({currency_code})": f"{transaction.amount:.2f}",
            f"Account balance ({currency_code})": f"{transaction.balance:.2f}",
        }
        for transaction in transactions
    ]


def _event_rows(events: Sequence[InfoLogEvent]) -> list[dict[str, str]]:
    return [
        {
            "Time": event.iso_timestamp,
            "Source": event.source,
            "Message": event.message,
        }
        for event in events
    ]


def _render_sidebar(
    store: TransactionStorePort,
    state: DashboardState,
    settings: DashboardSettings,
) -> None:
    """Render the import toolbar and navigation."""
    usage_logger = get_usage_logger()
    file_types = supported_file_types()
    default_index = (
        file_types.index(settings.file_type)
        if settings.file_type in file_types
        else 0
    )
    default_file_type = st.sidebar.selectbox(
        "Default file type",
        options=file_types,
        index=default_index,
    )
    files = st.sidebar.file_uploader(
        "Statement files",
        type=["csv", "txt"],
        accept_multiple_files=True,
    ) or []
    selected_types = [
        st.sidebar.selectbox(
            f"File type of {uploaded.name}",
            options=file_types,
            index=file_types.index(default_file_type),
            key=f"file_type:{uploaded.name}",
        )
        for uploaded in files
    ]
    if st.sidebar.button("Import", disabled=not files):
        results = _import_files(files, selected_types, store)
        event_count = sum(len(result.events) for result in results)
        state.record_import(event_count)
        usage_logger.info(
            f"Imported {len(results)} files as "
            f"{', '.join(sorted(set(selected_types)))} "
            f"({event_count} events)"
        )
    if st.sidebar.button("Clear data"):
        store.clear()
        state.clear_data()
        usage_logger.info("Cleared imported transactions")

    labels = [
        view_label(view_id, len(store.snapshot()), state.new_events)
        for view_id in VIEW_IDS
    ]
    selected = st.sidebar.radio(
        "View",
        options=list(range(len(VIEW_IDS))),
        index=state.view_index,
        format_func=lambda index: labels[index],
    )
    state.select_view(selected)


def _render_account_filter(
    state: DashboardState,
    bank_accounts: Sequence[str],
) -> None:
    options = [ALL_BANK_ACCOUNTS, *bank_accounts]
    index = (
        options.index(state.account_filter)
        if state.account_filter in options
        else 0
    )
    state.account_filter = st.selectbox(
        "Bank account",
        options=options,
        index=index,
    )


def _render_balance(
    store: TransactionStorePort,
    state: DashboardState,
    settings: DashboardSettings,
) -> None:
    balances = build_balances_use_case(store).execute(state.account_filter)
    if not balances:
        st.info("No balance data to display. Please import data first.")
        return
    total_points = balances.get(TOTAL_BANK_ACCOUNT, [])
    if total_points:
        st.metric(
            "Latest total balance",
            _format_amount(total_points[-1].balance, settings.currency_code),
        )
    st.subheader("Weekly balance")
    st.altair_chart(build_balance_chart(balances), width="stretch")


def _render_aggregations(
    store: TransactionStorePort,
    state: DashboardState,
    settings: DashboardSettings,
) -> None:
    result = build_aggregations_use_case(store).execute(state.account_filter)
    if not result.monthly_aggregations:
        st.info("No aggregations to display. Please import data first.")
        return
    chart_account = st.selectbox(
        "Chart account",
        options=result.bank_account_aggregates,
        index=0,
    )
    st.plotly_chart(
        build_plotly_figure(
            build_monthly_series(result.monthly_aggregations, chart_account)
        ),
        width="stretch",
    )
    st.dataframe(
        _aggregation_rows(result.monthly_aggregations, settings.currency_code),
        width="stretch",
        hide_index=True,
    )


def _render_transactions(
    store: TransactionStorePort,
    state: DashboardState,
    settings: DashboardSettings,
) -> None:
    use_case = ListTransactionsUseCase(store)
    first = use_case.execute(state.account_filter, page=1)
    if not first.total_count:
        st.info("No transactions to display. Please import data first.")
        return
    page_number = st.number_input(
        f"Page (of {first.last_page})",
        min_value=1,
        max_value=first.last_page,
        value=min(state.transactions_page, first.last_page),
        step=1,
    )
    page = use_case.execute(state.account_filter, page=int(page_number))
    state.transactions_page = page.page
    st.caption(f"{page.total_count} transactions")
    st.dataframe(
        _transaction_rows(page.items, settings.currency_code),
        width="stretch",
        hide_index=True,
    )


def _render_event_log(store: TransactionStorePort) -> None:
    events = store.events()
    if not events:
        st.info("No events have yet been logged.")
        return
    st.dataframe(_event_rows(events), width="stretch", hide_index=True)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Statement Dashboard", layout="wide")
    st.title("Statement Dashboard")

    settings = DashboardSettings.from_env()
    store = _get_store()
    state = _get_state()
    _render_sidebar(store, state, settings)

    view_id = VIEW_IDS[state.view_index]
    if view_id == "eventLog":
        _render_event_log(store)
        return

    bank_accounts = sorted(
        {transaction.bank_account for transaction in store.snapshot()}
    )
    _render_account_filter(state, bank_accounts)
    if view_id == "balance":
        _render_balance(store, state, settings)
    elif view_id == "aggregations":
        _render_aggregations(store, state, settings)
    else:
        _render_transactions(store, state, settings)


if __name__ == "__main__":  # pragma: no cover
    main()
