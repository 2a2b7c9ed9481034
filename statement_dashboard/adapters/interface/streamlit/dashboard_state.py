"""Session state for the Streamlit dashboard.

The transaction store itself lives in ``st.session_state`` next to this
state object; everything here is UI bookkeeping only.
"""

from dataclasses import dataclass

from statement_dashboard.domain.constants import ALL_BANK_ACCOUNTS


VIEW_IDS = ("balance", "aggregations", "transactions", "eventLog")


def view_label(view_id: str, transaction_count: int, new_events: bool) -> str:
    """Return the navigation label of a view.

    Args:
        view_id: One of ``VIEW_IDS``.
        transaction_count: Number of stored transactions.
        new_events: Whether unseen event log entries exist.

    Returns:
        str: Label shown in the sidebar.
    """
    if view_id == "balance":
        return "Balance"
    if view_id == "aggregations":
        return "Aggregations"
    if view_id == "transactions":
        suffix = f"({transaction_count})" if transaction_count else ""
        return f"Transactions{suffix}"
    return "Event log" + (" 🛈" if new_events else "")


@dataclass
class DashboardState:
    """UI state kept across Streamlit reruns.

    Attributes:
        account_filter: ``All`` or a ``<bank>/<account>`` identity.
        view_index: Index into ``VIEW_IDS``.
        new_events: Whether the event log has entries not yet viewed.
        transactions_page: 1-based page of the transaction listing.
    """

    account_filter: str = ALL_BANK_ACCOUNTS
    view_index: int = 0
    new_events: bool = False
    transactions_page: int = 1

    def select_view(self, index: int) -> None:
        """Switch views, clearing the event flag on the event log."""
        if VIEW_IDS[index] == "eventLog":
            self.new_events = False
        self.view_index = index

    def record_import(self, event_count: int) -> None:
        """Reset filters after an import and flag new events."""
        self.account_filter = ALL_BANK_ACCOUNTS
        if event_count > 0:
            self.new_events = True

    def clear_data(self) -> None:
        self.account_filter = ALL_BANK_ACCOUNTS
        self.transactions_page = 1


__all__ = ["VIEW_IDS", "view_label", "DashboardState"]
