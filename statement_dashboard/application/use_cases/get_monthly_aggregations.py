"""Use case to compute monthly income and expense rollups."""

from statement_dashboard.application.ports.transaction_store import (
    TransactionStorePort,
)
from statement_dashboard.application.use_cases.account_filters import (
    filter_transactions,
)
from statement_dashboard.domain.constants import ALL_BANK_ACCOUNTS
from statement_dashboard.domain.models import AggregationResult
from statement_dashboard.domain.services.aggregation import (
    aggregate_transactions,
)
from statement_dashboard.infrastructure.logging.logger import get_app_logger


class GetMonthlyAggregationsUseCase:
    """Aggregate the stored transactions by month and account."""

    def __init__(self, store: TransactionStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port holding the imported transactions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        account_filter: str = ALL_BANK_ACCOUNTS,
    ) -> AggregationResult:
        """Return monthly aggregations for the selected accounts.

        Args:
            account_filter: ``All`` or a ``<bank>/<account>`` identity.

        Returns:
            AggregationResult: Rows newest month first and account identities.
        """
        transactions = filter_transactions(
            self._store.snapshot(),
            account_filter,
        )
        result = aggregate_transactions(transactions)
        self._logger.info(
            f"Aggregated {len(transactions)} transactions into "
            f"{len(result.monthly_aggregations)} monthly rows "
            f"(filter={account_filter})"
        )
        return result


__all__ = ["GetMonthlyAggregationsUseCase", "AggregationResult"]
