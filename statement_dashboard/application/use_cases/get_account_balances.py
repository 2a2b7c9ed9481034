"""Use case to compute weekly balance series for charting."""

from statement_dashboard.application.ports.transaction_store import (
    TransactionStorePort,
)
from statement_dashboard.application.use_cases.account_filters import (
    filter_transactions,
)
from statement_dashboard.domain.constants import ALL_BANK_ACCOUNTS
from statement_dashboard.domain.models import BankAccountBalances
from statement_dashboard.domain.services.balance import (
    GroupKeyFn,
    SamplingFn,
    get_bank_balances,
    group_by_year_week,
    sample_lowest_balance,
    with_total_balance,
)
from statement_dashboard.infrastructure.logging.logger import get_app_logger


class GetAccountBalancesUseCase:
    """Reconstruct dense balance series from the stored transactions."""

    def __init__(
        self,
        store: TransactionStorePort,
        sampling_fn: SamplingFn = sample_lowest_balance,
        group_key_fn: GroupKeyFn = group_by_year_week,
        logger=None,
        include_total: bool = True,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Port holding the imported transactions.
            sampling_fn: Rule picking one transaction per bucket.
            group_key_fn: Maps a transaction to its bucket key.
            logger: Optional logger compatible with logging.Logger-like API.
            include_total: Whether to append the summed ``Total`` series.
        """
        self._store = store
        self._sampling_fn = sampling_fn
        self._group_key_fn = group_key_fn
        self._logger = logger or get_app_logger()
        self._include_total = include_total

    def execute(
        self,
        account_filter: str = ALL_BANK_ACCOUNTS,
    ) -> BankAccountBalances:
        """Return weekly balances for the selected accounts.

        Args:
            account_filter: ``All`` or a ``<bank>/<account>`` identity.

        Returns:
            BankAccountBalances: Dense series per account, plus ``Total``
            when enabled.
        """
        transactions = filter_transactions(
            self._store.snapshot(),
            account_filter,
        )
        balances = get_bank_balances(
            transactions,
            self._sampling_fn,
            self._group_key_fn,
        )
        if self._include_total:
            balances = with_total_balance(balances)
        period_count = len(next(iter(balances.values()), []))
        self._logger.info(
            f"Computed balances for {len(balances)} series over "
            f"{period_count} weeks (filter={account_filter})"
        )
        return balances


__all__ = ["GetAccountBalancesUseCase", "BankAccountBalances"]
