"""Composition root for wiring infrastructure adapters."""

from statement_dashboard.application.ports.statement_parser import (
    StatementParserPort,
)
from statement_dashboard.application.ports.transaction_store import (
    TransactionStorePort,
)
from statement_dashboard.application.use_cases.get_account_balances import (
    GetAccountBalancesUseCase,
)
from statement_dashboard.application.use_cases.get_monthly_aggregations import (
    GetMonthlyAggregationsUseCase,
)
from statement_dashboard.application.use_cases.import_statement import (
    ImportStatementUseCase,
)
from statement_dashboard.infrastructure.logging.logger import get_app_logger
from statement_dashboard.infrastructure.settings import DashboardSettings
from statement_dashboard.infrastructure.statement_parser_factory import (
    create_statement_parser,
)
from statement_dashboard.infrastructure.transaction_store import (
    InMemoryTransactionStore,
)


def build_transaction_store() -> TransactionStorePort:
    """Return a new, empty transaction store."""
    return InMemoryTransactionStore()


def build_statement_parser(
    file_type: str | None = None,
) -> StatementParserPort:
    """Return the parser for ``file_type`` or the configured default."""
    settings = DashboardSettings.from_env()
    return create_statement_parser(
        file_type or settings.file_type,
        logger=get_app_logger(),
    )


def build_import_use_case(
    store: TransactionStorePort,
    file_type: str | None = None,
) -> ImportStatementUseCase:
    """Return the import use case bound to ``store``."""
    return ImportStatementUseCase(
        parser=build_statement_parser(file_type),
        store=store,
        logger=get_app_logger(),
    )


def build_balances_use_case(
    store: TransactionStorePort,
) -> GetAccountBalancesUseCase:
    """Return the balances use case using the configured sampling rule."""
    settings = DashboardSettings.from_env()
    return GetAccountBalancesUseCase(
        store,
        sampling_fn=settings.sampling_fn,
        logger=get_app_logger(),
    )


def build_aggregations_use_case(
    store: TransactionStorePort,
) -> GetMonthlyAggregationsUseCase:
    """Return the monthly aggregations use case."""
    return GetMonthlyAggregationsUseCase(store, logger=get_app_logger())


__all__ = [
    "build_transaction_store",
    "build_statement_parser",
    "build_import_use_case",
    "build_balances_use_case",
    "build_aggregations_use_case",
]
