"""Application use cases package."""

from .account_filters import filter_transactions
from .get_account_balances import GetAccountBalancesUseCase
from .get_monthly_aggregations import GetMonthlyAggregationsUseCase
from .import_statement import ImportStatementResult, ImportStatementUseCase
from .list_transactions import (
    ListTransactionsUseCase,
    TransactionPage,
    paginate,
)

__all__ = [
    "filter_transactions",
    "GetAccountBalancesUseCase",
    "GetMonthlyAggregationsUseCase",
    "ImportStatementResult",
    "ImportStatementUseCase",
    "ListTransactionsUseCase",
    "TransactionPage",
    "paginate",
]
