"""Domain normalization helpers."""

from dataclasses import fields

from statement_dashboard.domain.constants import BANK_ACCOUNT_SEPARATOR
from statement_dashboard.domain.models import (
    DenormalizedTransaction,
    Transaction,
)


def bank_account_id(bank: str, account: str) -> str:
    """Return the ``<bank>/<account>`` identity of an account."""
    return bank + BANK_ACCOUNT_SEPARATOR + account


def normalize_transaction(
    transaction: Transaction,
    bank: str,
    account: str,
) -> DenormalizedTransaction:
    """Tag a parsed transaction with its owning bank account.

    Args:
        transaction: Transaction from the statement parser. An already
            denormalized transaction is re-tagged with the new account.
        bank: Bank identifier reported by the parser.
        account: Account identifier reported by the parser.

    Returns:
        DenormalizedTransaction: Copy of the transaction with ``bank_account``.
    """
    values = {
        field.name: getattr(transaction, field.name)
        for field in fields(Transaction)
    }
    return DenormalizedTransaction(
        **values,
        bank_account=bank_account_id(bank, account),
    )


__all__ = ["bank_account_id", "normalize_transaction"]
