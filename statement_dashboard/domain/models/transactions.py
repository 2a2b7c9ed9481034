"""Domain models for statement transactions."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Transaction:
    """Transaction as produced by a statement parser.

    Attributes:
        hash: Content-derived identifier, unique within an account.
        time_stamp: ISO-8601 date or date-time string.
        description: Free text from the statement.
        amount: Signed amount; positive is income, negative is expense.
        balance: Account balance immediately after the transaction.
    """

    hash: str
    time_stamp: str
    description: str
    amount: Decimal
    balance: Decimal


@dataclass(frozen=True)
class DenormalizedTransaction(Transaction):
    """Transaction tagged with its owning ``<bank>/<account>`` identity."""

    bank_account: str


@dataclass(frozen=True)
class ParsedStatement:
    """Result of parsing one statement file."""

    bank: str
    account: str
    transactions: list[Transaction]
    parsing_errors: list[str]


__all__ = ["Transaction", "DenormalizedTransaction", "ParsedStatement"]
