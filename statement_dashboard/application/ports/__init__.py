"""Application ports package."""

from .statement_parser import StatementParserPort
from .transaction_store import TransactionStorePort

__all__ = ["StatementParserPort", "TransactionStorePort"]
