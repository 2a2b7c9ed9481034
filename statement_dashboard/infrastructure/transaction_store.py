"""In-memory transaction store shared by a dashboard session."""

from collections.abc import Iterable
import threading

from statement_dashboard.domain.models import (
    DenormalizedTransaction,
    InfoLogEvent,
)


class InMemoryTransactionStore:
    """Transactions keyed by hash plus the import event log.

    Writes are serialized so concurrent imports apply one after another.
    Readers always receive copies.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._transactions: dict[str, DenormalizedTransaction] = {}
        self._events: list[InfoLogEvent] = []

    def add(self, transactions: Iterable[DenormalizedTransaction]) -> int:
        """Merge transactions, replacing any with the same hash.

        Args:
            transactions: Normalized transactions from one import.

        Returns:
            int: Number of transactions written.
        """
        batch = list(transactions)
        with self._lock:
            for transaction in batch:
                self._transactions[transaction.hash] = transaction
        return len(batch)

    def snapshot(self) -> list[DenormalizedTransaction]:
        with self._lock:
            return list(self._transactions.values())

    def clear(self) -> None:
        with self._lock:
            self._transactions = {}

    def append_events(self, events: Iterable[InfoLogEvent]) -> None:
        batch = list(events)
        with self._lock:
            self._events = batch + self._events

    def events(self) -> list[InfoLogEvent]:
        with self._lock:
            return list(self._events)

    def __len__(self) -> int:
        with self._lock:
            return len(self._transactions)


__all__ = ["InMemoryTransactionStore"]
