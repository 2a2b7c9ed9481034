"""Port for the collection of imported transactions."""

from collections.abc import Iterable
from typing import Protocol

from statement_dashboard.domain.models import (
    DenormalizedTransaction,
    InfoLogEvent,
)


class TransactionStorePort(Protocol):
    """Port holding transactions keyed by hash and the import event log."""

    def add(self, transactions: Iterable[DenormalizedTransaction]) -> int:
        """Merge transactions, replacing any with the same hash."""

    def snapshot(self) -> list[DenormalizedTransaction]:
        """Return a copy of the current transactions."""

    def clear(self) -> None:
        """Remove every transaction."""

    def append_events(self, events: Iterable[InfoLogEvent]) -> None:
        """Prepend events to the log, newest first."""

    def events(self) -> list[InfoLogEvent]:
        """Return a copy of the event log."""


__all__ = ["TransactionStorePort"]
