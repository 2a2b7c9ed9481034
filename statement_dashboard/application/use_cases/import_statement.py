"""Use case for importing one statement file into the transaction store."""

from dataclasses import dataclass
from datetime import datetime, timezone

from statement_dashboard.application.ports.statement_parser import (
    StatementParserPort,
)
from statement_dashboard.application.ports.transaction_store import (
    TransactionStorePort,
)
from statement_dashboard.domain.constants import NULL_PARSE_MESSAGE
from statement_dashboard.domain.models import InfoLogEvent
from statement_dashboard.domain.services.normalization import (
    bank_account_id,
    normalize_transaction,
)
from statement_dashboard.infrastructure.logging.logger import get_app_logger


def current_iso_timestamp() -> str:
    """Return the current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class ImportStatementResult:
    """Result of importing a statement file.

    Attributes:
        source: Name of the imported file.
        bank_account: ``<bank>/<account>`` identity of the statement.
        imported_count: Number of transactions merged into the store.
        events: Event log entries produced by the import.
    """

    source: str
    bank_account: str
    imported_count: int
    events: list[InfoLogEvent]


class ImportStatementUseCase:
    """Parse a statement, normalize its transactions and store them."""

    def __init__(
        self,
        parser: StatementParserPort,
        store: TransactionStorePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            parser: Port turning statement text into transactions.
            store: Port holding the imported transactions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._parser = parser
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, text: str, source: str) -> ImportStatementResult:
        """Import the statement ``text`` read from ``source``.

        Parsing errors become event log entries. A file that yields neither
        transactions nor errors gets a single hint about the selected bank
        and file type.

        Args:
            text: Raw statement contents.
            source: File name used to label log entries.

        Returns:
            ImportStatementResult: Summary of the import.
        """
        statement = self._parser.parse(text, source)
        transactions = [
            normalize_transaction(
                transaction,
                statement.bank,
                statement.account,
            )
            for transaction in statement.transactions
        ]
        imported_count = self._store.add(transactions)

        iso_timestamp = current_iso_timestamp()
        events = [
            InfoLogEvent(
                iso_timestamp=iso_timestamp,
                source=source,
                message=message,
            )
            for message in statement.parsing_errors
        ]
        if not transactions and not events:
            events.append(
                InfoLogEvent(
                    iso_timestamp=iso_timestamp,
                    source=source,
                    message=NULL_PARSE_MESSAGE,
                )
            )
        if events:
            self._store.append_events(events)

        bank_account = bank_account_id(statement.bank, statement.account)
        self._logger.info(
            f"Imported {imported_count} transactions for {bank_account} "
            f"from {source} ({len(statement.parsing_errors)} parsing errors)"
        )
        return ImportStatementResult(
            source=source,
            bank_account=bank_account,
            imported_count=imported_count,
            events=events,
        )


__all__ = ["ImportStatementUseCase", "ImportStatementResult"]
