"""Port for turning statement text into transactions."""

from typing import Protocol

from statement_dashboard.domain.models import ParsedStatement


class StatementParserPort(Protocol):
    """Port exposing bank/file-type specific statement parsing."""

    def parse(self, text: str, source: str) -> ParsedStatement:
        """Return the transactions and parsing errors found in ``text``."""


__all__ = ["StatementParserPort"]
