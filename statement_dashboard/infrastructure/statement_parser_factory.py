"""Factory helpers to select the statement parser for a file type."""

from statement_dashboard.application.ports.statement_parser import (
    StatementParserPort,
)
from statement_dashboard.infrastructure.csv_statement_parser import (
    FILE_TYPES,
    CsvStatementParser,
)
from statement_dashboard.infrastructure.logging.logger import get_app_logger


def supported_file_types() -> list[str]:
    """Return the file type identifiers offered for imports."""
    return list(FILE_TYPES)


def create_statement_parser(
    file_type: str,
    logger=None,
) -> StatementParserPort:
    """Return a statement parser for ``file_type``.

    Args:
        file_type: File type identifier, e.g. ``Generic-CSV``.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        StatementParserPort: Parser for the selected layout.

    Raises:
        ValueError: If the file type is not supported.
    """
    resolved_logger = logger or get_app_logger()
    layout = FILE_TYPES.get(file_type.strip())
    if layout is None:
        raise ValueError(
            "Unsupported statement file type: "
            f"{file_type}. Expected one of {', '.join(FILE_TYPES)}."
        )
    resolved_logger.debug(f"Using {layout.file_type} parser for {layout.bank}")
    return CsvStatementParser(layout)


__all__ = ["create_statement_parser", "supported_file_types"]
