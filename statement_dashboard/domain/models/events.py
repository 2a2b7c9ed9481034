"""Domain models for the import event log."""

from dataclasses import dataclass


@dataclass(frozen=True)
class InfoLogEvent:
    """Informational message attached to an imported file."""

    iso_timestamp: str
    source: str
    message: str


__all__ = ["InfoLogEvent"]
