"""Settings helpers for the dashboard and CLI adapters."""

from dataclasses import dataclass
import os

from statement_dashboard.domain.constants import DEFAULT_CURRENCY_CODE
from statement_dashboard.domain.services.balance import (
    SamplingFn,
    sample_highest_balance,
    sample_latest_transaction,
    sample_lowest_balance,
)
from statement_dashboard.infrastructure.logging.logger import get_app_logger


SAMPLING_FUNCTIONS: dict[str, SamplingFn] = {
    "lowest": sample_lowest_balance,
    "highest": sample_highest_balance,
    "latest": sample_latest_transaction,
}

DEFAULT_FILE_TYPE = "Generic-CSV"
DEFAULT_SAMPLING = "lowest"


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for statement parsing and balance sampling.

    Attributes:
        file_type: Default statement file type offered for imports.
        sampling: Name of the weekly balance sampling rule.
        currency_code: Currency label shown next to amounts.
    """

    file_type: str = DEFAULT_FILE_TYPE
    sampling: str = DEFAULT_SAMPLING
    currency_code: str = DEFAULT_CURRENCY_CODE

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables.

        Returns:
            DashboardSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        file_type = os.getenv("STATEMENT_FILE_TYPE", DEFAULT_FILE_TYPE).strip()
        sampling = cls._normalize_sampling(
            os.getenv("BALANCE_SAMPLING", DEFAULT_SAMPLING),
            logger=logger,
        )
        currency_code = (
            os.getenv("CURRENCY_CODE", DEFAULT_CURRENCY_CODE).strip().upper()
            or DEFAULT_CURRENCY_CODE
        )
        return cls(
            file_type=file_type or DEFAULT_FILE_TYPE,
            sampling=sampling,
            currency_code=currency_code,
        )

    @property
    def sampling_fn(self) -> SamplingFn:
        """Return the sampling function selected by ``sampling``."""
        return SAMPLING_FUNCTIONS[self.sampling]

    @staticmethod
    def _normalize_sampling(raw: str, logger) -> str:
        """Normalize the sampling rule name.

        Args:
            raw: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            str: A key of ``SAMPLING_FUNCTIONS``.
        """
        sampling = raw.strip().lower()
        if sampling not in SAMPLING_FUNCTIONS:
            logger.warning(
                f"Unknown BALANCE_SAMPLING '{raw}'. "
                f"Falling back to '{DEFAULT_SAMPLING}'."
            )
            return DEFAULT_SAMPLING
        return sampling


__all__ = ["DashboardSettings", "SAMPLING_FUNCTIONS"]
