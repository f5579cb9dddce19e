"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from finance_tracker.domain.services.finance import (
    CONSISTENCY_MODES,
    CONSISTENCY_WARN,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class FinanceSettings:
    """Settings for the reporting engine and its adapters.

    Attributes:
        consistency_mode: Reaction to summary totals disagreeing with the
            listed transactions ("off", "warn" or "raise").
        currency_symbol: Symbol used when formatting amounts.
    """

    consistency_mode: str = CONSISTENCY_WARN
    currency_symbol: str = "$"

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from environment variables.

        Returns:
            FinanceSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        raw_mode = (
            os.getenv("SUMMARY_CONSISTENCY_CHECK", CONSISTENCY_WARN)
            .strip()
            .lower()
        )
        consistency_mode = cls._normalize_mode(raw_mode, logger=logger)
        currency_symbol = os.getenv("CURRENCY_SYMBOL", "$").strip() or "$"
        return cls(
            consistency_mode=consistency_mode,
            currency_symbol=currency_symbol,
        )

    @staticmethod
    def _normalize_mode(raw_mode: str, logger) -> str:
        """Validate the consistency mode, falling back to "warn".

        Args:
            raw_mode: Lower-cased value from the environment.
            logger: Logger used for warnings.

        Returns:
            str: A supported consistency mode.
        """
        if raw_mode in CONSISTENCY_MODES:
            return raw_mode
        logger.warning(
            f"Unsupported SUMMARY_CONSISTENCY_CHECK '{raw_mode}'. "
            f"Expected one of {', '.join(CONSISTENCY_MODES)}; using "
            f"'{CONSISTENCY_WARN}'."
        )
        return CONSISTENCY_WARN


__all__ = ["FinanceSettings"]
