"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads the fiscal calendar and logging options from the environment (a `.env`
file at the project root is loaded first).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import logging
import os

from dotenv import load_dotenv
from pydantic import ValidationError

from retail_calendar.models import FiscalYearConfig

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")


@dataclass(frozen=True)
class Settings:
    """Container for configuration read from the environment.

    Attributes:
        fiscal_start_month: 0-based month the fiscal year starts in.
        fiscal_start_day: Day of month the fiscal year starts on.
        log_path: File the CLI writes its log to.
        log_level: Numeric logging level.
    """
    fiscal_start_month: int
    fiscal_start_day: int
    log_path: Path
    log_level: int

    @property
    def fiscal_config(self) -> FiscalYearConfig:
        return FiscalYearConfig(
            start_month=self.fiscal_start_month,
            start_day=self.fiscal_start_day,
        )


def _int_env(name: str, default: int, low: int, high: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}.") from None
    if not low <= value <= high:
        raise RuntimeError(f"{name} must be between {low} and {high}, got {value}.")
    return value


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if a fiscal setting or the log level is invalid.
    """
    fiscal_start_month = _int_env("FISCAL_YEAR_START_MONTH", 1, 0, 11)
    fiscal_start_day = _int_env("FISCAL_YEAR_START_DAY", 1, 1, 31)
    try:
        FiscalYearConfig(start_month=fiscal_start_month, start_day=fiscal_start_day)
    except ValidationError:
        raise RuntimeError(
            f"FISCAL_YEAR_START_DAY {fiscal_start_day} does not exist in "
            f"month {fiscal_start_month} (0-based) every year."
        ) from None
    log_path = Path(os.getenv("RETAIL_CALENDAR_LOG_PATH", "logs/retail_calendar.log"))

    level_name = os.getenv("RETAIL_CALENDAR_LOG_LEVEL", "INFO").strip().upper()
    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        raise RuntimeError(
            f"RETAIL_CALENDAR_LOG_LEVEL must be a logging level name "
            f"(DEBUG, INFO, WARNING, ...), got {level_name!r}."
        )

    return Settings(
        fiscal_start_month=fiscal_start_month,
        fiscal_start_day=fiscal_start_day,
        log_path=log_path,
        log_level=log_level,
    )
