"""
Configuration utilities for the taskcal CLI.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

ENV_FILENAME = ".taskcal.env"

logger = logging.getLogger(__name__)


def load_env_vars() -> None:
    """
    Load environment variables from .env files in the following order:
    1. .taskcal.env in the current directory
    2. .taskcal.env in the user's home directory
    Variables already set in the process environment are never overridden.
    """
    if os.path.exists(ENV_FILENAME):
        load_dotenv(ENV_FILENAME)

    home_env = Path.home() / ENV_FILENAME
    if home_env.exists():
        load_dotenv(home_env)


def get_config(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get configuration value from environment variables."""
    return os.getenv(key, default)


def _get_int(key: str, default: int) -> int:
    raw = get_config(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer), using %d", key, raw, default)
        return default


def _get_log_level(key: str, default: str) -> str:
    raw = (get_config(key) or "").strip().upper()
    if not raw:
        return default
    if not isinstance(logging.getLevelName(raw), int):
        logger.warning("Ignoring %s=%r (unknown log level), using %s", key, raw, default)
        return default
    return raw


@dataclass
class Settings:
    tasks_file: str = "tasks.json"
    calendar_name: str = "Task Calendar"
    calendar_url: Optional[str] = None
    agenda_days: int = 30
    log_level: str = "WARNING"


def get_settings() -> Settings:
    """Read the TASKCAL_* settings from the environment."""
    defaults = Settings()
    return Settings(
        tasks_file=get_config("TASKCAL_TASKS_FILE", defaults.tasks_file),
        calendar_name=get_config("TASKCAL_CALENDAR_NAME", defaults.calendar_name),
        calendar_url=get_config("TASKCAL_CALENDAR_URL") or None,
        agenda_days=_get_int("TASKCAL_AGENDA_DAYS", defaults.agenda_days),
        log_level=_get_log_level("TASKCAL_LOG_LEVEL", defaults.log_level),
    )
