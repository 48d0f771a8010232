"""Configuration helpers for the Contact Manager."""
from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Optional

from dotenv import load_dotenv

DEFAULT_API_URL = "https://contact-manager-5ug0.onrender.com/contacts"
DEFAULT_TIMEOUT_SECONDS = 15.0
DEFAULT_ID_FIELD = "_id"


class ConfigError(RuntimeError):
    """Raised when a configuration value is missing or invalid."""


@dataclass(slots=True)
class Settings:
    """Runtime configuration for the contacts client and controllers."""

    api_url: str = DEFAULT_API_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    id_field: str = DEFAULT_ID_FIELD
    keep_draft_on_failure: bool = False
    log_level: str = "WARNING"
    environment: str = "local"


def _env_flag(name: str) -> bool:
    return os.getenv(name, "0").strip().lower() in ("1", "true", "yes")


def load_settings(*, env_file: Optional[str] = None) -> Settings:
    """Load settings from environment variables (and a .env file if present).

    Args:
        env_file: Optional explicit path to a dotenv file.

    Returns:
        Settings with every value resolved.

    Raises:
        ConfigError: if the API URL is blank or the timeout is not a positive number.
    """

    load_dotenv(env_file)

    api_url = os.getenv("CONTACTS_API_URL", DEFAULT_API_URL).strip().rstrip("/")
    if not api_url:
        raise ConfigError("CONTACTS_API_URL is set but empty.")

    raw_timeout = os.getenv("CONTACTS_API_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS))
    try:
        timeout_seconds = float(raw_timeout)
    except ValueError as exc:
        raise ConfigError(
            f"CONTACTS_API_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
        ) from exc
    if timeout_seconds <= 0:
        raise ConfigError("CONTACTS_API_TIMEOUT must be greater than zero.")

    id_field = os.getenv("CONTACTS_ID_FIELD", DEFAULT_ID_FIELD).strip() or DEFAULT_ID_FIELD

    return Settings(
        api_url=api_url,
        timeout_seconds=timeout_seconds,
        id_field=id_field,
        keep_draft_on_failure=_env_flag("CONTACTS_KEEP_DRAFT_ON_FAILURE"),
        log_level=os.getenv("CONTACTS_LOG_LEVEL", "WARNING").strip().upper() or "WARNING",
        environment=os.getenv("CM_ENV", "local"),
    )
