"""
Application Configuration

Settings are read from environment variables first and then from
Streamlit secrets (``[passwords]`` section of ``.streamlit/secrets.toml``):

    [passwords]
    TRIP_CALC_ENCRYPTION_KEY = "..."   # Fernet key, optional
    TRIP_CALC_ADMIN_PASSWORD = "..."   # seed password for the admin principal

Calculator defaults (fuel price, toll, consumption, ...) are not settings;
they live next to the data model in calculators/trip_models.py.
"""

import os
from dataclasses import dataclass
from typing import Optional

import streamlit as st

from utils.logging_config import setup_logger

logger = setup_logger(__name__)

DEFAULT_DB_PATH = "data/trip_calculator.db"
DEFAULT_RATE_TIMEOUT_SECONDS = 10.0
DEFAULT_ADMIN_PASSWORD = "admin"


@dataclass(frozen=True)
class AppConfig:
    """Resolved runtime configuration."""
    db_path: str = DEFAULT_DB_PATH
    encryption_key: Optional[str] = None
    admin_password: str = DEFAULT_ADMIN_PASSWORD
    rate_timeout_seconds: float = DEFAULT_RATE_TIMEOUT_SECONDS


def _secret(name: str) -> Optional[str]:
    """Look a value up in Streamlit secrets (nested under passwords or top level)."""
    try:
        if "passwords" in st.secrets and name in st.secrets["passwords"]:
            return st.secrets["passwords"][name]
        if name in st.secrets:
            return st.secrets[name]
    except Exception as e:
        # No secrets.toml at all (tests, plain scripts)
        logger.debug(f"Secrets unavailable while resolving {name}: {e}")
    return None


def _setting(name: str) -> Optional[str]:
    return os.getenv(name) or _secret(name)


def load_config() -> AppConfig:
    """
    Build the application configuration.

    Returns:
        AppConfig with every unset value at its default
    """
    timeout_raw = _setting("TRIP_CALC_RATE_TIMEOUT")
    try:
        timeout = float(timeout_raw) if timeout_raw else DEFAULT_RATE_TIMEOUT_SECONDS
    except ValueError:
        logger.warning(f"Invalid TRIP_CALC_RATE_TIMEOUT '{timeout_raw}', using {DEFAULT_RATE_TIMEOUT_SECONDS}s")
        timeout = DEFAULT_RATE_TIMEOUT_SECONDS

    admin_password = _setting("TRIP_CALC_ADMIN_PASSWORD")
    if not admin_password:
        logger.warning("TRIP_CALC_ADMIN_PASSWORD not configured, admin will be seeded with the default password")
        admin_password = DEFAULT_ADMIN_PASSWORD

    config = AppConfig(
        db_path=_setting("TRIP_CALC_DB_PATH") or DEFAULT_DB_PATH,
        encryption_key=_setting("TRIP_CALC_ENCRYPTION_KEY"),
        admin_password=admin_password,
        rate_timeout_seconds=timeout,
    )

    logger.info(
        f"Configuration loaded: db={config.db_path}, "
        f"encrypted={'yes' if config.encryption_key else 'no'}, rate_timeout={config.rate_timeout_seconds}s"
    )
    return config
