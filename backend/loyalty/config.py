"""
Service configuration read from environment variables.

Each value falls back to its default (with a warning) when the variable
is set to something unusable, so a bad deployment value never stops the
API from starting.
"""

import logging
import os
from datetime import UTC, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)


def _int_env(name: str, default: int) -> int:
    try:
        value = int(os.getenv(name, str(default)))
    except (TypeError, ValueError):
        logger.warning("Invalid %s value; falling back to default %s", name, default)
        return default
    if value < 1:
        logger.warning("%s must be positive; falling back to default %s", name, default)
        return default
    return value


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _timezone_env(name: str, default: str = "UTC") -> tzinfo:
    zone_name = os.getenv(name, default).strip() or default
    if zone_name.upper() == "UTC":
        return UTC
    try:
        return ZoneInfo(zone_name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown %s '%s'; falling back to UTC", name, zone_name)
        return UTC


class Settings:
    """Centralized service settings with environment variable overrides"""
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./loyalty.db")

    API_KEY = os.getenv("LOYALTY_API_KEY", "demo-api-key-12345")
    API_KEY_HEADER = os.getenv("LOYALTY_API_KEY_HEADER", "X-API-Key")

    RATE_LIMIT_PER_MINUTE = _int_env("RATE_LIMIT_PER_MINUTE", 100)

    # Month buckets and query windows are evaluated in this zone
    REWARDS_TIMEZONE = _timezone_env("REWARDS_TIMEZONE")

    SEED_SAMPLE_DATA = _bool_env("SEED_SAMPLE_DATA", True)

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    CORS_ALLOW_ORIGINS = [
        origin.strip()
        for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
        if origin.strip()
    ]


settings = Settings()
