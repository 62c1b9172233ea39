"""Configuration settings for the netlayer request layer."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger("netlayer.config")


def _get_bool(env_var: str, default: bool = False) -> bool:
    """Parse an environment variable into a boolean with a default."""

    value = os.getenv(env_var)
    if value is None:
        return default

    return value.lower() in {"1", "true", "yes", "on"}


def _get_float(env_var: str, default: float) -> float:
    """Parse an environment variable into a float, falling back on bad input."""

    value = os.getenv(env_var)
    if value is None or not value.strip():
        return default

    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r; using %s", env_var, value, default)
        return default


@dataclass
class Settings:
    """Library configuration loaded from environment variables."""

    netlayer_env: str = os.getenv("NETLAYER_ENV", "local")
    log_level: str = os.getenv("NETLAYER_LOG_LEVEL", "INFO")

    # Request execution
    default_timeout: float = _get_float("NETLAYER_DEFAULT_TIMEOUT", 60.0)
    log_response_bodies: bool = _get_bool("NETLAYER_LOG_RESPONSE_BODIES")

    # Reachability monitor
    reachability_host: str = os.getenv("NETLAYER_REACHABILITY_HOST", "1.1.1.1")
    reachability_port: int = int(_get_float("NETLAYER_REACHABILITY_PORT", 443))
    reachability_interval: float = _get_float("NETLAYER_REACHABILITY_INTERVAL", 10.0)
    reachability_timeout: float = _get_float("NETLAYER_REACHABILITY_TIMEOUT", 3.0)


settings = Settings()

__all__ = ["settings", "Settings"]
