# country_info/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger("country-info")

# -------------------------------------------------------------------
# DEFAULTS
# -------------------------------------------------------------------
DEFAULT_PORT = 8080
DEFAULT_HOST = "0.0.0.0"
DEFAULT_REST_COUNTRIES_URL = "http://129.241.150.113:8080/v3.1/alpha/"
DEFAULT_COUNTRIES_NOW_URL = "http://129.241.150.113:3500/api/v0.1/"
DEFAULT_UPSTREAM_TIMEOUT = 5.0
DEFAULT_API_VERSION = "v1"

BASE_PATH = "/countryinfo/v1"


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_port() -> int:
    raw = os.getenv("PORT", "")
    if not raw:
        logger.info("$PORT has not been set. Defaulting to %d", DEFAULT_PORT)
        return DEFAULT_PORT
    return int(raw)


@dataclass(frozen=True)
class Settings:
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    rest_countries_url: str = DEFAULT_REST_COUNTRIES_URL
    countries_now_url: str = DEFAULT_COUNTRIES_NOW_URL
    upstream_timeout: float = DEFAULT_UPSTREAM_TIMEOUT
    api_version: str = DEFAULT_API_VERSION
    fan_out: bool = False
    log_level: str = "INFO"


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """
    Build Settings from the environment. A `.env` file (if present) is merged
    first; variables already set in the process environment win.
    """
    load_dotenv(dotenv_path)
    return Settings(
        port=_env_port(),
        host=os.getenv("HOST", DEFAULT_HOST),
        rest_countries_url=os.getenv("REST_COUNTRIES_URL", DEFAULT_REST_COUNTRIES_URL),
        countries_now_url=os.getenv("COUNTRIES_NOW_URL", DEFAULT_COUNTRIES_NOW_URL),
        upstream_timeout=float(os.getenv("UPSTREAM_TIMEOUT", str(DEFAULT_UPSTREAM_TIMEOUT))),
        api_version=os.getenv("API_VERSION", DEFAULT_API_VERSION),
        fan_out=_env_flag("COUNTRY_INFO_FANOUT"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
