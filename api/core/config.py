"""
Environment-driven settings.

Store credentials are required; everything else has a default that works
for local development.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3001
DEFAULT_STORE_TIMEOUT_S = 30.0


class ConfigError(RuntimeError):
    pass


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def store_url() -> str:
    url = _env_str("SUPABASE_URL")
    if not url:
        raise ConfigError("SUPABASE_URL is not set.")
    return url.rstrip("/")


def store_key() -> str:
    key = _env_str("SUPABASE_ANON_KEY")
    if not key:
        raise ConfigError("SUPABASE_ANON_KEY is not set.")
    return key


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO")


@dataclass(frozen=True)
class Settings:
    store_url: str
    store_key: str
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    store_timeout_s: float = DEFAULT_STORE_TIMEOUT_S


def load_settings() -> Settings:
    """
    Read settings from the environment.

    Raises `ConfigError` when either store credential is missing.
    """
    missing = [name for name in ("SUPABASE_URL", "SUPABASE_ANON_KEY") if not _env_str(name)]
    if missing:
        raise ConfigError(
            f"Missing store credentials: {', '.join(missing)}. "
            "Please set SUPABASE_URL and SUPABASE_ANON_KEY."
        )
    return Settings(
        store_url=store_url(),
        store_key=store_key(),
        host=_env_str("HOST", DEFAULT_HOST),
        port=_env_int("PORT", DEFAULT_PORT),
        store_timeout_s=_env_float("STORE_TIMEOUT_S", DEFAULT_STORE_TIMEOUT_S),
    )
