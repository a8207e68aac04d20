"""Environment-driven configuration for the dashboard."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_CACHE_TTL = 600
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_CONCURRENCY = 5


class ConfigError(Exception):
    """Raised when required settings are missing or malformed."""


@dataclass(frozen=True)
class DashboardConfig:
    project_url: str
    api_key: str
    cache_ttl: int = DEFAULT_CACHE_TTL
    timeout: float = DEFAULT_TIMEOUT
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY
    log_dir: str | None = None


def _required(env: dict[str, str], name: str) -> str:
    value = env.get(name, "").strip()
    if not value:
        raise ConfigError(f"{name} must be set in the environment or .env file")
    return value


def _number[T: (int, float)](env: dict[str, str], name: str, cast: type[T], default: T) -> T:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {raw!r}")
    return value


def load_config(env: dict[str, str] | None = None) -> DashboardConfig:
    """Build the config from ``env`` or, by default, os.environ plus .env."""
    if env is None:
        load_dotenv()
        env = dict(os.environ)

    return DashboardConfig(
        project_url=_required(env, "SUPABASE_URL"),
        api_key=_required(env, "SUPABASE_ANON_KEY"),
        cache_ttl=_number(env, "LAPMETRICS_CACHE_TTL", int, DEFAULT_CACHE_TTL),
        timeout=_number(env, "LAPMETRICS_TIMEOUT", float, DEFAULT_TIMEOUT),
        max_concurrency=_number(
            env, "LAPMETRICS_MAX_CONCURRENCY", int, DEFAULT_MAX_CONCURRENCY,
        ),
        log_dir=env.get("LAPMETRICS_LOG_DIR") or None,
    )
