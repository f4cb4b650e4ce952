"""
Process configuration read from the environment.

A local `.env` file is loaded first (see `load_environment`); variables
already present in the process environment win.
"""

from __future__ import annotations

import os
from urllib.parse import parse_qsl, urlencode, urlsplit

from dotenv import load_dotenv

HOST = "0.0.0.0"
PORT = 6969

DEFAULT_POOL_MIN_SIZE = 1
DEFAULT_POOL_MAX_SIZE = 10
DEFAULT_COMMAND_TIMEOUT = 30.0


class ConfigurationError(RuntimeError):
    pass


def load_environment() -> None:
    load_dotenv(override=False)


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


# libpq-only DSN options asyncpg refuses in the URL query.
_UNSUPPORTED_DSN_OPTIONS = frozenset({"sslmode"})


def _drop_unsupported_options(url: str) -> str:
    parts = urlsplit(url)
    options = parse_qsl(parts.query, keep_blank_values=True)
    kept = [(name, value) for name, value in options if name not in _UNSUPPORTED_DSN_OPTIONS]
    if len(kept) == len(options):
        return url
    return parts._replace(query=urlencode(kept)).geturl()


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise ConfigurationError("DATABASE_URL must be set.")
    return _drop_unsupported_options(url)


def pool_max_size() -> int:
    size = _env_int("DB_POOL_MAX_SIZE", DEFAULT_POOL_MAX_SIZE)
    return size if size > 0 else DEFAULT_POOL_MAX_SIZE


def pool_min_size() -> int:
    size = _env_int("DB_POOL_MIN_SIZE", DEFAULT_POOL_MIN_SIZE)
    if size < 0:
        size = DEFAULT_POOL_MIN_SIZE
    return min(size, pool_max_size())


def command_timeout() -> float:
    timeout = _env_float("DB_COMMAND_TIMEOUT", DEFAULT_COMMAND_TIMEOUT)
    return timeout if timeout > 0 else DEFAULT_COMMAND_TIMEOUT


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
