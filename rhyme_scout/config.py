"""Runtime settings for Rhyme Scout.

Every setting is read from an environment variable so deployments can be
tuned without code changes. Malformed values fall back to the default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_DATAMUSE_URL = "https://api.datamuse.com"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_str(env: Mapping[str, str], name: str, default: str) -> str:
    value = env.get(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_bool(env: Mapping[str, str], name: str, default: bool = False) -> bool:
    value = env.get(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def _env_int(env: Mapping[str, str], name: str, default: Optional[int]) -> Optional[int]:
    try:
        return int(env[name])
    except (KeyError, TypeError, ValueError):
        return default


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    try:
        return float(env[name])
    except (KeyError, TypeError, ValueError):
        return default


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    datamuse_url: str = DEFAULT_DATAMUSE_URL
    max_results: int = 100
    request_timeout: float = 10.0
    history_size: int = 10
    max_concurrent_searches: Optional[int] = None
    share: bool = False
    server_port: int = 7860

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        return cls(
            log_level=_env_str(env, "RHYMES_LOG_LEVEL", "INFO").upper(),
            datamuse_url=_env_str(env, "RHYMES_DATAMUSE_URL", DEFAULT_DATAMUSE_URL).rstrip("/"),
            max_results=max(1, _env_int(env, "RHYMES_MAX_RESULTS", 100) or 100),
            request_timeout=max(0.1, _env_float(env, "RHYMES_REQUEST_TIMEOUT", 10.0)),
            history_size=max(1, _env_int(env, "RHYMES_HISTORY_SIZE", 10) or 10),
            max_concurrent_searches=_env_int(env, "RHYMES_MAX_CONCURRENT", None),
            share=_env_bool(env, "RHYMES_SHARE"),
            server_port=_env_int(env, "RHYMES_SERVER_PORT", 7860) or 7860,
        )


__all__ = ["DEFAULT_DATAMUSE_URL", "Settings"]
