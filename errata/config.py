"""Shared runtime settings for the CLI frontend.

This module owns environment-backed settings. It is intentionally separate
from ``errata.core.config`` because core config stays minimal and
frontend-agnostic.
"""

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class Settings:
    debug: bool
    log_verbosity: str
    project_config_path: str
    default_locale: str | None


def _env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}


def _env_choice(name: str, default: str, *, allowed: set[str]) -> str:
    val = os.getenv(name)
    if val is None:
        return default
    normalized = val.strip().lower()
    if normalized in allowed:
        return normalized
    return default


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        debug=_env_bool("ERRATA_DEBUG", default=False),
        log_verbosity=_env_choice(
            "ERRATA_LOG_VERBOSITY",
            default="medium",
            allowed={"low", "medium", "high", "extrahigh"},
        ),
        project_config_path=os.getenv("ERRATA_CONFIG", ".errata.json"),
        default_locale=(os.getenv("ERRATA_DEFAULT_LOCALE") or "").strip() or None,
    )


__all__ = ["Settings", "get_settings"]
