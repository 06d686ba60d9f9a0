"""Core engine configuration.

Core config is side-effect free: it does not load dotenv files.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_flag(name: str) -> bool:
    return str(os.getenv(name) or "").strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class CoreConfig:
    strict: bool = False
    debug: bool = False


def config_from_env(*, strict: bool = False, debug: bool = False) -> CoreConfig:
    return CoreConfig(
        strict=strict or _env_flag("ERRATA_STRICT"),
        debug=debug or _env_flag("ERRATA_DEBUG"),
    )


__all__ = ["CoreConfig", "config_from_env"]
