from typing import Any

from babel import Locale, UnknownLocaleError

from ..config import get_settings
from ..core.canonical import ErrorConfig, config_to_dict

_DEFAULT_MESSAGE_LIMITS = {
    "low": 80,
    "medium": 160,
    "high": 240,
}
_SUPPORTED_VERBOSITIES = {"low", "medium", "high", "extrahigh"}


def _truncate_message(value: str | None, *, limit: int) -> str:
    text = str(value or "").strip()
    if len(text) <= limit:
        return text
    return f"{text[:limit].rstrip()}... [truncated]"


def _normalize_verbosity(verbosity: str) -> str:
    normalized = str(verbosity or "").strip().lower()
    if normalized in _SUPPORTED_VERBOSITIES:
        return normalized
    return "medium"


def _locale_label(locale: str | None) -> str | None:
    if not locale:
        return None
    try:
        display_name = Locale.parse(locale.replace("-", "_")).english_name
    except (UnknownLocaleError, ValueError, TypeError):
        return locale
    if display_name:
        return f"{locale} ({display_name})"
    return locale


def _count_by(values: list[str]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for value in values:
        counts[value] = counts.get(value, 0) + 1
    return counts


def config_result_to_loggable(
    config: ErrorConfig,
    *,
    locale: str | None = None,
    verbosity: str | None = None,
    debug_enabled: bool | None = None,
) -> dict[str, Any] | None:
    settings = get_settings()
    if debug_enabled is None:
        debug_enabled = settings.debug

    if not debug_enabled:
        return None

    resolved_verbosity = verbosity if verbosity is not None else settings.log_verbosity
    level = _normalize_verbosity(resolved_verbosity)
    data = config_to_dict(config)
    if level == "extrahigh":
        return data

    if level == "high":
        for entry in data.values():
            entry["message"] = _truncate_message(entry.get("message"), limit=_DEFAULT_MESSAGE_LIMITS["high"])
        return data

    summary = {
        "locale": _locale_label(locale),
        "entries_count": len(config),
        "types": _count_by([entry.type for entry in config.values()]),
        "severities": _count_by([entry.severity or "(none)" for entry in config.values()]),
        "action_types": _count_by([entry.action.type for entry in config.values() if entry.action is not None]),
        "entries": [
            {
                "trackId": track_id,
                "type": entry.type,
                "message": _truncate_message(entry.message, limit=_DEFAULT_MESSAGE_LIMITS["medium"]),
                "has_action": entry.action is not None,
            }
            for track_id, entry in config.items()
        ],
    }

    if level == "low":
        return {
            "locale": summary["locale"],
            "entries_count": summary["entries_count"],
            "types": summary["types"],
        }

    return summary


__all__ = ["config_result_to_loggable"]
