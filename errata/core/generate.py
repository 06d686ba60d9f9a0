"""Serialization of error configs into their persisted JSON documents.

Nothing here touches the filesystem; callers receive file names and text and
decide where to write them.
"""

import json
import re
from typing import Any

from .canonical import ErrorConfig, LocalizedErrorConfig, config_to_dict
from .errors import UnknownLocaleError

LOCALE_INDEX_FILENAME = "index.json"

# Locale codes become file names, so path separators and dots are not allowed.
_LOCALE_CODE_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")


def _dump(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2) + "\n"


def check_locale_code(locale: str) -> str:
    if not _LOCALE_CODE_RE.match(locale):
        raise ValueError(
            f'Invalid locale code: "{locale}". Use letters, digits, "-" or "_" (for example "en" or "pt-BR").'
        )
    if f"{locale}.json" == LOCALE_INDEX_FILENAME:
        raise ValueError(f'Invalid locale code: "{locale}" collides with {LOCALE_INDEX_FILENAME}.')
    return locale


def render_config_json(config: ErrorConfig) -> str:
    return _dump(config_to_dict(config))


def build_locale_index(locales: list[str], default_locale: str) -> dict[str, Any]:
    for locale in locales:
        check_locale_code(locale)
    if default_locale not in locales:
        raise UnknownLocaleError(default_locale, locales)
    return {"locales": list(locales), "defaultLocale": default_locale}


def render_locale_bundle(localized: LocalizedErrorConfig, default_locale: str) -> dict[str, str]:
    index = build_locale_index(list(localized), default_locale)
    files = {f"{locale}.json": render_config_json(config) for locale, config in localized.items()}
    files[LOCALE_INDEX_FILENAME] = _dump(index)
    return files


__all__ = [
    "LOCALE_INDEX_FILENAME",
    "build_locale_index",
    "check_locale_code",
    "render_config_json",
    "render_locale_bundle",
]
