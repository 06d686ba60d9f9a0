"""Core engine API.

The core layer is framework-agnostic and safe to import from scripts, tests,
CLI commands, and UI bindings. It performs no network I/O and writes no files.
"""

from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "AdapterRegistry": ("errata.core.sources", "AdapterRegistry"),
    "CoreConfig": ("errata.core.config", "CoreConfig"),
    "ErrorAction": ("errata.core.canonical", "ErrorAction"),
    "ErrorEntry": ("errata.core.canonical", "ErrorEntry"),
    "ResolvedError": ("errata.core.canonical", "ResolvedError"),
    "StructuralError": ("errata.core.errors", "StructuralError"),
    "UnknownTrackIdError": ("errata.core.errors", "UnknownTrackIdError"),
    "config_from_env": ("errata.core.config", "config_from_env"),
    "default_registry": ("errata.core.sources", "default_registry"),
    "diff_reports": ("errata.core.report", "diff_reports"),
    "parse_error_config": ("errata.core.canonical", "parse_error_config"),
    "parse_rows": ("errata.core.tabular", "parse_rows"),
    "pull_config": ("errata.core.api", "pull_config"),
    "pull_locales": ("errata.core.api", "pull_locales"),
    "render_config_json": ("errata.core.generate", "render_config_json"),
    "render_locale_bundle": ("errata.core.generate", "render_locale_bundle"),
    "render_template": ("errata.core.template", "render_template"),
    "resolve_error": ("errata.core.resolver", "resolve_error"),
    "resolve_localized": ("errata.core.resolver", "resolve_localized"),
    "rows_to_config": ("errata.core.tabular", "rows_to_config"),
    "run_plugin_hook": ("errata.core.plugins", "run_plugin_hook"),
    "validate_config": ("errata.core.validate", "validate_config"),
    "validate_locales": ("errata.core.validate", "validate_locales"),
}

__all__ = sorted(_LAZY_EXPORTS)


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
