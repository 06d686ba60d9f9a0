"""Public package entrypoint for errata.

errata compiles spreadsheet-style error content into validated, localizable
error configs and resolves individual errors at runtime. The CLI frontend
lives in ``errata.cli``.
"""

from importlib.metadata import PackageNotFoundError, version
from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "ErrorEntry": ("errata.core", "ErrorEntry"),
    "ResolvedError": ("errata.core", "ResolvedError"),
    "diff_reports": ("errata.core", "diff_reports"),
    "parse_rows": ("errata.core", "parse_rows"),
    "pull_config": ("errata.core", "pull_config"),
    "render_template": ("errata.core", "render_template"),
    "resolve_error": ("errata.core", "resolve_error"),
    "rows_to_config": ("errata.core", "rows_to_config"),
    "run_plugin_hook": ("errata.core", "run_plugin_hook"),
    "validate_config": ("errata.core", "validate_config"),
    "validate_locales": ("errata.core", "validate_locales"),
}

try:
    __version__ = version("errata")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "ErrorEntry",
    "ResolvedError",
    "__version__",
    "diff_reports",
    "parse_rows",
    "pull_config",
    "render_template",
    "resolve_error",
    "rows_to_config",
    "run_plugin_hook",
    "validate_config",
    "validate_locales",
]


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
