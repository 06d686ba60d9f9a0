"""Fan-out of optional plugin hooks.

Each plugin is called inside its own ``try`` block: a plugin that raises is
logged and skipped, and the remaining plugins still run.
"""

import logging
from typing import Any, Iterable, Literal, Mapping, Protocol

from .canonical import ErrorAction, ErrorContext, ResolvedError

logger = logging.getLogger("errata")

HookName = Literal["on_error", "on_action"]


class Plugin(Protocol):
    """Observer notified of resolved errors.

    Hooks are optional methods looked up by name:
    ``on_error(error, context)`` and ``on_action(error, action)``.
    """

    name: str


def _plugin_name(plugin: Any) -> str:
    try:
        name = getattr(plugin, "name", None)
    except Exception:
        name = None
    return str(name or type(plugin).__name__)


def run_plugin_hook(plugins: Iterable[Plugin], hook: HookName, *args: Any) -> None:
    for plugin in plugins:
        try:
            handler = getattr(plugin, hook, None)
            if callable(handler):
                handler(*args)
        except Exception:
            logger.warning('Plugin "%s" raised in %s', _plugin_name(plugin), hook, exc_info=True)


def notify_error(
    plugins: Iterable[Plugin],
    error: ResolvedError,
    *,
    variables: Mapping[str, str] | None = None,
    locale: str | None = None,
) -> ErrorContext:
    context = ErrorContext(
        track_id=error.track_id,
        variables=dict(variables) if variables is not None else None,
        locale=locale,
        severity=error.severity,
    )
    run_plugin_hook(plugins, "on_error", error, context)
    return context


def notify_action(plugins: Iterable[Plugin], error: ResolvedError) -> ErrorAction | None:
    if error.action is None:
        return None
    run_plugin_hook(plugins, "on_action", error, error.action)
    return error.action


__all__ = ["HookName", "Plugin", "notify_action", "notify_error", "run_plugin_hook"]
