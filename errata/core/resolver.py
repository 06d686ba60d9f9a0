from typing import Mapping

from .canonical import ErrorAction, ErrorConfig, LocalizedErrorConfig, ResolvedError
from .errors import UnknownLocaleError, UnknownTrackIdError
from .template import render_template


def resolve_error(
    config: ErrorConfig,
    track_id: str,
    variables: Mapping[str, str] | None = None,
) -> ResolvedError:
    """Look up ``track_id`` and substitute ``variables`` into its display text."""
    entry = config.get(track_id)
    if entry is None:
        raise UnknownTrackIdError(track_id)

    vars_ = variables or {}

    action: ErrorAction | None = None
    if entry.action is not None:
        action = ErrorAction(
            label=render_template(entry.action.label, vars_),
            type=entry.action.type,
            target=render_template(entry.action.target, vars_) if entry.action.target else entry.action.target,
        )

    return ResolvedError(
        track_id=track_id,
        type=entry.type,
        message=render_template(entry.message, vars_),
        title=render_template(entry.title, vars_) if entry.title else entry.title,
        image=entry.image,
        severity=entry.severity,
        action=action,
    )


def select_locale_config(
    localized: LocalizedErrorConfig,
    locale: str | None = None,
    default_locale: str | None = None,
) -> ErrorConfig:
    if locale and locale in localized:
        return localized[locale]
    if default_locale and default_locale in localized:
        return localized[default_locale]
    raise UnknownLocaleError(locale or default_locale, list(localized))


def resolve_localized(
    localized: LocalizedErrorConfig,
    track_id: str,
    variables: Mapping[str, str] | None = None,
    *,
    locale: str | None = None,
    default_locale: str | None = None,
) -> ResolvedError:
    config = select_locale_config(localized, locale=locale, default_locale=default_locale)
    return resolve_error(config, track_id, variables)


__all__ = ["resolve_error", "resolve_localized", "select_locale_config"]
