"""Consistency checks for the same trackIds across per-locale configs."""

from __future__ import annotations

from typing import Callable

from ..canonical import ErrorEntry, LocalizedErrorConfig

from .report import CrossLocaleIssue, CrossLocaleReport


def _group_locales(
    localized: LocalizedErrorConfig,
    track_id: str,
    present: list[str],
    key: Callable[[ErrorEntry], str],
) -> dict[str, list[str]]:
    groups: dict[str, list[str]] = {}
    for locale in present:
        groups.setdefault(key(localized[locale][track_id]), []).append(locale)
    return groups


def _describe_groups(groups: dict[str, list[str]]) -> str:
    return ", ".join(
        f"{value or '(none)'} in [{', '.join(locales)}]" for value, locales in groups.items()
    )


def _action_type(entry: ErrorEntry) -> str:
    if entry.action is None:
        return ""
    return entry.action.type or ""


def validate_locales(localized: LocalizedErrorConfig) -> CrossLocaleReport:
    errors: list[CrossLocaleIssue] = []
    warnings: list[CrossLocaleIssue] = []

    locale_names = list(localized)
    if len(locale_names) < 2:
        return CrossLocaleReport(valid=True, errors=errors, warnings=warnings)

    all_track_ids: dict[str, None] = {}
    for locale in locale_names:
        for track_id in localized[locale]:
            all_track_ids.setdefault(track_id, None)

    for track_id in all_track_ids:
        present = [locale for locale in locale_names if track_id in localized[locale]]
        missing = [locale for locale in locale_names if track_id not in localized[locale]]
        if missing:
            errors.append(
                CrossLocaleIssue(
                    track_id=track_id,
                    locales=missing,
                    message=(
                        f'trackId "{track_id}" exists in [{", ".join(present)}] '
                        f'but missing in [{", ".join(missing)}]'
                    ),
                )
            )

    for track_id in all_track_ids:
        present = [locale for locale in locale_names if track_id in localized[locale]]
        if len(present) < 2:
            continue

        types = _group_locales(localized, track_id, present, lambda entry: entry.type)
        if len(types) > 1:
            warnings.append(
                CrossLocaleIssue(
                    track_id=track_id,
                    field="type",
                    locales=present,
                    message=f'type mismatch for "{track_id}": {_describe_groups(types)}',
                )
            )

        action_types = _group_locales(localized, track_id, present, _action_type)
        if len(action_types) > 1:
            warnings.append(
                CrossLocaleIssue(
                    track_id=track_id,
                    field="action.type",
                    locales=present,
                    message=f'actionType mismatch for "{track_id}": {_describe_groups(action_types)}',
                )
            )

    return CrossLocaleReport(valid=not errors, errors=errors, warnings=warnings)


__all__ = ["validate_locales"]
