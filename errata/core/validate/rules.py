"""Structural rules for a single error config."""

from __future__ import annotations

from ..canonical import SEVERITY_LEVELS, ErrorConfig, ErrorEntry

from .report import ValidationIssue, ValidationReport


def _blank(value: str | None) -> bool:
    return not str(value or "").strip()


def _entry_errors(track_id: str, entry: ErrorEntry) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []

    if _blank(entry.type):
        issues.append(ValidationIssue(track_id=track_id, field="type", message="Missing required field: type"))
    if _blank(entry.message):
        issues.append(ValidationIssue(track_id=track_id, field="message", message="Missing required field: message"))

    action = entry.action
    if action is not None:
        if _blank(action.label):
            issues.append(
                ValidationIssue(
                    track_id=track_id,
                    field="action.label",
                    message="Action is missing required field: label",
                )
            )
        if _blank(action.type):
            issues.append(
                ValidationIssue(
                    track_id=track_id,
                    field="action.type",
                    message="Action is missing required field: type",
                )
            )
        if action.type == "REDIRECT" and _blank(action.target):
            issues.append(
                ValidationIssue(
                    track_id=track_id,
                    field="action.target",
                    message='Action type "REDIRECT" requires a target URL',
                )
            )

    return issues


def _entry_warnings(track_id: str, entry: ErrorEntry) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []

    if entry.type == "TOAST" and entry.title:
        issues.append(
            ValidationIssue(
                track_id=track_id,
                field="title",
                message="TOAST errors typically do not display a title",
            )
        )
    if entry.type == "TOAST" and entry.image:
        issues.append(
            ValidationIssue(
                track_id=track_id,
                field="image",
                message="TOAST errors typically do not display an image",
            )
        )
    if entry.type == "PAGE" and entry.action is None:
        issues.append(
            ValidationIssue(
                track_id=track_id,
                field="action",
                message="PAGE errors should provide an action for user navigation",
            )
        )
    if entry.severity and entry.severity not in SEVERITY_LEVELS:
        issues.append(
            ValidationIssue(
                track_id=track_id,
                field="severity",
                message=(
                    f'Unrecognized severity "{entry.severity}". '
                    f"Built-in levels: {', '.join(SEVERITY_LEVELS)}"
                ),
            )
        )

    return issues


def validate_config(config: ErrorConfig) -> ValidationReport:
    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []

    if not config:
        warnings.append(ValidationIssue(message="Config is empty: no error entries found"))

    for track_id, entry in config.items():
        errors.extend(_entry_errors(track_id, entry))
        warnings.extend(_entry_warnings(track_id, entry))

    return ValidationReport(valid=not errors, errors=errors, warnings=warnings)


__all__ = ["validate_config"]
