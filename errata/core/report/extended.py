"""Checks that go beyond the structural validator.

These run against a config plus, optionally, render results captured by an
external collaborator (for example a browser screenshot run).
"""

from dataclasses import dataclass, field
from typing import Iterable
from urllib.parse import urlparse

from ..canonical import ErrorConfig, ExtendedIssue
from ..template import find_template_variables
from ..validate import ValidationIssue, validate_config

MAX_MESSAGE_LENGTHS = {
    "TOAST": 120,
    "MODAL": 500,
    "PAGE": 300,
}
SLOW_RENDER_THRESHOLD_MS = 3000


@dataclass(frozen=True)
class RenderResult:
    track_id: str
    type: str
    success: bool
    render_time_ms: float = 0
    error: str | None = None
    screenshot_base64: str = ""


@dataclass
class ExtendedValidationResult:
    core_errors: list[ValidationIssue] = field(default_factory=list)
    core_warnings: list[ValidationIssue] = field(default_factory=list)
    issues: list[ExtendedIssue] = field(default_factory=list)


def is_valid_image_url(value: str) -> bool:
    parsed = urlparse(str(value or "").strip())
    if not parsed.scheme:
        return False
    if parsed.scheme in {"http", "https"}:
        return bool(parsed.netloc)
    return True


def max_message_length(error_type: str) -> int | None:
    return MAX_MESSAGE_LENGTHS.get(str(error_type or "").upper())


def run_extended_validation(
    config: ErrorConfig,
    renders: Iterable[RenderResult] = (),
) -> ExtendedValidationResult:
    core = validate_config(config)
    render_map = {render.track_id: render for render in renders}
    issues: list[ExtendedIssue] = []

    for track_id, entry in config.items():
        render = render_map.get(track_id)

        if render is not None and not render.success:
            issues.append(
                ExtendedIssue(
                    track_id=track_id,
                    kind="render-failure",
                    severity="error",
                    message=f"Render failed: {render.error or 'unknown error'}",
                )
            )

        if entry.image and not is_valid_image_url(entry.image):
            issues.append(
                ExtendedIssue(
                    track_id=track_id,
                    kind="image-url-broken",
                    severity="warning",
                    message=f"Invalid image URL: {entry.image}",
                )
            )

        limit = max_message_length(entry.type)
        if limit is not None and len(entry.message) > limit:
            issues.append(
                ExtendedIssue(
                    track_id=track_id,
                    kind="message-too-long",
                    severity="warning",
                    message=(
                        f"Message length ({len(entry.message)}) exceeds recommended max "
                        f"({limit}) for {entry.type}"
                    ),
                )
            )

        if render is not None and render.success and render.render_time_ms > SLOW_RENDER_THRESHOLD_MS:
            issues.append(
                ExtendedIssue(
                    track_id=track_id,
                    kind="slow-render",
                    severity="warning",
                    message=(
                        f"Render took {render.render_time_ms:g}ms "
                        f"(threshold: {SLOW_RENDER_THRESHOLD_MS}ms)"
                    ),
                )
            )

        names = find_template_variables(entry.message)
        if entry.title:
            names.extend(find_template_variables(entry.title))
        if entry.action is not None and entry.action.label:
            names.extend(find_template_variables(entry.action.label))
        if names:
            placeholders = ", ".join("{{" + name + "}}" for name in dict.fromkeys(names))
            issues.append(
                ExtendedIssue(
                    track_id=track_id,
                    kind="missing-template-variable",
                    severity="warning",
                    message=(
                        f"Template variables found: {placeholders}. "
                        "Provide values in simulate.variables or simulate.defaultVariables."
                    ),
                )
            )

    return ExtendedValidationResult(
        core_errors=list(core.errors),
        core_warnings=list(core.warnings),
        issues=issues,
    )


__all__ = [
    "MAX_MESSAGE_LENGTHS",
    "SLOW_RENDER_THRESHOLD_MS",
    "ExtendedValidationResult",
    "RenderResult",
    "is_valid_image_url",
    "max_message_length",
    "run_extended_validation",
]
