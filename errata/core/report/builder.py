from datetime import datetime, timezone
from typing import Iterable, Literal

from ..canonical import DeviceConfig, ErrorConfig, ReportData, ReportIssue, TestEntryResult
from ..validate import ValidationIssue

from .extended import RenderResult, run_extended_validation

DEVICE_CONFIGS: dict[str, DeviceConfig] = {
    "desktop": DeviceConfig(name="Desktop", width=1280, height=720, device_scale_factor=1, is_mobile=False),
    "mobile": DeviceConfig(name="Mobile", width=375, height=812, device_scale_factor=2, is_mobile=True),
    "tablet": DeviceConfig(name="Tablet", width=768, height=1024, device_scale_factor=2, is_mobile=True),
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _report_issues(issues: Iterable[ValidationIssue], track_id: str) -> list[ReportIssue]:
    return [
        ReportIssue(track_id=issue.track_id, field=issue.field, message=issue.message)
        for issue in issues
        if issue.track_id == track_id
    ]


def filter_track_ids(
    config: ErrorConfig,
    ids: str | None = None,
    types: str | None = None,
) -> list[str]:
    track_ids = list(config)

    if ids:
        allowed_ids = {token.strip() for token in ids.split(",")}
        track_ids = [track_id for track_id in track_ids if track_id in allowed_ids]

    if types:
        allowed_types = {token.strip().upper() for token in types.split(",")}
        track_ids = [track_id for track_id in track_ids if config[track_id].type.upper() in allowed_types]

    return track_ids


def build_report(
    config: ErrorConfig,
    renders: Iterable[RenderResult],
    *,
    device: DeviceConfig | str = "desktop",
    mode: Literal["standalone", "app"] = "standalone",
) -> ReportData:
    renders = list(renders)
    if isinstance(device, str):
        if device not in DEVICE_CONFIGS:
            raise ValueError(f"device must be one of: {', '.join(DEVICE_CONFIGS)}")
        device = DEVICE_CONFIGS[device]

    validation = run_extended_validation(config, renders)

    entries: list[TestEntryResult] = []
    for render in renders:
        entries.append(
            TestEntryResult(
                track_id=render.track_id,
                type=render.type,
                screenshot_base64=render.screenshot_base64,
                render_time_ms=render.render_time_ms,
                success=render.success,
                error=render.error,
                validation_issues=[issue for issue in validation.issues if issue.track_id == render.track_id],
                core_validation_errors=_report_issues(validation.core_errors, render.track_id),
                core_validation_warnings=_report_issues(validation.core_warnings, render.track_id),
            )
        )

    pass_count = 0
    fail_count = 0
    warning_count = 0
    for entry in entries:
        if (
            not entry.success
            or entry.core_validation_errors
            or any(issue.severity == "error" for issue in entry.validation_issues)
        ):
            fail_count += 1
        elif entry.core_validation_warnings or any(
            issue.severity == "warning" for issue in entry.validation_issues
        ):
            warning_count += 1
        else:
            pass_count += 1

    return ReportData(
        generated_at=_utcnow().isoformat().replace("+00:00", "Z"),
        device=device,
        mode=mode,
        total_entries=len(entries),
        pass_count=pass_count,
        fail_count=fail_count,
        warning_count=warning_count,
        entries=entries,
    )


__all__ = ["DEVICE_CONFIGS", "build_report", "filter_track_ids"]
