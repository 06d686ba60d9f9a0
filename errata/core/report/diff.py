"""Structural diff between two test-run report snapshots."""


from dataclasses import dataclass, field
from typing import Any, Literal

from ..canonical import ReportData, TestEntryResult

DiffStatus = Literal["added", "removed", "changed", "unchanged"]


@dataclass(frozen=True)
class DiffEntry:
    track_id: str
    status: DiffStatus
    details: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"trackId": self.track_id, "status": self.status}
        if self.details is not None:
            data["details"] = self.details
        return data


@dataclass
class DiffResult:
    added: list[DiffEntry] = field(default_factory=list)
    removed: list[DiffEntry] = field(default_factory=list)
    changed: list[DiffEntry] = field(default_factory=list)
    unchanged: list[DiffEntry] = field(default_factory=list)
    summary: str = "No entries"

    def to_dict(self) -> dict[str, Any]:
        return {
            "added": [entry.to_dict() for entry in self.added],
            "removed": [entry.to_dict() for entry in self.removed],
            "changed": [entry.to_dict() for entry in self.changed],
            "unchanged": [entry.to_dict() for entry in self.unchanged],
            "summary": self.summary,
        }


def _coerce_report(report: ReportData | dict[str, Any]) -> ReportData:
    if isinstance(report, ReportData):
        return report
    return ReportData.model_validate(report)


def _pass_fail(success: bool) -> str:
    return "pass" if success else "fail"


def detect_changes(previous: TestEntryResult, current: TestEntryResult) -> list[str]:
    changes: list[str] = []

    if previous.type != current.type:
        changes.append(f"type: {previous.type} -> {current.type}")

    if previous.success != current.success:
        changes.append(f"status: {_pass_fail(previous.success)} -> {_pass_fail(current.success)}")

    previous_issues = len(previous.validation_issues) + len(previous.core_validation_errors)
    current_issues = len(current.validation_issues) + len(current.core_validation_errors)
    if previous_issues != current_issues:
        changes.append(f"issues: {previous_issues} -> {current_issues}")

    previous_warnings = len(previous.core_validation_warnings)
    current_warnings = len(current.core_validation_warnings)
    if previous_warnings != current_warnings:
        changes.append(f"warnings: {previous_warnings} -> {current_warnings}")

    return changes


def _summarize(result: DiffResult) -> str:
    parts = [
        f"{len(entries)} {label}"
        for label, entries in (
            ("added", result.added),
            ("removed", result.removed),
            ("changed", result.changed),
            ("unchanged", result.unchanged),
        )
        if entries
    ]
    return ", ".join(parts) or "No entries"


def diff_reports(
    previous: ReportData | dict[str, Any],
    current: ReportData | dict[str, Any],
) -> DiffResult:
    previous_map = {entry.track_id: entry for entry in _coerce_report(previous).entries}
    current_map = {entry.track_id: entry for entry in _coerce_report(current).entries}

    result = DiffResult()

    for track_id, current_entry in current_map.items():
        previous_entry = previous_map.get(track_id)
        if previous_entry is None:
            result.added.append(
                DiffEntry(track_id=track_id, status="added", details=f"New entry ({current_entry.type})")
            )
            continue

        changes = detect_changes(previous_entry, current_entry)
        if changes:
            result.changed.append(DiffEntry(track_id=track_id, status="changed", details="; ".join(changes)))
        else:
            result.unchanged.append(DiffEntry(track_id=track_id, status="unchanged"))

    for track_id in previous_map:
        if track_id not in current_map:
            result.removed.append(
                DiffEntry(track_id=track_id, status="removed", details="Entry no longer present")
            )

    result.summary = _summarize(result)
    return result


__all__ = ["DiffEntry", "DiffResult", "DiffStatus", "detect_changes", "diff_reports"]
