from errata.core.canonical import ErrorEntry, ReportIssue, TestEntryResult
from errata.core.report import build_report, diff_reports
from errata.core.report.diff import detect_changes
from errata.core.report.extended import RenderResult


def _report_dict(*entries: dict) -> dict:
    return {
        "generatedAt": "2026-02-08T00:00:00Z",
        "device": {"name": "Desktop", "width": 1280, "height": 720},
        "entries": list(entries),
    }


def _entry(track_id: str, *, type: str = "TOAST", success: bool = True, **extra) -> dict:
    return {"trackId": track_id, "type": type, "success": success, **extra}


def test_diff_reports_self_diff_is_all_unchanged() -> None:
    report = _report_dict(_entry("A"), _entry("B", type="MODAL"))

    result = diff_reports(report, report)

    assert result.added == []
    assert result.removed == []
    assert result.changed == []
    assert [entry.track_id for entry in result.unchanged] == ["A", "B"]
    assert result.summary == "2 unchanged"


def test_diff_reports_classifies_added_removed_and_changed() -> None:
    previous = _report_dict(_entry("KEEP"), _entry("GONE"), _entry("FLIP"))
    current = _report_dict(_entry("KEEP"), _entry("FLIP", success=False), _entry("NEW", type="PAGE"))

    result = diff_reports(previous, current)

    assert [entry.to_dict() for entry in result.added] == [
        {"trackId": "NEW", "status": "added", "details": "New entry (PAGE)"}
    ]
    assert [entry.to_dict() for entry in result.removed] == [
        {"trackId": "GONE", "status": "removed", "details": "Entry no longer present"}
    ]
    assert [entry.details for entry in result.changed] == ["status: pass -> fail"]
    assert result.summary == "1 added, 1 removed, 1 changed, 1 unchanged"


def test_diff_reports_joins_multiple_changes() -> None:
    previous = _report_dict(_entry("A", type="TOAST"))
    current = _report_dict(
        _entry(
            "A",
            type="MODAL",
            coreValidationErrors=[{"message": "Missing required field: message", "trackId": "A"}],
            coreValidationWarnings=[{"message": "w", "trackId": "A"}],
        )
    )

    result = diff_reports(previous, current)

    assert result.changed[0].details == "type: TOAST -> MODAL; issues: 0 -> 1; warnings: 0 -> 1"


def test_diff_reports_of_empty_reports() -> None:
    result = diff_reports(_report_dict(), _report_dict())

    assert result.summary == "No entries"
    assert result.to_dict()["unchanged"] == []


def test_detect_changes_counts_extended_and_core_issues_together() -> None:
    previous = TestEntryResult(
        track_id="A",
        type="TOAST",
        success=True,
        core_validation_errors=[ReportIssue(message="x", track_id="A")],
    )
    current = TestEntryResult(
        track_id="A",
        type="TOAST",
        success=True,
        validation_issues=[{"trackId": "A", "kind": "render-failure", "severity": "error", "message": "x"}],
    )

    assert detect_changes(previous, current) == []


def test_diff_reports_accepts_built_reports() -> None:
    config = {"A": ErrorEntry(type="TOAST", message="m")}
    previous = build_report(config, [RenderResult(track_id="A", type="TOAST", success=True)])
    current = build_report(config, [RenderResult(track_id="A", type="TOAST", success=False, error="timeout")])

    result = diff_reports(previous, current)

    assert result.summary == "1 changed"
    assert result.changed[0].details == "status: pass -> fail; issues: 0 -> 1"


def test_diff_reports_accepts_snapshots_with_other_modes() -> None:
    previous = _report_dict(_entry("A")) | {"mode": "storybook"}
    current = _report_dict(_entry("A", success=False)) | {"mode": "app"}

    result = diff_reports(previous, current)

    assert result.summary == "1 changed"
