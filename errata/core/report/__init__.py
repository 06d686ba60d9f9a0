from .builder import DEVICE_CONFIGS, build_report, filter_track_ids
from .diff import DiffEntry, DiffResult, detect_changes, diff_reports
from .extended import ExtendedValidationResult, RenderResult, run_extended_validation

__all__ = [
    "DEVICE_CONFIGS",
    "DiffEntry",
    "DiffResult",
    "ExtendedValidationResult",
    "RenderResult",
    "build_report",
    "detect_changes",
    "diff_reports",
    "filter_track_ids",
    "run_extended_validation",
]
