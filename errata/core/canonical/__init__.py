from .entities import (
    ACTION_TYPES,
    ERROR_TYPES,
    SEVERITY_LEVELS,
    ErrorAction,
    ErrorConfig,
    ErrorContext,
    ErrorEntry,
    LocalizedErrorConfig,
    ResolvedError,
    config_to_dict,
    parse_error_config,
    parse_error_entry,
    parse_localized_config,
)
from .schemas import DeviceConfig, ExtendedIssue, ProjectConfig, ReportData, ReportIssue, TestEntryResult

__all__ = [
    "ACTION_TYPES",
    "ERROR_TYPES",
    "SEVERITY_LEVELS",
    "DeviceConfig",
    "ErrorAction",
    "ErrorConfig",
    "ErrorContext",
    "ErrorEntry",
    "ExtendedIssue",
    "LocalizedErrorConfig",
    "ProjectConfig",
    "ReportData",
    "ReportIssue",
    "ResolvedError",
    "TestEntryResult",
    "config_to_dict",
    "parse_error_config",
    "parse_error_entry",
    "parse_localized_config",
]
