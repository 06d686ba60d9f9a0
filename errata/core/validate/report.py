"""Validation report types for error config checks."""


from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ValidationIssue:
    message: str
    track_id: str | None = None
    field: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.track_id is not None:
            data["trackId"] = self.track_id
        if self.field is not None:
            data["field"] = self.field
        data["message"] = self.message
        return data


@dataclass
class ValidationReport:
    valid: bool
    errors: list[ValidationIssue] = field(default_factory=list)
    warnings: list[ValidationIssue] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": [issue.to_dict() for issue in self.errors],
            "warnings": [issue.to_dict() for issue in self.warnings],
        }


@dataclass(frozen=True)
class CrossLocaleIssue:
    track_id: str
    message: str
    locales: list[str] = field(default_factory=list)
    field: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"trackId": self.track_id}
        if self.field is not None:
            data["field"] = self.field
        data["locales"] = list(self.locales)
        data["message"] = self.message
        return data


@dataclass
class CrossLocaleReport:
    valid: bool
    errors: list[CrossLocaleIssue] = field(default_factory=list)
    warnings: list[CrossLocaleIssue] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": [issue.to_dict() for issue in self.errors],
            "warnings": [issue.to_dict() for issue in self.warnings],
        }


__all__ = ["CrossLocaleIssue", "CrossLocaleReport", "ValidationIssue", "ValidationReport"]
