"""Pydantic schemas for JSON documents exchanged with external collaborators."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class DeviceConfig(_CamelModel):
    name: str
    width: int
    height: int
    device_scale_factor: float = 1
    is_mobile: bool = False


class ReportIssue(_CamelModel):
    message: str
    track_id: str | None = None
    field: str | None = None


class ExtendedIssue(_CamelModel):
    track_id: str
    kind: str
    severity: Literal["error", "warning"]
    message: str


class TestEntryResult(_CamelModel):
    __test__ = False

    track_id: str
    type: str
    success: bool
    render_time_ms: float = 0
    screenshot_base64: str = ""
    error: str | None = None
    validation_issues: list[ExtendedIssue] = Field(default_factory=list)
    core_validation_errors: list[ReportIssue] = Field(default_factory=list)
    core_validation_warnings: list[ReportIssue] = Field(default_factory=list)


class ReportData(_CamelModel):
    generated_at: str
    device: DeviceConfig
    mode: str = "standalone"
    total_entries: int = 0
    pass_count: int = 0
    fail_count: int = 0
    warning_count: int = 0
    entries: list[TestEntryResult] = Field(default_factory=list)


class ProjectConfig(_CamelModel):
    """Contents of the ``.errata.json`` project file read by the CLI."""

    source: dict[str, Any] | None = None
    locales: dict[str, dict[str, Any]] | None = None
    default_locale: str | None = None
    output: str = "errata.json"

    @model_validator(mode="after")
    def _require_one_source_kind(self) -> "ProjectConfig":
        if (self.source is None) == (self.locales is None):
            raise ValueError("Project config must define exactly one of 'source' or 'locales'.")
        if self.locales is not None:
            if not self.locales:
                raise ValueError("'locales' must list at least one locale source.")
            if self.default_locale is None:
                self.default_locale = next(iter(self.locales))
        return self


__all__ = [
    "DeviceConfig",
    "ExtendedIssue",
    "ProjectConfig",
    "ReportData",
    "ReportIssue",
    "TestEntryResult",
]
