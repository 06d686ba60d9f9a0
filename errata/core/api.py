"""Stable public API facade for the errata core engine."""


import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from .canonical import ErrorConfig, LocalizedErrorConfig, parse_error_config
from .config import config_from_env
from .errors import PullFailedError
from .generate import check_locale_code
from .sources import AdapterRegistry, parse_source
from .tabular import rows_to_config
from .validate import CrossLocaleReport, ValidationReport, validate_config, validate_locales

logger = logging.getLogger("errata")


@dataclass
class PullResult:
    config: ErrorConfig
    report: ValidationReport


@dataclass
class LocalePullResult:
    locales: LocalizedErrorConfig
    default_locale: str
    reports: dict[str, ValidationReport] = field(default_factory=dict)
    cross_locale: CrossLocaleReport = field(default_factory=lambda: CrossLocaleReport(valid=True))


@dataclass
class LocalePullReport:
    """Every finding from a multi-locale pull, keyed by locale."""

    reports: dict[str, ValidationReport] = field(default_factory=dict)
    cross_locale: CrossLocaleReport = field(default_factory=lambda: CrossLocaleReport(valid=True))

    @property
    def valid(self) -> bool:
        return self.cross_locale.valid and all(report.valid for report in self.reports.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "locales": {locale: report.to_dict() for locale, report in self.reports.items()},
            "crossLocale": self.cross_locale.to_dict(),
        }


def fetch_rows(source: Any, *, registry: AdapterRegistry) -> list[list[str]]:
    descriptor = parse_source(source)
    adapter = registry.get(descriptor)
    rows = adapter.fetch(descriptor)
    logger.debug("Fetched %d row(s) from %s source.", len(rows), descriptor.type)
    return rows


def _check_report(report: ValidationReport, *, strict: bool, label: str) -> None:
    if not report.valid:
        raise PullFailedError(f"{label} failed validation with {len(report.errors)} error(s).", report)
    if strict and report.warnings:
        raise PullFailedError(
            f"Strict mode failed: {label} has {len(report.warnings)} warning(s).",
            report,
        )


def _load_config(source: Any, *, registry: AdapterRegistry, label: str) -> PullResult:
    rows = fetch_rows(source, registry=registry)
    config = rows_to_config(rows)
    report = validate_config(config)
    logger.info(
        "%s: parsed %d error entr%s (%d error(s), %d warning(s)).",
        label,
        len(config),
        "y" if len(config) == 1 else "ies",
        len(report.errors),
        len(report.warnings),
    )
    return PullResult(config=config, report=report)


def pull_config(
    source: Any,
    *,
    registry: AdapterRegistry,
    strict: bool = False,
) -> PullResult:
    core_config = config_from_env(strict=strict)
    result = _load_config(source, registry=registry, label="Config")
    _check_report(result.report, strict=core_config.strict, label="Config")
    return result


def _locale_failures(pull_report: LocalePullReport, *, strict: bool) -> list[str]:
    failures: list[str] = []
    for locale, report in pull_report.reports.items():
        if report.errors:
            failures.append(f"{locale}: {len(report.errors)} error(s)")
        elif strict and report.warnings:
            failures.append(f"{locale}: {len(report.warnings)} warning(s) in strict mode")

    cross_locale = pull_report.cross_locale
    if cross_locale.errors:
        failures.append(f"cross-locale: {len(cross_locale.errors)} error(s)")
    elif strict and cross_locale.warnings:
        failures.append(f"cross-locale: {len(cross_locale.warnings)} warning(s) in strict mode")
    return failures


def pull_locales(
    sources: Mapping[str, Any],
    *,
    registry: AdapterRegistry,
    default_locale: str | None = None,
    strict: bool = False,
) -> LocalePullResult:
    if not sources:
        raise ValueError("At least one locale source is required.")

    for locale in sources:
        check_locale_code(locale)

    resolved_default = default_locale or next(iter(sources))
    if resolved_default not in sources:
        raise ValueError(f'defaultLocale "{resolved_default}" has no configured source.')

    core_config = config_from_env(strict=strict)
    locales: LocalizedErrorConfig = {}
    pull_report = LocalePullReport()
    for locale, source in sources.items():
        result = _load_config(source, registry=registry, label=f"Locale {locale}")
        locales[locale] = result.config
        pull_report.reports[locale] = result.report

    pull_report.cross_locale = validate_locales(locales)
    failures = _locale_failures(pull_report, strict=core_config.strict)
    if failures:
        raise PullFailedError(f"Locale pull failed ({'; '.join(failures)}).", pull_report)

    return LocalePullResult(
        locales=locales,
        default_locale=resolved_default,
        reports=pull_report.reports,
        cross_locale=pull_report.cross_locale,
    )


def validate_payload(payload: dict[str, Any]) -> tuple[ErrorConfig, ValidationReport]:
    config = parse_error_config(payload)
    return config, validate_config(config)


__all__ = [
    "LocalePullReport",
    "LocalePullResult",
    "PullResult",
    "fetch_rows",
    "pull_config",
    "pull_locales",
    "validate_payload",
]
