"""Command-line frontend for the errata core engine."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from errata.config import get_settings
from errata.core.api import pull_config, pull_locales, validate_payload
from errata.core.canonical import ProjectConfig, parse_error_config
from errata.core.errors import PullFailedError
from errata.core.generate import (
    LOCALE_INDEX_FILENAME,
    check_locale_code,
    render_config_json,
    render_locale_bundle,
)
from errata.core.report import diff_reports
from errata.core.sources import default_registry
from errata.core.validate import validate_locales
from errata.logging import config_result_to_loggable

load_dotenv()

logger = logging.getLogger("errata")


def _json_dump(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _read_json(path: Path) -> Any:
    if not path.is_file():
        raise ValueError(f"File not found: {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Failed to parse JSON file: {path}") from exc


def _log_loggable(config: Any, *, locale: str | None = None) -> None:
    loggable = config_result_to_loggable(config, locale=locale)
    if loggable is not None:
        logger.debug("Pulled config%s: %s", f" [{locale}]" if locale else "", loggable)


def _cmd_pull(args: argparse.Namespace) -> int:
    project = ProjectConfig.model_validate(_read_json(Path(args.config)))
    registry = default_registry()
    out_path = Path(args.out or project.output)

    try:
        if project.source is not None:
            result = pull_config(project.source, registry=registry, strict=args.strict)
            _log_loggable(result.config)
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(render_config_json(result.config), encoding="utf-8")
            _json_dump(
                {
                    "output": str(out_path),
                    "entries": len(result.config),
                    "warnings": [issue.to_dict() for issue in result.report.warnings],
                }
            )
            return 0

        locale_result = pull_locales(
            project.locales or {},
            registry=registry,
            default_locale=project.default_locale,
            strict=args.strict,
        )
    except PullFailedError as exc:
        logger.error("%s", exc)
        _json_dump({"error": str(exc), "report": exc.report.to_dict()})
        return 1

    for locale, config in locale_result.locales.items():
        _log_loggable(config, locale=locale)
    bundle = render_locale_bundle(locale_result.locales, locale_result.default_locale)
    out_path.mkdir(parents=True, exist_ok=True)
    for filename, content in bundle.items():
        (out_path / filename).write_text(content, encoding="utf-8")
    _json_dump(
        {
            "output": str(out_path),
            "defaultLocale": locale_result.default_locale,
            "entries": {locale: len(config) for locale, config in locale_result.locales.items()},
            "warnings": {
                locale: [issue.to_dict() for issue in report.warnings]
                for locale, report in locale_result.reports.items()
            },
            "crossLocaleWarnings": [issue.to_dict() for issue in locale_result.cross_locale.warnings],
        }
    )
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    path = Path(args.input)
    config, report = validate_payload(_read_json(path))

    severity_counts: dict[str, int] = {}
    for entry in config.values():
        key = entry.severity or "(none)"
        severity_counts[key] = severity_counts.get(key, 0) + 1

    payload = {"file": str(path), "entries": len(config), "severity": severity_counts, **report.to_dict()}
    if args.report:
        Path(args.report).write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    _json_dump(payload)
    return 0 if report.valid else 1


def _cmd_validate_locales(args: argparse.Namespace) -> int:
    directory = Path(args.directory)
    index = _read_json(directory / LOCALE_INDEX_FILENAME)
    locales = index.get("locales") if isinstance(index, dict) else None
    if not isinstance(locales, list) or not locales:
        raise ValueError(f"{LOCALE_INDEX_FILENAME} must list at least one locale.")

    localized = {
        check_locale_code(str(locale)): parse_error_config(_read_json(directory / f"{locale}.json"))
        for locale in locales
    }
    report = validate_locales(localized)
    _json_dump({"locales": list(localized), "defaultLocale": index.get("defaultLocale"), **report.to_dict()})
    return 0 if report.valid else 1


def _cmd_diff(args: argparse.Namespace) -> int:
    previous = _read_json(Path(args.previous))
    current = _read_json(Path(args.current))
    _json_dump(diff_reports(previous, current).to_dict())
    return 0


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="errata", description="Compile and check spreadsheet-managed error content")
    subparsers = parser.add_subparsers(dest="command", required=True)

    pull = subparsers.add_parser("pull", help="Fetch rows from the configured source, validate, and write JSON")
    pull.add_argument("--config", default=settings.project_config_path, help="Project config JSON path")
    pull.add_argument("--out", default="", help="Override the configured output path")
    pull.add_argument("--strict", action="store_true", help="Treat warnings as failures")
    pull.set_defaults(func=_cmd_pull)

    validate_cmd = subparsers.add_parser("validate", help="Validate a generated error config JSON file")
    validate_cmd.add_argument("input", nargs="?", default="errata.json", help="Error config JSON path")
    validate_cmd.add_argument("--report", default="")
    validate_cmd.set_defaults(func=_cmd_validate)

    locales_cmd = subparsers.add_parser("validate-locales", help="Check trackId consistency across locale files")
    locales_cmd.add_argument("directory", help="Directory holding index.json and <locale>.json files")
    locales_cmd.set_defaults(func=_cmd_validate_locales)

    diff = subparsers.add_parser("diff", help="Diff two test-run report snapshots")
    diff.add_argument("previous", help="Previous report-data.json path")
    diff.add_argument("current", help="Current report-data.json path")
    diff.set_defaults(func=_cmd_diff)

    return parser


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)

    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args) or 0)
    except Exception as exc:
        parser.exit(status=2, message=f"error: {exc}\n")


if __name__ == "__main__":
    raise SystemExit(main())
