import logging
from typing import Iterable, Sequence

from ..canonical import ErrorAction, ErrorConfig, ErrorEntry
from ..errors import StructuralError

logger = logging.getLogger("errata")

REQUIRED_HEADERS = ("trackId", "type", "message")
OPTIONAL_HEADERS = ("title", "image", "severity", "actionLabel", "actionType", "actionTarget")
KNOWN_HEADERS = REQUIRED_HEADERS + OPTIONAL_HEADERS


def build_column_index(header_row: Sequence[str]) -> dict[str, int]:
    """Map each recognized header name to its first column position."""
    headers = [str(cell or "").strip() for cell in header_row]
    index: dict[str, int] = {}
    for key in KNOWN_HEADERS:
        if key in headers:
            index[key] = headers.index(key)
    return index


def require_headers(column_index: dict[str, int], required_headers: Iterable[str]) -> None:
    for header in required_headers:
        if header not in column_index:
            raise StructuralError(f"Missing required column: {header}")


def _cell(row: Sequence[str], column_index: dict[str, int], key: str) -> str:
    position = column_index.get(key)
    if position is None or position >= len(row):
        return ""
    return str(row[position] or "").strip()


def _optional(value: str) -> str | None:
    return value or None


def rows_to_config(rows: Sequence[Sequence[str]]) -> ErrorConfig:
    if len(rows) < 2:
        raise StructuralError("Sheet data must contain at least a header row and one data row")

    column_index = build_column_index(rows[0])
    require_headers(column_index, REQUIRED_HEADERS)

    config: ErrorConfig = {}
    for row in rows[1:]:
        track_id = _cell(row, column_index, "trackId")
        if not track_id:
            continue

        raw_type = _cell(row, column_index, "type")
        if not raw_type:
            raise StructuralError(f'Missing type for trackId "{track_id}"')

        message = _cell(row, column_index, "message")
        if not message:
            raise StructuralError(f'Missing message for trackId "{track_id}"')

        action: ErrorAction | None = None
        action_label = _cell(row, column_index, "actionLabel")
        action_type = _cell(row, column_index, "actionType")
        if action_label and action_type:
            action = ErrorAction(
                label=action_label,
                type=action_type.upper(),
                target=_optional(_cell(row, column_index, "actionTarget")),
            )

        if track_id in config:
            logger.debug('Duplicate trackId "%s" in sheet data; keeping the later row.', track_id)

        config[track_id] = ErrorEntry(
            type=raw_type.upper(),
            message=message,
            title=_optional(_cell(row, column_index, "title")),
            image=_optional(_cell(row, column_index, "image")),
            severity=_optional(_cell(row, column_index, "severity")),
            action=action,
        )

    return config


__all__ = [
    "KNOWN_HEADERS",
    "OPTIONAL_HEADERS",
    "REQUIRED_HEADERS",
    "build_column_index",
    "require_headers",
    "rows_to_config",
]
