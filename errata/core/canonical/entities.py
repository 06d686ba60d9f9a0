from dataclasses import dataclass
from typing import Any

ERROR_TYPES = ("TOAST", "MODAL", "PAGE")
ACTION_TYPES = ("REDIRECT", "RETRY", "BACK", "DISMISS")
SEVERITY_LEVELS = ("INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ErrorAction:
    label: str
    type: str
    target: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"label": self.label, "type": self.type}
        if self.target:
            data["target"] = self.target
        return data


@dataclass
class ErrorEntry:
    type: str
    message: str
    title: str | None = None
    image: str | None = None
    severity: str | None = None
    action: ErrorAction | None = None

    def __post_init__(self) -> None:
        if isinstance(self.action, dict):
            self.action = _action_from_payload(self.action)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type, "message": self.message}
        for key in ("title", "image", "severity"):
            value = getattr(self, key)
            if value:
                data[key] = value
        if self.action is not None:
            data["action"] = self.action.to_dict()
        return data


@dataclass
class ResolvedError:
    track_id: str
    type: str
    message: str
    title: str | None = None
    image: str | None = None
    severity: str | None = None
    action: ErrorAction | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"trackId": self.track_id}
        data.update(
            ErrorEntry(
                type=self.type,
                message=self.message,
                title=self.title,
                image=self.image,
                severity=self.severity,
                action=self.action,
            ).to_dict()
        )
        return data


ErrorConfig = dict[str, ErrorEntry]
LocalizedErrorConfig = dict[str, ErrorConfig]


@dataclass
class ErrorContext:
    track_id: str
    variables: dict[str, str] | None = None
    locale: str | None = None
    severity: str | None = None


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text or None


def _action_from_payload(payload: dict[str, Any]) -> ErrorAction:
    return ErrorAction(
        label=_text(payload.get("label")),
        type=_text(payload.get("type")),
        target=_optional_text(payload.get("target")),
    )


def parse_error_entry(payload: dict[str, Any]) -> ErrorEntry:
    action_payload = payload.get("action")
    action = _action_from_payload(action_payload) if isinstance(action_payload, dict) else None
    return ErrorEntry(
        type=_text(payload.get("type")),
        message=_text(payload.get("message")),
        title=_optional_text(payload.get("title")),
        image=_optional_text(payload.get("image")),
        severity=_optional_text(payload.get("severity")),
        action=action,
    )


def parse_error_config(payload: dict[str, Any]) -> ErrorConfig:
    if not isinstance(payload, dict):
        raise ValueError("Error config must be a JSON object keyed by trackId.")
    config: ErrorConfig = {}
    for track_id, entry_payload in payload.items():
        if not isinstance(entry_payload, dict):
            raise ValueError(f'Entry for trackId "{track_id}" must be a JSON object.')
        config[str(track_id)] = parse_error_entry(entry_payload)
    return config


def parse_localized_config(payload: dict[str, Any]) -> LocalizedErrorConfig:
    if not isinstance(payload, dict):
        raise ValueError("Localized config must be a JSON object keyed by locale.")
    return {str(locale): parse_error_config(config) for locale, config in payload.items()}


def config_to_dict(config: ErrorConfig) -> dict[str, dict[str, Any]]:
    return {track_id: entry.to_dict() for track_id, entry in config.items()}


__all__ = [
    "ACTION_TYPES",
    "ERROR_TYPES",
    "SEVERITY_LEVELS",
    "ErrorAction",
    "ErrorConfig",
    "ErrorContext",
    "ErrorEntry",
    "LocalizedErrorConfig",
    "ResolvedError",
    "config_to_dict",
    "parse_error_config",
    "parse_error_entry",
    "parse_localized_config",
]
