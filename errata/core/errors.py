"""Exception types raised by the errata core."""


class ErrataError(Exception):
    """Base class for every error raised by errata."""


class StructuralError(ErrataError, ValueError):
    """Tabular input is malformed and no config can be built from it."""


class UnknownTrackIdError(ErrataError, KeyError):
    def __init__(self, track_id: str) -> None:
        super().__init__(f'Unknown trackId: "{track_id}"')
        self.track_id = track_id

    def __str__(self) -> str:
        return str(self.args[0])


class UnknownLocaleError(ErrataError, KeyError):
    def __init__(self, locale: str | None, available: list[str]) -> None:
        listed = ", ".join(available) or "(none)"
        super().__init__(f'Unknown locale: "{locale}". Available locales: {listed}')
        self.locale = locale
        self.available = list(available)

    def __str__(self) -> str:
        return str(self.args[0])


class AdapterRegistrationError(ErrataError, ValueError):
    """An adapter was registered twice for the same source type."""


class UnknownSourceTypeError(ErrataError, KeyError):
    def __init__(self, source_type: str, registered: list[str]) -> None:
        super().__init__(
            f"No adapter registered for source type: {source_type}. "
            f"Registered types: {', '.join(registered)}"
        )
        self.source_type = source_type

    def __str__(self) -> str:
        return str(self.args[0])


class SourceFetchError(ErrataError, ValueError):
    """A data-source adapter could not produce rows."""


class PullFailedError(ErrataError):
    """Validation rejected a pulled config.

    ``report`` carries every collected finding so callers can surface all of
    them instead of the first one.
    """

    def __init__(self, message: str, report: object) -> None:
        super().__init__(message)
        self.report = report


__all__ = [
    "AdapterRegistrationError",
    "ErrataError",
    "PullFailedError",
    "SourceFetchError",
    "StructuralError",
    "UnknownLocaleError",
    "UnknownSourceTypeError",
    "UnknownTrackIdError",
]
