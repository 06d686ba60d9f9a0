import pytest
from pydantic import ValidationError

from errata.core.errors import AdapterRegistrationError, SourceFetchError, UnknownSourceTypeError
from errata.core.sources import (
    AdapterRegistry,
    CsvFileAdapter,
    CsvSource,
    XlsxFileAdapter,
    default_registry,
    parse_source,
)
from tests._sheet_helpers import write_csv, write_xlsx


class _StaticAdapter:
    def __init__(self, type: str, rows: list[list[str]] | None = None) -> None:
        self.type = type
        self.rows = rows or []

    def fetch(self, source) -> list[list[str]]:
        return self.rows


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


def test_registry_returns_registered_adapter() -> None:
    registry = AdapterRegistry()
    adapter = _StaticAdapter("memory")

    registry.register(adapter)

    assert registry.get("memory") is adapter
    assert registry.get({"type": "memory"}) is adapter
    assert registry.registered_types() == ["memory"]


def test_registry_rejects_duplicate_type() -> None:
    registry = AdapterRegistry()
    registry.register(_StaticAdapter("memory"))

    with pytest.raises(AdapterRegistrationError, match="Adapter already registered for type: memory"):
        registry.register(_StaticAdapter("memory"))


def test_registry_unknown_type_lists_registered_types() -> None:
    registry = default_registry()

    with pytest.raises(UnknownSourceTypeError, match="Registered types: csv, xlsx") as excinfo:
        registry.get("google-sheets")

    assert excinfo.value.source_type == "google-sheets"


def test_default_registry_is_independent_per_call() -> None:
    first = default_registry()
    first.register(_StaticAdapter("memory"))

    assert default_registry().registered_types() == ["csv", "xlsx"]


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------


def test_parse_source_accepts_camel_case_descriptor() -> None:
    descriptor = parse_source({"type": "csv", "filePath": "errors.csv"})

    assert isinstance(descriptor, CsvSource)
    assert descriptor.file_path == "errors.csv"


def test_parse_source_rejects_unknown_keys_and_empty_path() -> None:
    with pytest.raises(ValidationError):
        parse_source({"type": "csv", "filePath": "a.csv", "sheetId": "x"})
    with pytest.raises(ValidationError):
        parse_source({"type": "csv", "filePath": ""})


# ---------------------------------------------------------------------------
# CSV adapter
# ---------------------------------------------------------------------------


def test_csv_adapter_reads_rows_and_strips_bom(tmp_path) -> None:
    path = write_csv(tmp_path / "errors.csv", "trackId,type,message\nERR_1,toast,\"Hi, {{name}}\"\n", bom=True)

    rows = CsvFileAdapter().fetch({"type": "csv", "filePath": str(path)})

    assert rows == [["trackId", "type", "message"], ["ERR_1", "toast", "Hi, {{name}}"]]


def test_csv_adapter_missing_file(tmp_path) -> None:
    with pytest.raises(SourceFetchError, match="CSV file not found"):
        CsvFileAdapter().fetch(CsvSource(file_path=str(tmp_path / "absent.csv")))


def test_csv_adapter_requires_data_row(tmp_path) -> None:
    path = write_csv(tmp_path / "header.csv", "trackId,type,message\n")

    with pytest.raises(SourceFetchError, match="at least a header row and one data row"):
        CsvFileAdapter().fetch(CsvSource(file_path=str(path)))


def test_csv_adapter_rejects_non_utf8(tmp_path) -> None:
    path = tmp_path / "latin.csv"
    path.write_bytes("trackId,type,message\nE,toast,caf\xe9\n".encode("latin-1"))

    with pytest.raises(SourceFetchError, match="UTF-8"):
        CsvFileAdapter().fetch(CsvSource(file_path=str(path)))


# ---------------------------------------------------------------------------
# XLSX adapter
# ---------------------------------------------------------------------------


def test_xlsx_adapter_reads_first_sheet_as_strings(tmp_path) -> None:
    path = write_xlsx(
        tmp_path / "errors.xlsx",
        [["trackId", "type", "message", "title"], ["ERR_1", "modal", "Hello", ""]],
    )

    rows = XlsxFileAdapter().fetch({"type": "xlsx", "filePath": str(path)})

    assert rows == [["trackId", "type", "message", "title"], ["ERR_1", "modal", "Hello", ""]]


def test_xlsx_adapter_selects_named_sheet(tmp_path) -> None:
    path = write_xlsx(tmp_path / "errors.xlsx", [["trackId", "type", "message"], ["A", "toast", "m"]], sheet_name="ko")

    rows = XlsxFileAdapter().fetch({"type": "xlsx", "filePath": str(path), "sheet": "ko"})

    assert rows[1] == ["A", "toast", "m"]


def test_xlsx_adapter_unknown_sheet_lists_available(tmp_path) -> None:
    path = write_xlsx(tmp_path / "errors.xlsx", [["trackId", "type", "message"], ["A", "toast", "m"]], sheet_name="ko")

    with pytest.raises(SourceFetchError, match='Sheet "en" not found. Available sheets: ko'):
        XlsxFileAdapter().fetch({"type": "xlsx", "filePath": str(path), "sheet": "en"})


def test_xlsx_adapter_missing_file(tmp_path) -> None:
    with pytest.raises(SourceFetchError, match="XLSX file not found"):
        XlsxFileAdapter().fetch({"type": "xlsx", "filePath": str(tmp_path / "absent.xlsx")})
