from pathlib import Path
from typing import Any

from ..errors import SourceFetchError
from ..tabular import decode_csv_bytes, parse_rows, strip_bom
from .types import CsvSource, parse_source

MAX_CSV_BYTES = 5 * 1024 * 1024


class CsvFileAdapter:
    type = "csv"

    def fetch(self, source: CsvSource | dict[str, Any]) -> list[list[str]]:
        descriptor = parse_source(source)
        path = Path(descriptor.file_path).resolve()
        if not path.is_file():
            raise SourceFetchError(f"CSV file not found: {path}")

        data = path.read_bytes()
        if len(data) > MAX_CSV_BYTES:
            raise SourceFetchError("CSV file exceeds 5 MB limit.")
        try:
            text = decode_csv_bytes(data)
        except ValueError as exc:
            raise SourceFetchError(str(exc)) from exc

        rows = parse_rows(strip_bom(text))
        if len(rows) < 2:
            raise SourceFetchError("CSV file must contain at least a header row and one data row")
        return rows


__all__ = ["MAX_CSV_BYTES", "CsvFileAdapter"]
