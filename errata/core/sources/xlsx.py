from pathlib import Path
from typing import Any

import pandas as pd

from ..errors import SourceFetchError
from .types import XlsxSource, parse_source


def _frame_rows(frame: pd.DataFrame) -> list[list[str]]:
    return [[str(value) for value in record] for record in frame.itertuples(index=False, name=None)]


class XlsxFileAdapter:
    type = "xlsx"

    def fetch(self, source: XlsxSource | dict[str, Any]) -> list[list[str]]:
        descriptor = parse_source(source)
        path = Path(descriptor.file_path).resolve()
        if not path.is_file():
            raise SourceFetchError(f"XLSX file not found: {path}")

        with pd.ExcelFile(path) as workbook:
            sheet_names = [str(name) for name in workbook.sheet_names]
            sheet_name = descriptor.sheet or (sheet_names[0] if sheet_names else None)
            if sheet_name not in sheet_names:
                raise SourceFetchError(
                    f'Sheet "{sheet_name}" not found. Available sheets: {", ".join(sheet_names)}'
                )
            frame = workbook.parse(sheet_name, header=None, dtype=str, keep_default_na=False)

        rows = _frame_rows(frame)
        if len(rows) < 2:
            raise SourceFetchError("XLSX file must contain at least a header row and one data row")
        return rows


__all__ = ["XlsxFileAdapter"]
