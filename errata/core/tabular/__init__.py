from .mapper import KNOWN_HEADERS, REQUIRED_HEADERS, build_column_index, rows_to_config
from .parser import decode_csv_bytes, parse_rows, strip_bom

__all__ = [
    "KNOWN_HEADERS",
    "REQUIRED_HEADERS",
    "build_column_index",
    "decode_csv_bytes",
    "parse_rows",
    "rows_to_config",
    "strip_bom",
]
