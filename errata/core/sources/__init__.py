from .csv import CsvFileAdapter
from .registry import AdapterRegistry, default_registry
from .types import CsvSource, SourceAdapter, SourceDescriptor, XlsxSource, parse_source
from .xlsx import XlsxFileAdapter

__all__ = [
    "AdapterRegistry",
    "CsvFileAdapter",
    "CsvSource",
    "SourceAdapter",
    "SourceDescriptor",
    "XlsxFileAdapter",
    "XlsxSource",
    "default_registry",
    "parse_source",
]
