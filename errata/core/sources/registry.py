"""Registry mapping source-type names to data-source adapters.

A registry is an explicit value built once at startup and handed to the pull
pipeline. Registering the same type twice fails immediately; looking up an
unregistered type fails at call time.
"""


from dataclasses import dataclass, field
from typing import Any

from ..errors import AdapterRegistrationError, UnknownSourceTypeError
from .types import SourceAdapter


def _source_type(source: Any) -> str:
    if isinstance(source, str):
        return source
    if isinstance(source, dict):
        return str(source.get("type") or "")
    return str(getattr(source, "type", "") or "")


@dataclass
class AdapterRegistry:
    adapters: dict[str, SourceAdapter] = field(default_factory=dict)

    def register(self, adapter: SourceAdapter) -> None:
        key = str(adapter.type)
        if key in self.adapters:
            raise AdapterRegistrationError(f"Adapter already registered for type: {key}")
        self.adapters[key] = adapter

    def get(self, source: Any) -> SourceAdapter:
        key = _source_type(source)
        adapter = self.adapters.get(key)
        if adapter is None:
            raise UnknownSourceTypeError(key, self.registered_types())
        return adapter

    def registered_types(self) -> list[str]:
        return list(self.adapters)


def default_registry() -> AdapterRegistry:
    from .csv import CsvFileAdapter
    from .xlsx import XlsxFileAdapter

    registry = AdapterRegistry()
    registry.register(CsvFileAdapter())
    registry.register(XlsxFileAdapter())
    return registry


__all__ = ["AdapterRegistry", "default_registry"]
