from typing import Annotated, Any, Literal, Protocol, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


class _SourceModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class CsvSource(_SourceModel):
    type: Literal["csv"] = "csv"
    file_path: str = Field(min_length=1)


class XlsxSource(_SourceModel):
    type: Literal["xlsx"] = "xlsx"
    file_path: str = Field(min_length=1)
    sheet: str | None = None


SourceDescriptor = Annotated[Union[CsvSource, XlsxSource], Field(discriminator="type")]

_SOURCE_ADAPTER: TypeAdapter[SourceDescriptor] = TypeAdapter(SourceDescriptor)


def parse_source(payload: dict[str, Any] | BaseModel) -> BaseModel:
    if isinstance(payload, BaseModel):
        return payload
    return _SOURCE_ADAPTER.validate_python(payload)


class SourceAdapter(Protocol):
    """Fetches tabular rows for one kind of source descriptor."""

    type: str

    def fetch(self, source: Any) -> list[list[str]]: ...


__all__ = ["CsvSource", "SourceAdapter", "SourceDescriptor", "XlsxSource", "parse_source"]
