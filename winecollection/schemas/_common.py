"""Shared schema configuration and field types."""

from typing import Annotated

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
)
from pydantic.alias_generators import to_camel

ALLOWED_URL_SCHEMES = ("http", "https", "ftp")

_url_adapter = TypeAdapter(AnyUrl)


def _validate_url(value: str) -> str:
    """Check that value is an absolute URL, returning it unchanged."""
    try:
        url = _url_adapter.validate_python(value)
    except ValidationError as e:
        raise ValueError(f"'{value}' is not a well-formed URL") from e
    if url.scheme not in ALLOWED_URL_SCHEMES or not url.host:
        raise ValueError(f"'{value}' is not a well-formed URL")
    return value


# Stored verbatim; pydantic URL types would normalise the text
UrlString = Annotated[str, AfterValidator(_validate_url)]


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# SQLite stores INTEGER as a signed 64-bit value
SQLITE_INTEGER_MIN = -(2**63)
SQLITE_INTEGER_MAX = 2**63 - 1

RowId = Annotated[int, Field(ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX)]
