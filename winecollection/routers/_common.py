"""Shared path and query parameter types for the API routers."""

from typing import Annotated, Any

from fastapi import Path, Query
from pydantic import BeforeValidator

from winecollection.schemas._common import SQLITE_INTEGER_MAX, SQLITE_INTEGER_MIN


def _blank_to_none(value: Any) -> Any:
    """Treat an empty query value such as ``?year=`` as not given."""
    if value == "":
        return None
    return value


def int_query(alias: str | None = None) -> Any:
    """Query parameter limited to what an SQLite INTEGER can hold."""
    return Query(alias=alias, ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX)


# Larger values would overflow the database driver instead of matching nothing
PathId = Annotated[int, Path(ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX)]

OptionalInt = Annotated[int | None, BeforeValidator(_blank_to_none)]
