"""Serialization helpers shared by the record types.

Records are stored as JSON: ids as UUID strings, timestamps as ISO-8601
strings and enums by their display value.
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import TypeVar

E = TypeVar("E", bound=Enum)


def new_id() -> uuid.UUID:
    return uuid.uuid4()


def encode_id(value: uuid.UUID | None) -> str | None:
    return str(value) if value is not None else None


def decode_id(value: str | None) -> uuid.UUID | None:
    if value is None or value == "":
        return None
    return uuid.UUID(str(value))


def encode_ids(values: list[uuid.UUID]) -> list[str]:
    return [str(v) for v in values]


def decode_ids(values: list[str] | None) -> list[uuid.UUID]:
    return [uuid.UUID(str(v)) for v in values or []]


def encode_datetime(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def decode_datetime(value: str | None) -> datetime | None:
    if value is None or value == "":
        return None
    return datetime.fromisoformat(value)


def require_datetime(value: str | None) -> datetime:
    """Decode a timestamp that must be present."""
    parsed = decode_datetime(value)
    if parsed is None:
        raise ValueError("missing timestamp")
    return parsed


def decode_enum(enum_cls: type[E], value: str | None, default: E) -> E:
    """Decode an enum by display value.

    A missing value falls back to the default; an unknown value raises
    ValueError so the whole collection is rejected, not half-loaded.
    """
    if value is None:
        return default
    return enum_cls(value)
