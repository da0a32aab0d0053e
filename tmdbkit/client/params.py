"""Option-record to query-parameter encoding.

Every builder keeps its optional query parameters in an `OptionRecord`
(a pydantic model). This module turns such a record into a flat
``dict[str, str]`` ready to be put on the wire.

Field rules:
- Wire key is the field alias, or the attribute name when no alias is set.
- ``Field(exclude=True)`` fields are bookkeeping and never encoded.
- ``None`` means "never set" and is never encoded.
- Fields marked `Required` are always emitted, even for "", 0 or False.
- Every other field is optional-if-absent: values that render as "", "0"
  or "false" are dropped. An optional boolean explicitly set to False is
  therefore indistinguishable from an unset one.
- Lists of str/int are comma-joined, or pipe-joined when marked `Piped`.
- Any other shape (nested models, dicts, dates, mixed lists) is skipped.
- Floats use positional notation without trailing zeros (7.0 -> "7").
  Non-finite floats (inf, nan) have no query form and are skipped.

Serialization keeps commas literal because TMDB expects
``with_genres=28,12`` rather than ``with_genres=28%2C12``.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Mapping
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict
from pydantic.fields import FieldInfo

from tmdbkit.client.errors import EncodingError

COMMA = ","
PIPE = "|"

# Rendered values an optional-if-absent field treats as "not set".
ZERO_VALUES = frozenset({"", "0", "false"})


class Required:
    """Annotated marker: always emit the field, zero values included."""

    def __repr__(self) -> str:
        return "Required()"


class Piped:
    """Annotated marker: join list values with '|' instead of ','."""

    def __repr__(self) -> str:
        return "Piped()"


class OptionRecord(BaseModel):
    """Base class for builder option records."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


def _has_marker(info: FieldInfo, marker: type) -> bool:
    return any(isinstance(m, marker) for m in info.metadata)


def _format_float(value: float) -> str | None:
    if not math.isfinite(value):
        return None
    # repr() is the shortest round-tripping form; Decimal drops the exponent.
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _format_scalar(value: Any) -> str | None:
    """Render one scalar, or return None for an unsupported type."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return value
    return None


def _format_list(values: list | tuple, separator: str) -> str | None:
    if all(isinstance(v, str) for v in values):
        return separator.join(values)
    if all(isinstance(v, int) and not isinstance(v, bool) for v in values):
        return separator.join(str(v) for v in values)
    return None


def _format_value(value: Any, info: FieldInfo) -> str | None:
    if isinstance(value, (list, tuple)):
        separator = PIPE if _has_marker(info, Piped) else COMMA
        return _format_list(value, separator)
    return _format_scalar(value)


def encode_params(record: BaseModel | None) -> dict[str, str]:
    """Encodes an option record into query parameters.

    Args:
        record: The option record to encode. ``None`` encodes to ``{}``.

    Returns:
        dict: Wire key to string value, in field declaration order.

    Raises:
        EncodingError: If ``record`` is not a pydantic model instance.
    """

    params: dict[str, str] = {}
    if record is None:
        return params

    if not isinstance(record, BaseModel):
        raise EncodingError(
            f"expected an option record, got {type(record).__name__}"
        )

    for name, info in type(record).model_fields.items():
        if info.exclude is True:
            continue

        key = info.alias or name
        value = getattr(record, name)
        if value is None:
            continue

        text = _format_value(value, info)
        if text is None:
            # Unsupported shape; tolerated so new fields never break callers.
            continue

        if not _has_marker(info, Required) and text in ZERO_VALUES:
            continue

        params[key] = text

    return params


def merge_params(*maps: Mapping[str, str]) -> dict[str, str]:
    """Merges encoded parameter maps whose key sets must be disjoint.

    Raises:
        EncodingError: If a key appears in more than one map.
    """

    merged: dict[str, str] = {}
    for params in maps:
        for key, value in params.items():
            if key in merged:
                raise EncodingError(f"query parameter {key!r} set twice")
            merged[key] = value
    return merged


def to_query_string(params: Mapping[str, str]) -> str:
    """Serializes parameters, leaving commas un-escaped."""
    return urlencode(list(params.items()), safe=",")
