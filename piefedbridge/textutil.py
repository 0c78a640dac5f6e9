"""Small text and mapping helpers."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel

K = TypeVar("K")
V = TypeVar("V")

_WORD_START = re.compile(r"(.)([A-Z][a-z]+)")
_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")


def to_snake_case(text: str) -> str:
    text = _WORD_START.sub(r"\1_\2", text)
    text = _LOWER_UPPER.sub(r"\1_\2", text)
    return text.lower()


def _format_value(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else f"{value:f}"
    raise TypeError(f"Unknown type: {type(value).__name__}")


def marshal_to_query_string(payload: BaseModel | Mapping[str, Any]) -> str:
    """Render the fields of a payload as key=value pairs joined by '&'.

    Null values are left out; values are not percent-encoded. Lists and
    objects raise TypeError.
    """
    if isinstance(payload, BaseModel):
        data = payload.model_dump(mode="json", by_alias=True)
    else:
        data = dict(payload)
    return "&".join(
        f"{key}={_format_value(value)}"
        for key, value in data.items()
        if value is not None
    )


def singularize(mapping: Mapping[K, Sequence[V]]) -> dict[K, V]:
    """Keep the first value of every key; keys with no values are dropped."""
    return {key: values[0] for key, values in mapping.items() if len(values) > 0}