"""Deterministic query-string rendering.

Identical inputs always produce byte-identical strings: parameters are
rendered in the order the caller lists them, ``None`` values are omitted,
and list values are joined with commas (an empty list renders as ``key=``).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Optional, Sequence, Tuple
from urllib.parse import quote

from meilikit.exceptions import InvalidArgumentError


def _render_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_render_value(v) for v in value)
    if isinstance(value, Enum):
        value = value.value
    return quote(str(value), safe="")


def render_query(params: Sequence[Tuple[str, Any]]) -> str:
    """Render ``params`` as ``?k=v&...``, or ``""`` when every value is ``None``."""
    parts = [f"{key}={_render_value(value)}" for key, value in params if value is not None]
    if not parts:
        return ""
    return "?" + "&".join(parts)


def check_non_negative(name: str, value: Optional[int]) -> None:
    """Reject negative or non-integer paging values."""
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidArgumentError(f"{name} must be a non-negative integer, got {value!r}")


def as_string_list(name: str, values: Optional[Iterable[Any]]) -> Optional[list]:
    """Copy an iterable of identifiers/field names into a list of strings.

    A bare string is rejected since iterating it would yield characters.
    """
    if values is None:
        return None
    if isinstance(values, (str, bytes)):
        raise InvalidArgumentError(f"{name} must be a list, not a single string")
    return [str(v) for v in values]
