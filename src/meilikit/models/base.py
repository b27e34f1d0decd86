"""Shared building blocks for wire models.

The server speaks camelCase JSON with RFC 3339 timestamps carrying up to
nanosecond precision. ``MeiliModel`` maps camelCase keys to snake_case
attributes and ``Timestamp`` trims fractions to what ``datetime`` can hold.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

_FRACTION = re.compile(r"\.(\d+)")


def normalize_timestamp(value: Any) -> Any:
    """Normalize a server timestamp string so pydantic can parse it.

    ``2022-07-13T10:21:50.575133727Z`` becomes ``2022-07-13T10:21:50.575133+00:00``.
    Non-string values are passed through untouched.
    """
    if not isinstance(value, str):
        return value
    text = value.strip()
    text = _FRACTION.sub(lambda m: "." + (m.group(1) + "000000")[:6], text, count=1)
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return text


Timestamp = Annotated[datetime, BeforeValidator(normalize_timestamp)]


class MeiliModel(BaseModel):
    """Base model for server payloads (camelCase on the wire)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )
