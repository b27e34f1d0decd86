"""Common plumbing for resource clients.

A resource client turns one typed operation into one HTTP request through the
shared ``HttpTransport`` and decodes the answer with the shared ``JsonCodec``.
Resources hold no mutable state, so one instance can serve any number of
concurrent calls.
"""
from __future__ import annotations

from typing import Any, Union
from urllib.parse import quote

from meilikit.codec import JsonCodec
from meilikit.exceptions import NotFoundError
from meilikit.models.task import TaskInfo
from meilikit.transport import HttpTransport


def path_segment(value: Union[str, int]) -> str:
    """Escape one path segment (index uid, document id)."""
    return quote(str(value), safe="")


class BaseResource:
    def __init__(self, transport: HttpTransport, codec: JsonCodec) -> None:
        self._transport = transport
        self._codec = codec

    def _decode(self, data: bytes, target: Any, what: str) -> Any:
        """Decode a response body, treating an empty body as "not found"."""
        if not data or not data.strip():
            raise NotFoundError(f"{what} not found (empty response)")
        return self._codec.decode(data, target)

    def _task_info(self, data: bytes, what: str) -> TaskInfo:
        return self._decode(data, TaskInfo, what)
