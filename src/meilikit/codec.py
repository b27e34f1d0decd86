"""JSON codec shared by the resource clients.

The codec is a plain object handed to each resource at construction time, so
encode/decode rules are explicit and can be swapped in tests.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import Any, Iterable, Union

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from meilikit.exceptions import DecodingError, EncodingError, InvalidArgumentError

# A pre-encoded JSON payload, or documents the codec serializes itself
DocumentsPayload = Union[bytes, bytearray, str, Iterable[Any]]

_ANY: TypeAdapter[Any] = TypeAdapter(Any)


@lru_cache(maxsize=128)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


class JsonCodec:
    """Encode outgoing payloads and decode responses with pydantic.

    Parameters
    ----------
    by_alias:
        Serialize pydantic models using their field aliases (camelCase for
        ``MeiliModel`` subclasses).
    exclude_none:
        Drop ``None``-valued fields from encoded documents.
    """

    def __init__(self, *, by_alias: bool = True, exclude_none: bool = False) -> None:
        self.by_alias = by_alias
        self.exclude_none = exclude_none

    def encode_documents(self, documents: DocumentsPayload) -> bytes:
        """Return the JSON array body for a document write.

        ``bytes``/``str`` are taken as already-encoded JSON and sent unchanged.
        Anything else must be an iterable of documents (dicts, pydantic models,
        dataclasses).
        """
        if isinstance(documents, (bytes, bytearray)):
            return bytes(documents)
        if isinstance(documents, str):
            return documents.encode("utf-8")
        if isinstance(documents, Mapping):
            raise InvalidArgumentError("documents must be a list of documents, not a single mapping")
        return self.encode(list(documents))

    def encode(self, value: Any) -> bytes:
        try:
            return _ANY.dump_json(value, by_alias=self.by_alias, exclude_none=self.exclude_none)
        except (PydanticSerializationError, TypeError, ValueError) as exc:
            raise EncodingError(f"Could not encode payload as JSON: {exc}") from exc

    def decode(self, data: Union[bytes, str], target: Any) -> Any:
        """Parse ``data`` as JSON and validate it against ``target``.

        Raises ``DecodingError`` wrapping the pydantic error on any mismatch,
        including malformed JSON.
        """
        try:
            return _adapter(target).validate_json(data)
        except ValidationError as exc:
            name = getattr(target, "__name__", repr(target))
            raise DecodingError(f"Response does not match {name}: {exc}") from exc


DEFAULT_CODEC = JsonCodec()
