"""Document CRUD for one index at a time.

Reads return decoded documents; writes return a ``TaskInfo`` immediately and
the write itself happens asynchronously on the server (see
``Tasks.wait_for_task``).
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Union

from meilikit.codec import DocumentsPayload
from meilikit.exceptions import InvalidArgumentError
from meilikit.models.documents import DocumentsQuery, DocumentsResults
from meilikit.models.task import TaskInfo
from meilikit.query import as_string_list, render_query
from meilikit.resources.base_resource import BaseResource, path_segment

DocumentId = Union[str, int]


class Documents(BaseResource):
    def _path(self, index_uid: str) -> str:
        return f"/indexes/{path_segment(index_uid)}/documents"

    def _doc_path(self, index_uid: str, document_id: DocumentId) -> str:
        if document_id is None or isinstance(document_id, bool) or document_id == "":
            raise InvalidArgumentError(f"document_id must be a non-empty id, got {document_id!r}")
        if not isinstance(document_id, (str, int)):
            raise InvalidArgumentError(
                f"document_id must be a str or int, got {type(document_id).__name__}"
            )
        return f"{self._path(index_uid)}/{path_segment(document_id)}"

    async def get_one(
        self,
        index_uid: str,
        document_id: DocumentId,
        fields: Optional[List[str]] = None,
        *,
        model: Any = Dict[str, Any],
    ) -> Any:
        """Fetch a single document by identifier.

        Parameters
        ----------
        index_uid: str
            Index to read from.
        document_id: str | int
            Primary key value of the document.
        fields: list[str] | None
            Restrict the returned attributes, in the order given. ``None`` returns
            every attribute.
        model:
            Type the document is validated against (a pydantic model, dataclass,
            TypedDict, ...). Defaults to a plain dict.
        """
        path = self._doc_path(index_uid, document_id)
        if fields is not None:
            path += render_query([("fields", as_string_list("fields", fields))])
        data = await self._transport.get(path)
        return self._decode(data, model, f"Document {document_id!r} in index {index_uid!r}")

    async def get_all(
        self,
        index_uid: str,
        query: Optional[DocumentsQuery] = None,
        *,
        model: Any = Dict[str, Any],
    ) -> DocumentsResults[Any]:
        """Fetch one page of documents."""
        path = self._path(index_uid) + (query.to_query() if query is not None else "")
        data = await self._transport.get(path)
        return self._decode(data, DocumentsResults[model], f"Documents of index {index_uid!r}")

    async def add(
        self, index_uid: str, documents: DocumentsPayload, primary_key: Optional[str] = None
    ) -> TaskInfo:
        """Add documents, replacing any existing document with the same primary key."""
        body = self._codec.encode_documents(documents)
        path = self._path(index_uid) + render_query([("primaryKey", primary_key)])
        data = await self._transport.post(path, body)
        return self._task_info(data, f"Index {index_uid!r}")

    async def update(
        self, index_uid: str, documents: DocumentsPayload, primary_key: Optional[str] = None
    ) -> TaskInfo:
        """Add documents, merging fields into any existing document with the same primary key."""
        body = self._codec.encode_documents(documents)
        path = self._path(index_uid) + render_query([("primaryKey", primary_key)])
        data = await self._transport.put(path, body)
        return self._task_info(data, f"Index {index_uid!r}")

    async def delete(self, index_uid: str, document_id: DocumentId) -> TaskInfo:
        data = await self._transport.delete(self._doc_path(index_uid, document_id))
        return self._task_info(data, f"Document {document_id!r} in index {index_uid!r}")

    async def delete_all(self, index_uid: str) -> TaskInfo:
        data = await self._transport.delete(self._path(index_uid))
        return self._task_info(data, f"Index {index_uid!r}")

    async def delete_batch(self, index_uid: str, identifiers: Iterable[DocumentId]) -> TaskInfo:
        """Delete several documents; identifiers are sent as a JSON array of strings."""
        ids = as_string_list("identifiers", identifiers)
        body = self._codec.encode(ids)
        data = await self._transport.post(self._path(index_uid) + "/delete-batch", body)
        return self._task_info(data, f"Index {index_uid!r}")
