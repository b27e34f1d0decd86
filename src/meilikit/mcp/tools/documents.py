"""Document tools for FastMCP.

Read, write and delete documents of a Meilisearch index. Write tools return
the enqueued task, or the finished task when called with ``wait=true``.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from fastmcp import FastMCP

from meilikit.client import MeilisearchClient
from meilikit.mcp.tools.common import require_settings, task_result, to_json
from meilikit.models.documents import DocumentsQuery


def register_document_tools(mcp: FastMCP, get_state: Callable[[], Any]) -> None:
    """Register document tools on the given FastMCP instance.

    Reads config from state.settings.meilisearch (host, api_key, timeout, verify_ssl).
    """

    def _make_client(state_obj: Any) -> MeilisearchClient:
        return MeilisearchClient.from_settings(require_settings(state_obj))

    @mcp.tool
    async def documents_get(
        index_uid: str, document_id: str, fields: Optional[List[str]] = None
    ) -> Dict[str, Any]:
        """Fetch one document by its primary key.

        Parameters
        ----------
        index_uid: str
            Index uid (e.g., "movies").
        document_id: str
            Primary key value of the document.
        fields: list[str] | None
            Only return these attributes.
        """
        client = _make_client(get_state())
        return await client.documents.get_one(index_uid, document_id, fields)

    @mcp.tool
    async def documents_list(
        index_uid: str,
        *,
        limit: Optional[int] = 20,
        offset: Optional[int] = None,
        fields: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """List documents of an index, one page at a time.

        Returns {"results": [...], "offset", "limit", "total"}.
        """
        client = _make_client(get_state())
        query = DocumentsQuery(limit=limit, offset=offset, fields=fields)
        page = await client.documents.get_all(index_uid, query)
        return to_json(page)

    @mcp.tool
    async def documents_add(
        index_uid: str,
        documents: List[Dict[str, Any]],
        *,
        primary_key: Optional[str] = None,
        wait: bool = False,
    ) -> Dict[str, Any]:
        """Add or replace documents.

        Parameters
        ----------
        index_uid: str
            Target index; created by the server if missing.
        documents: list[dict]
            Documents to add. Existing documents with the same primary key are replaced.
        primary_key: str | None
            Primary key attribute, only needed on the first write to a new index.
        wait: bool
            Wait for the task to finish and return it instead of the task handle.
        """
        client = _make_client(get_state())
        info = await client.documents.add(index_uid, documents, primary_key)
        return await task_result(client, info, wait)

    @mcp.tool
    async def documents_update(
        index_uid: str,
        documents: List[Dict[str, Any]],
        *,
        primary_key: Optional[str] = None,
        wait: bool = False,
    ) -> Dict[str, Any]:
        """Add or partially update documents (fields are merged into existing documents)."""
        client = _make_client(get_state())
        info = await client.documents.update(index_uid, documents, primary_key)
        return await task_result(client, info, wait)

    @mcp.tool
    async def documents_delete(
        index_uid: str, document_id: str, *, wait: bool = False
    ) -> Dict[str, Any]:
        """Delete one document by its primary key."""
        client = _make_client(get_state())
        info = await client.documents.delete(index_uid, document_id)
        return await task_result(client, info, wait)

    @mcp.tool
    async def documents_delete_all(index_uid: str, *, wait: bool = False) -> Dict[str, Any]:
        """Delete every document of an index (the index itself is kept)."""
        client = _make_client(get_state())
        info = await client.documents.delete_all(index_uid)
        return await task_result(client, info, wait)

    @mcp.tool
    async def documents_delete_batch(
        index_uid: str, document_ids: List[str], *, wait: bool = False
    ) -> Dict[str, Any]:
        """Delete several documents by primary key."""
        client = _make_client(get_state())
        info = await client.documents.delete_batch(index_uid, document_ids)
        return await task_result(client, info, wait)
