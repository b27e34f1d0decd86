"""Index tools for FastMCP: create, inspect, list and delete indexes."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from fastmcp import FastMCP

from meilikit.client import MeilisearchClient
from meilikit.mcp.tools.common import require_settings, task_result, to_json
from meilikit.models.index import IndexesQuery


def register_index_tools(mcp: FastMCP, get_state: Callable[[], Any]) -> None:
    """Register index tools on the given FastMCP instance."""

    def _make_client(state_obj: Any) -> MeilisearchClient:
        return MeilisearchClient.from_settings(require_settings(state_obj))

    @mcp.tool
    async def indexes_create(
        uid: str, *, primary_key: Optional[str] = None, wait: bool = False
    ) -> Dict[str, Any]:
        """Create an index, optionally with an explicit primary key."""
        client = _make_client(get_state())
        info = await client.indexes.create_index(uid, primary_key)
        return await task_result(client, info, wait)

    @mcp.tool
    async def indexes_get(uid: str) -> Dict[str, Any]:
        """Return uid, primary key and timestamps of an index."""
        client = _make_client(get_state())
        index = await client.indexes.get_index(uid)
        return to_json(index)

    @mcp.tool
    async def indexes_list(
        *, limit: Optional[int] = 20, offset: Optional[int] = None
    ) -> Dict[str, Any]:
        """List indexes, one page at a time."""
        client = _make_client(get_state())
        page = await client.indexes.get_indexes(IndexesQuery(limit=limit, offset=offset))
        return to_json(page)

    @mcp.tool
    async def indexes_delete(uid: str, *, wait: bool = False) -> Dict[str, Any]:
        """Delete an index and all of its documents."""
        client = _make_client(get_state())
        info = await client.indexes.delete_index(uid)
        return await task_result(client, info, wait)
