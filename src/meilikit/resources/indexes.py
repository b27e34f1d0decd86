from __future__ import annotations

from typing import Any, Dict, Optional

from meilikit.models.index import Index, IndexesQuery, IndexesResults
from meilikit.models.task import TaskInfo
from meilikit.resources.base_resource import BaseResource, path_segment


class Indexes(BaseResource):
    """Create, inspect and delete indexes (settings are not covered)."""

    async def create_index(self, uid: str, primary_key: Optional[str] = None) -> TaskInfo:
        payload: Dict[str, Any] = {"uid": uid}
        if primary_key is not None:
            payload["primaryKey"] = primary_key
        data = await self._transport.post("/indexes", self._codec.encode(payload))
        return self._task_info(data, f"Index {uid!r}")

    async def get_index(self, uid: str) -> Index:
        data = await self._transport.get(f"/indexes/{path_segment(uid)}")
        return self._decode(data, Index, f"Index {uid!r}")

    async def get_indexes(self, query: Optional[IndexesQuery] = None) -> IndexesResults:
        path = "/indexes" + (query.to_query() if query is not None else "")
        data = await self._transport.get(path)
        return self._decode(data, IndexesResults, "Indexes")

    async def delete_index(self, uid: str) -> TaskInfo:
        data = await self._transport.delete(f"/indexes/{path_segment(uid)}")
        return self._task_info(data, f"Index {uid!r}")
