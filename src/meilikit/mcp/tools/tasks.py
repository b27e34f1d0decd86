"""Task tools for FastMCP: inspect and wait for asynchronous server tasks."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from fastmcp import FastMCP

from meilikit.client import MeilisearchClient
from meilikit.mcp.tools.common import require_settings, to_json
from meilikit.models.task import TasksQuery


def register_task_tools(mcp: FastMCP, get_state: Callable[[], Any]) -> None:
    """Register task tools on the given FastMCP instance."""

    def _make_client(state_obj: Any) -> MeilisearchClient:
        return MeilisearchClient.from_settings(require_settings(state_obj))

    @mcp.tool
    async def tasks_get(task_uid: int) -> Dict[str, Any]:
        """Fetch the current state of a task."""
        client = _make_client(get_state())
        task = await client.get_task(task_uid)
        return to_json(task)

    @mcp.tool
    async def tasks_list(
        *,
        limit: Optional[int] = 20,
        index_uids: Optional[List[str]] = None,
        statuses: Optional[List[str]] = None,
        types: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """List recent tasks, newest first.

        Parameters
        ----------
        limit: int | None
            Maximum number of tasks (default 20).
        index_uids: list[str] | None
            Only tasks on these indexes.
        statuses: list[str] | None
            Only tasks in these statuses (enqueued, processing, succeeded, failed, canceled).
        types: list[str] | None
            Only tasks of these types (e.g., documentAdditionOrUpdate).
        """
        client = _make_client(get_state())
        query = TasksQuery(limit=limit, index_uids=index_uids, statuses=statuses, types=types)
        page = await client.tasks.get_tasks(query)
        return to_json(page)

    @mcp.tool
    async def tasks_wait(
        task_uid: int,
        *,
        interval_ms: Optional[int] = None,
        timeout_ms: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Wait until a task succeeds, fails or is canceled, then return it.

        Defaults for interval/timeout come from MEILIKIT_TASKS__INTERVAL_MS and
        MEILIKIT_TASKS__TIMEOUT_MS.
        """
        client = _make_client(get_state())
        task = await client.wait_for_task(task_uid, interval_ms=interval_ms, timeout_ms=timeout_ms)
        return to_json(task)
