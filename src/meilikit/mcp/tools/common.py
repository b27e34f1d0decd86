"""Helpers shared by the tool modules."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel

from meilikit.client import MeilisearchClient
from meilikit.models.task import TaskInfo


def to_json(model: BaseModel) -> Dict[str, Any]:
    """Dump a wire model back to its camelCase JSON shape."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def require_settings(state_obj: Any) -> Any:
    settings = getattr(state_obj, "settings", None)
    if settings is None:
        raise RuntimeError(
            "Meilisearch is not configured. Set MEILIKIT_MEILISEARCH__HOST and "
            "MEILIKIT_MEILISEARCH__API_KEY."
        )
    return settings


async def task_result(client: MeilisearchClient, info: TaskInfo, wait: bool) -> Dict[str, Any]:
    """Return the task handle, or the finished task when ``wait`` is set."""
    if not wait:
        return to_json(info)
    task = await client.wait_for_task(info)
    return to_json(task)
