"""Task lookup and completion polling.

Every write on the server is queued as a task. ``wait_for_task`` turns that
fire-and-forget operation into something a caller can ``await``: it re-fetches
the task every ``interval_ms`` until the task is terminal or ``timeout_ms`` of
wall-clock time has passed.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional, Union

from meilikit.exceptions import InvalidArgumentError, TaskTimeoutError
from meilikit.models.task import Task, TaskInfo, TasksQuery, TasksResults
from meilikit.resources.base_resource import BaseResource

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_MS = 50
DEFAULT_TIMEOUT_MS = 5000

TaskRef = Union[int, TaskInfo, Task]


def task_uid_of(task: TaskRef) -> int:
    """Extract the task uid from a raw uid, a ``TaskInfo`` or a ``Task``."""
    if isinstance(task, TaskInfo):
        return task.task_uid
    if isinstance(task, Task):
        return task.uid
    if isinstance(task, bool) or not isinstance(task, int):
        raise InvalidArgumentError(
            f"Expected a task uid, TaskInfo or Task, got {type(task).__name__}"
        )
    return task


def _check_positive(name: str, value: Union[int, float]) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise InvalidArgumentError(f"{name} must be a positive number, got {value!r}")


class Tasks(BaseResource):
    async def get_task(self, task_uid: int) -> Task:
        data = await self._transport.get(f"/tasks/{int(task_uid)}")
        return self._decode(data, Task, f"Task {task_uid}")

    async def get_tasks(self, query: Optional[TasksQuery] = None) -> TasksResults:
        path = "/tasks" + (query.to_query() if query is not None else "")
        data = await self._transport.get(path)
        return self._decode(data, TasksResults, "Tasks")

    async def wait_for_task(
        self,
        task: TaskRef,
        *,
        interval_ms: Union[int, float] = DEFAULT_INTERVAL_MS,
        timeout_ms: Union[int, float] = DEFAULT_TIMEOUT_MS,
    ) -> Task:
        """Poll a task until it reaches ``succeeded``, ``failed`` or ``canceled``.

        A failed or canceled task is returned like a succeeded one; inspect
        ``status`` and ``error`` on the result.

        Parameters
        ----------
        task: int | TaskInfo | Task
            The task to wait for.
        interval_ms: int | float
            Delay between two fetches. Must be positive.
        timeout_ms: int | float
            Wall-clock budget measured from this call. Must be positive. When it
            is not larger than ``interval_ms`` only one fetch is made.

        Raises
        ------
        InvalidArgumentError
            Bad ``task``, ``interval_ms`` or ``timeout_ms``; nothing was sent.
        TaskTimeoutError
            The task was still enqueued/processing when the budget ran out. The
            last fetched snapshot is available as ``exc.task``.
        TransportError, ApiError, NotFoundError, DecodingError
            A status fetch failed. Fetch errors are never retried.
        """
        uid = task_uid_of(task)
        _check_positive("interval_ms", interval_ms)
        _check_positive("timeout_ms", timeout_ms)

        loop = asyncio.get_running_loop()
        interval = interval_ms / 1000.0
        deadline = loop.time() + timeout_ms / 1000.0
        attempts = 0

        while True:
            attempts += 1
            current = await self.get_task(uid)
            if current.status.is_terminal:
                logger.debug(
                    "Task %s reached %s after %d fetch(es)", uid, current.status.value, attempts
                )
                return current

            remaining = deadline - loop.time()
            logger.debug(
                "Task %s is %s (attempt %d, %.0f ms left)",
                uid,
                current.status.value,
                attempts,
                max(remaining, 0.0) * 1000,
            )
            if remaining > interval:
                await asyncio.sleep(interval)
                continue
            # The next fetch would land past the deadline: use up the budget and stop.
            if remaining > 0:
                await asyncio.sleep(remaining)
            logger.warning(
                "Timed out waiting for task %s after %s ms (%d fetches, last status %s)",
                uid,
                timeout_ms,
                attempts,
                current.status.value,
            )
            raise TaskTimeoutError(uid, timeout_ms, current)
