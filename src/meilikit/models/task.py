"""Task records returned by the server.

A ``TaskInfo`` is the handle every write operation returns right away; the
full ``Task`` (with ``details`` and ``error``) is fetched later by uid.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import ConfigDict, Field, model_validator

from meilikit.exceptions import InvalidArgumentError
from meilikit.models.base import MeiliModel, Timestamp
from meilikit.query import as_string_list, check_non_negative, render_query


class TaskStatus(str, Enum):
    """Lifecycle of a server-side task."""

    ENQUEUED = "enqueued"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELED = "canceled"

    @property
    def is_terminal(self) -> bool:
        return self in _TERMINAL_STATUSES


_TERMINAL_STATUSES = frozenset({TaskStatus.SUCCEEDED, TaskStatus.FAILED, TaskStatus.CANCELED})


class TaskType(str, Enum):
    """Kind of operation a task performs."""

    INDEX_CREATION = "indexCreation"
    INDEX_UPDATE = "indexUpdate"
    INDEX_DELETION = "indexDeletion"
    INDEX_SWAP = "indexSwap"
    DOCUMENT_ADDITION_OR_UPDATE = "documentAdditionOrUpdate"
    DOCUMENT_DELETION = "documentDeletion"
    SETTINGS_UPDATE = "settingsUpdate"
    DUMP_CREATION = "dumpCreation"
    TASK_CANCELATION = "taskCancelation"
    TASK_DELETION = "taskDeletion"
    SNAPSHOT_CREATION = "snapshotCreation"


class DocumentAdditionOrUpdateDetails(MeiliModel):
    type: Literal["documentAdditionOrUpdate"] = "documentAdditionOrUpdate"
    received_documents: Optional[int] = None
    indexed_documents: Optional[int] = None


class DocumentDeletionDetails(MeiliModel):
    type: Literal["documentDeletion"] = "documentDeletion"
    provided_ids: Optional[int] = None
    deleted_documents: Optional[int] = None
    original_filter: Optional[str] = None


class IndexDetails(MeiliModel):
    """Details for index creation and index update tasks."""

    type: Literal["indexCreation", "indexUpdate"] = "indexCreation"
    primary_key: Optional[str] = None


class IndexDeletionDetails(MeiliModel):
    type: Literal["indexDeletion"] = "indexDeletion"
    deleted_documents: Optional[int] = None


class IndexSwapDetails(MeiliModel):
    type: Literal["indexSwap"] = "indexSwap"
    swaps: List[Dict[str, Any]] = Field(default_factory=list)


class SettingsUpdateDetails(MeiliModel):
    """Settings are passed through as received."""

    model_config = ConfigDict(extra="allow")

    type: Literal["settingsUpdate"] = "settingsUpdate"


class DumpCreationDetails(MeiliModel):
    type: Literal["dumpCreation"] = "dumpCreation"
    dump_uid: Optional[str] = None


class TaskCancelationDetails(MeiliModel):
    type: Literal["taskCancelation"] = "taskCancelation"
    matched_tasks: Optional[int] = None
    canceled_tasks: Optional[int] = None
    original_filter: Optional[str] = None


class TaskDeletionDetails(MeiliModel):
    type: Literal["taskDeletion"] = "taskDeletion"
    matched_tasks: Optional[int] = None
    deleted_tasks: Optional[int] = None
    original_filter: Optional[str] = None


TaskDetails = Annotated[
    Union[
        DocumentAdditionOrUpdateDetails,
        DocumentDeletionDetails,
        IndexDetails,
        IndexDeletionDetails,
        IndexSwapDetails,
        SettingsUpdateDetails,
        DumpCreationDetails,
        TaskCancelationDetails,
        TaskDeletionDetails,
    ],
    Field(discriminator="type"),
]

# snapshotCreation carries no details
_DETAILED_TYPES = frozenset(t.value for t in TaskType) - {TaskType.SNAPSHOT_CREATION.value}


class TaskError(MeiliModel):
    """Error payload attached to a failed task."""

    message: str
    code: Optional[str] = None
    type: Optional[str] = None
    link: Optional[str] = None


class Task(MeiliModel):
    """Full record of one asynchronous server-side operation."""

    uid: int
    index_uid: Optional[str] = None
    status: TaskStatus
    type: TaskType
    canceled_by: Optional[int] = None
    details: Optional[TaskDetails] = None
    error: Optional[TaskError] = None
    duration: Optional[str] = None
    enqueued_at: Timestamp
    started_at: Optional[Timestamp] = None
    finished_at: Optional[Timestamp] = None

    @model_validator(mode="before")
    @classmethod
    def _tag_details(cls, data: Any) -> Any:
        # The details object has no tag of its own; copy the task type into it
        # so the discriminated union can pick the right model.
        if not isinstance(data, dict):
            return data
        details = data.get("details")
        task_type = data.get("type")
        if isinstance(task_type, Enum):
            task_type = task_type.value
        if isinstance(details, dict):
            if task_type in _DETAILED_TYPES:
                data = {**data, "details": {**details, "type": task_type}}
            else:
                data = {**data, "details": None}
        return data


class TaskInfo(MeiliModel):
    """Handle returned by write operations before the task has run."""

    task_uid: int
    index_uid: Optional[str] = None
    status: TaskStatus
    type: TaskType
    enqueued_at: Timestamp


class TasksResults(MeiliModel):
    """One page of ``GET /tasks``."""

    results: List[Task]
    limit: int
    from_: Optional[int] = Field(default=None, alias="from")
    next: Optional[int] = None


@dataclass(slots=True)
class TasksQuery:
    """Filters and paging for ``GET /tasks``.

    ``from_`` is the uid of the first task to return (tasks are listed newest first).
    """

    limit: Optional[int] = None
    from_: Optional[int] = None
    index_uids: Optional[List[str]] = None
    statuses: Optional[List[TaskStatus]] = None
    types: Optional[List[TaskType]] = None

    def __post_init__(self) -> None:
        check_non_negative("limit", self.limit)
        check_non_negative("from_", self.from_)
        self.index_uids = as_string_list("index_uids", self.index_uids)
        try:
            if self.statuses is not None:
                self.statuses = [TaskStatus(s) for s in self.statuses]
            if self.types is not None:
                self.types = [TaskType(t) for t in self.types]
        except ValueError as exc:
            raise InvalidArgumentError(str(exc)) from exc

    def to_query(self) -> str:
        return render_query(
            [
                ("from", self.from_),
                ("indexUids", self.index_uids),
                ("limit", self.limit),
                ("statuses", self.statuses),
                ("types", self.types),
            ]
        )
