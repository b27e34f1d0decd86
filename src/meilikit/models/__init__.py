"""Typed wire models for the Meilisearch HTTP API."""

from .documents import DocumentsQuery, DocumentsResults
from .index import Index, IndexesQuery, IndexesResults
from .task import (
    Task,
    TaskDetails,
    TaskError,
    TaskInfo,
    TasksQuery,
    TasksResults,
    TaskStatus,
    TaskType,
)
from .version import Version

__all__ = [
    "DocumentsQuery",
    "DocumentsResults",
    "Index",
    "IndexesQuery",
    "IndexesResults",
    "Task",
    "TaskDetails",
    "TaskError",
    "TaskInfo",
    "TasksQuery",
    "TasksResults",
    "TaskStatus",
    "TaskType",
    "Version",
]
