"""Async client for the Meilisearch HTTP API."""

__version__ = "0.1.0"

from .client import IndexClient, MeilisearchClient  # noqa: E402
from .codec import JsonCodec  # noqa: E402
from .exceptions import (  # noqa: E402
    ApiError,
    ConfigError,
    DecodingError,
    EncodingError,
    InvalidArgumentError,
    MeilikitError,
    NotFoundError,
    TaskTimeoutError,
    TransportError,
)
from .models import (  # noqa: E402
    DocumentsQuery,
    DocumentsResults,
    Index,
    Task,
    TaskInfo,
    TasksQuery,
    TaskStatus,
    TaskType,
    Version,
)

__all__ = [
    "__version__",
    "ApiError",
    "ConfigError",
    "DecodingError",
    "DocumentsQuery",
    "DocumentsResults",
    "EncodingError",
    "Index",
    "IndexClient",
    "InvalidArgumentError",
    "JsonCodec",
    "MeilikitError",
    "MeilisearchClient",
    "NotFoundError",
    "Task",
    "TaskInfo",
    "TasksQuery",
    "TaskStatus",
    "TaskTimeoutError",
    "TaskType",
    "TransportError",
    "Version",
]
