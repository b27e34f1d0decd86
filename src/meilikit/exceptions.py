"""Custom exception hierarchy for meilikit.

These exceptions allow callers to discriminate error categories
and handle them appropriately while preserving the original context.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from meilikit.models.task import Task


class MeilikitError(Exception):
    """Base class for all meilikit exceptions."""


class ConfigError(MeilikitError):
    """Raised when configuration loading or validation fails."""


class TransportError(MeilikitError):
    """Raised when the HTTP request could not be completed (connection, DNS, TLS, timeout)."""


class ApiError(MeilikitError):
    """Raised when the server answers with a non-success status code.

    Carries the fields of the server's error payload when one was returned.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        error_type: Optional[str] = None,
        link: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.error_type = error_type
        self.link = link


class NotFoundError(ApiError):
    """Raised when a document, index or task does not exist (404 or empty body)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = 404,
        code: Optional[str] = None,
        error_type: Optional[str] = None,
        link: Optional[str] = None,
    ) -> None:
        super().__init__(
            message, status_code=status_code, code=code, error_type=error_type, link=link
        )


class DecodingError(MeilikitError):
    """Raised when a response body does not match the expected shape."""


class EncodingError(MeilikitError):
    """Raised when outgoing documents cannot be serialized to JSON."""


class InvalidArgumentError(MeilikitError, ValueError):
    """Raised when caller-supplied parameters violate documented constraints."""


class TaskTimeoutError(MeilikitError, TimeoutError):
    """Raised when a task does not reach a terminal status in time.

    ``task`` is the last non-terminal snapshot observed, if any fetch succeeded.
    """

    def __init__(
        self, task_uid: int, timeout_ms: Union[int, float], task: Optional[Task] = None
    ) -> None:
        status = task.status.value if task is not None else "unknown"
        super().__init__(
            f"Task {task_uid} did not finish within {timeout_ms} ms (last status: {status})"
        )
        self.task_uid = task_uid
        self.timeout_ms = timeout_ms
        self.task = task
