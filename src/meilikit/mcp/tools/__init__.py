"""Tool registration modules for the Meilikit MCP server."""

from .documents import register_document_tools
from .indexes import register_index_tools
from .tasks import register_task_tools

__all__ = [
    "register_document_tools",
    "register_index_tools",
    "register_task_tools",
]
