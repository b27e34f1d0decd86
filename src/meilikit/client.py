"""Entry point for talking to a Meilisearch server.

``MeilisearchClient`` wires one transport and one codec into the resource
clients, and ``client.index(uid)`` returns a handle bound to a single index.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from meilikit.codec import DocumentsPayload, JsonCodec
from meilikit.config import Settings
from meilikit.models.documents import DocumentsQuery, DocumentsResults
from meilikit.models.index import Index
from meilikit.models.task import Task, TaskInfo
from meilikit.models.version import Version
from meilikit.resources.documents import DocumentId, Documents
from meilikit.resources.indexes import Indexes
from meilikit.resources.tasks import DEFAULT_INTERVAL_MS, DEFAULT_TIMEOUT_MS, TaskRef, Tasks
from meilikit.transport import HttpTransport


class MeilisearchClient:
    """Async client for one Meilisearch server.

    Parameters
    ----------
    host:
        Base URL of the server, e.g. ``http://localhost:7700``. Must be an
        absolute http(s) URL.
    api_key:
        Master or API key sent as a bearer token. Optional for servers
        running without a master key.
    timeout:
        Per-request timeout in seconds.
    verify_ssl:
        Whether to verify TLS certificates.
    codec:
        JSON codec shared by all resources. Defaults to ``JsonCodec()``.
    poll_interval_ms, poll_timeout_ms:
        Defaults for ``wait_for_task``.
    """

    def __init__(
        self,
        host: str,
        api_key: Optional[str] = None,
        *,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        codec: Optional[JsonCodec] = None,
        poll_interval_ms: int = DEFAULT_INTERVAL_MS,
        poll_timeout_ms: int = DEFAULT_TIMEOUT_MS,
    ) -> None:
        self.transport = HttpTransport(
            base_url=host, api_key=api_key, verify_ssl=verify_ssl, timeout=timeout
        )
        self.codec = codec or JsonCodec()
        self.poll_interval_ms = poll_interval_ms
        self.poll_timeout_ms = poll_timeout_ms
        self.documents = Documents(self.transport, self.codec)
        self.tasks = Tasks(self.transport, self.codec)
        self.indexes = Indexes(self.transport, self.codec)

    @classmethod
    def from_settings(cls, settings: Settings) -> "MeilisearchClient":
        cfg = settings.meilisearch
        return cls(
            cfg.host,
            cfg.api_key,
            timeout=cfg.timeout,
            verify_ssl=cfg.verify_ssl,
            poll_interval_ms=settings.tasks.interval_ms,
            poll_timeout_ms=settings.tasks.timeout_ms,
        )

    @property
    def host(self) -> str:
        return self.transport.base_url

    def index(self, uid: str) -> "IndexClient":
        """Return a handle for the index ``uid`` (no request is made)."""
        return IndexClient(self, uid)

    async def create_index(self, uid: str, primary_key: Optional[str] = None) -> TaskInfo:
        return await self.indexes.create_index(uid, primary_key)

    async def get_task(self, task_uid: int) -> Task:
        return await self.tasks.get_task(task_uid)

    async def wait_for_task(
        self,
        task: TaskRef,
        *,
        interval_ms: Optional[int] = None,
        timeout_ms: Optional[int] = None,
    ) -> Task:
        """Poll ``task`` until it is terminal; see ``Tasks.wait_for_task``."""
        return await self.tasks.wait_for_task(
            task,
            interval_ms=self.poll_interval_ms if interval_ms is None else interval_ms,
            timeout_ms=self.poll_timeout_ms if timeout_ms is None else timeout_ms,
        )

    async def health(self) -> Dict[str, Any]:
        """Return the server health payload, e.g. ``{"status": "available"}``."""
        data = await self.transport.get("/health")
        return self.codec.decode(data, Dict[str, Any])

    async def get_version(self) -> Version:
        data = await self.transport.get("/version")
        return self.codec.decode(data, Version)


class IndexClient:
    """Operations scoped to a single index."""

    def __init__(self, client: MeilisearchClient, uid: str) -> None:
        self.client = client
        self.uid = uid

    def __repr__(self) -> str:
        return f"IndexClient(uid={self.uid!r}, host={self.client.host!r})"

    async def fetch_info(self) -> Index:
        return await self.client.indexes.get_index(self.uid)

    async def delete(self) -> TaskInfo:
        return await self.client.indexes.delete_index(self.uid)

    async def get_document(
        self,
        document_id: DocumentId,
        fields: Optional[List[str]] = None,
        *,
        model: Any = Dict[str, Any],
    ) -> Any:
        return await self.client.documents.get_one(self.uid, document_id, fields, model=model)

    async def get_documents(
        self, query: Optional[DocumentsQuery] = None, *, model: Any = Dict[str, Any]
    ) -> DocumentsResults[Any]:
        return await self.client.documents.get_all(self.uid, query, model=model)

    async def add_documents(
        self, documents: DocumentsPayload, primary_key: Optional[str] = None
    ) -> TaskInfo:
        return await self.client.documents.add(self.uid, documents, primary_key)

    async def update_documents(
        self, documents: DocumentsPayload, primary_key: Optional[str] = None
    ) -> TaskInfo:
        return await self.client.documents.update(self.uid, documents, primary_key)

    async def delete_document(self, document_id: DocumentId) -> TaskInfo:
        return await self.client.documents.delete(self.uid, document_id)

    async def delete_all_documents(self) -> TaskInfo:
        return await self.client.documents.delete_all(self.uid)

    async def delete_documents(self, identifiers: Iterable[DocumentId]) -> TaskInfo:
        return await self.client.documents.delete_batch(self.uid, identifiers)
