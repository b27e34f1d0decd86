import json
from typing import Any, Dict, List, Optional, Union

import pytest
from fastmcp import Client, FastMCP
from fastmcp.exceptions import ToolError

from factories import task_info_json, task_json
from meilikit.config import Settings
from meilikit.mcp.tools import register_document_tools, register_index_tools, register_task_tools
from meilikit.models import (
    DocumentsQuery,
    DocumentsResults,
    IndexesQuery,
    IndexesResults,
    Task,
    TaskInfo,
    TasksQuery,
    TasksResults,
)


class DummyState:
    def __init__(self) -> None:
        self.settings = Settings()
        self.settings.meilisearch.host = "http://meili.test:7700"
        self.settings.meilisearch.api_key = "masterKey"


def _extract_json_payload(result: Any) -> Union[Dict[str, Any], List[Any], str]:
    # If already a dict/list, return as-is
    if isinstance(result, (dict, list, str)):
        return result
    # FastMCP Client returns CallToolResult with content list of TextContent
    content = getattr(result, "content", None)
    if isinstance(content, list) and content:
        for item in content:
            text = getattr(item, "text", None)
            if isinstance(text, str):
                try:
                    return json.loads(text)
                except json.JSONDecodeError:
                    return text
    raise AssertionError("Unable to extract JSON payload from tool result")


class FakeDocuments:
    def __init__(self, calls: List[Any]) -> None:
        self.calls = calls

    async def get_one(self, index_uid: str, document_id: str, fields: Optional[List[str]] = None):
        self.calls.append(("get_one", index_uid, document_id, fields))
        return {"id": document_id, "title": "Le Petit Prince"}

    async def get_all(self, index_uid: str, query: Optional[DocumentsQuery] = None):
        self.calls.append(("get_all", index_uid, query))
        return DocumentsResults[Dict[str, Any]](
            results=[{"id": 1}], offset=query.offset or 0, limit=query.limit, total=1
        )

    async def add(self, index_uid: str, documents: Any, primary_key: Optional[str] = None):
        self.calls.append(("add", index_uid, documents, primary_key))
        return TaskInfo.model_validate(task_info_json(10, index_uid=index_uid))

    async def update(self, index_uid: str, documents: Any, primary_key: Optional[str] = None):
        self.calls.append(("update", index_uid, documents, primary_key))
        return TaskInfo.model_validate(task_info_json(12, index_uid=index_uid))

    async def delete(self, index_uid: str, document_id: str):
        self.calls.append(("delete", index_uid, document_id))
        return TaskInfo.model_validate(task_info_json(13, "documentDeletion", index_uid))

    async def delete_all(self, index_uid: str):
        self.calls.append(("delete_all", index_uid))
        return TaskInfo.model_validate(task_info_json(14, "documentDeletion", index_uid))

    async def delete_batch(self, index_uid: str, identifiers: Any):
        self.calls.append(("delete_batch", index_uid, list(identifiers)))
        return TaskInfo.model_validate(task_info_json(11, "documentDeletion", index_uid))


class FakeTasks:
    def __init__(self, calls: List[Any]) -> None:
        self.calls = calls

    async def get_tasks(self, query: Optional[TasksQuery] = None):
        self.calls.append(("get_tasks", query.to_query() if query else ""))
        return TasksResults.model_validate({"results": [], "limit": 20, "from": None, "next": None})


INDEX_JSON = {
    "uid": "books_test",
    "primaryKey": "id",
    "createdAt": "2022-02-10T07:45:15.628261Z",
    "updatedAt": "2022-02-21T15:28:43.496574Z",
}


class FakeIndexes:
    def __init__(self, calls: List[Any]) -> None:
        self.calls = calls

    async def create_index(self, uid: str, primary_key: Optional[str] = None):
        self.calls.append(("create_index", uid, primary_key))
        return TaskInfo.model_validate(task_info_json(20, "indexCreation", uid))

    async def get_indexes(self, query: Optional[IndexesQuery] = None):
        self.calls.append(("get_indexes", query.to_query() if query else ""))
        return IndexesResults.model_validate(
            {"results": [INDEX_JSON], "offset": query.offset or 0, "limit": query.limit, "total": 1}
        )

    async def delete_index(self, uid: str):
        self.calls.append(("delete_index", uid))
        return TaskInfo.model_validate(task_info_json(21, "indexDeletion", uid))


def make_fake_client_class(calls: List[Any]) -> Any:
    class FakeClient:
        def __init__(self, *args: Any, **kwargs: Any) -> None:
            self.documents = FakeDocuments(calls)
            self.tasks = FakeTasks(calls)
            self.indexes = FakeIndexes(calls)

        @classmethod
        def from_settings(cls, settings: Settings) -> "FakeClient":
            calls.append(("from_settings", settings.meilisearch.host))
            return cls()

        async def get_task(self, task_uid: int) -> Task:
            calls.append(("get_task", task_uid))
            return Task.model_validate(task_json(task_uid, "processing"))

        async def wait_for_task(
            self, task: Any, *, interval_ms: Optional[int] = None, timeout_ms: Optional[int] = None
        ) -> Task:
            uid = task.task_uid if isinstance(task, TaskInfo) else task
            calls.append(("wait_for_task", uid, interval_ms, timeout_ms))
            return Task.model_validate(
                task_json(uid, "succeeded", details={"receivedDocuments": 2, "indexedDocuments": 2})
            )

    return FakeClient


@pytest.mark.asyncio
async def test_documents_add_returns_task_info(monkeypatch: pytest.MonkeyPatch) -> None:
    mcp = FastMCP("test")
    state = DummyState()
    register_document_tools(mcp, get_state=lambda: state)

    from meilikit.mcp.tools import documents as tools_documents_module

    calls: List[Any] = []
    monkeypatch.setattr(tools_documents_module, "MeilisearchClient", make_fake_client_class(calls))

    client = Client(mcp)
    async with client:
        res = await client.call_tool(
            "documents_add",
            {"index_uid": "books_test", "documents": [{"id": 1}, {"id": 2}], "primary_key": "id"},
        )
    payload = _extract_json_payload(res)

    assert payload["taskUid"] == 10
    assert payload["status"] == "enqueued"
    assert ("from_settings", "http://meili.test:7700") in calls
    assert ("add", "books_test", [{"id": 1}, {"id": 2}], "id") in calls
    assert not any(c[0] == "wait_for_task" for c in calls)


@pytest.mark.asyncio
async def test_documents_add_with_wait_returns_finished_task(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    mcp = FastMCP("test")
    state = DummyState()
    register_document_tools(mcp, get_state=lambda: state)

    from meilikit.mcp.tools import documents as tools_documents_module

    calls: List[Any] = []
    monkeypatch.setattr(tools_documents_module, "MeilisearchClient", make_fake_client_class(calls))

    client = Client(mcp)
    async with client:
        res = await client.call_tool(
            "documents_add",
            {"index_uid": "books_test", "documents": [{"id": 1}, {"id": 2}], "wait": True},
        )
    payload = _extract_json_payload(res)

    assert payload["uid"] == 10
    assert payload["status"] == "succeeded"
    assert payload["details"]["indexedDocuments"] == 2
    assert ("wait_for_task", 10, None, None) in calls


@pytest.mark.asyncio
async def test_documents_get_list_and_delete_batch(monkeypatch: pytest.MonkeyPatch) -> None:
    mcp = FastMCP("test")
    state = DummyState()
    register_document_tools(mcp, get_state=lambda: state)

    from meilikit.mcp.tools import documents as tools_documents_module

    calls: List[Any] = []
    monkeypatch.setattr(tools_documents_module, "MeilisearchClient", make_fake_client_class(calls))

    client = Client(mcp)
    async with client:
        res_get = await client.call_tool(
            "documents_get",
            {"index_uid": "books_test", "document_id": "456", "fields": ["id", "title"]},
        )
        res_list = await client.call_tool(
            "documents_list", {"index_uid": "books_test", "limit": 5, "offset": 10}
        )
        res_delete = await client.call_tool(
            "documents_delete_batch", {"index_uid": "books_test", "document_ids": ["1", "2"]}
        )

    doc = _extract_json_payload(res_get)
    page = _extract_json_payload(res_list)
    deleted = _extract_json_payload(res_delete)

    assert doc == {"id": "456", "title": "Le Petit Prince"}
    assert ("get_one", "books_test", "456", ["id", "title"]) in calls
    assert page["total"] == 1
    assert page["limit"] == 5
    list_call = next(c for c in calls if c[0] == "get_all")
    assert list_call[2].to_query() == "?limit=5&offset=10"
    assert deleted["type"] == "documentDeletion"
    assert ("delete_batch", "books_test", ["1", "2"]) in calls


@pytest.mark.asyncio
async def test_tasks_get_wait_and_list(monkeypatch: pytest.MonkeyPatch) -> None:
    mcp = FastMCP("test")
    state = DummyState()
    register_task_tools(mcp, get_state=lambda: state)

    from meilikit.mcp.tools import tasks as tools_tasks_module

    calls: List[Any] = []
    monkeypatch.setattr(tools_tasks_module, "MeilisearchClient", make_fake_client_class(calls))

    client = Client(mcp)
    async with client:
        res_get = await client.call_tool("tasks_get", {"task_uid": 5})
        res_wait = await client.call_tool(
            "tasks_wait", {"task_uid": 5, "interval_ms": 20, "timeout_ms": 1000}
        )
        await client.call_tool(
            "tasks_list", {"limit": 3, "statuses": ["failed"], "index_uids": ["books_test"]}
        )

    got = _extract_json_payload(res_get)
    waited = _extract_json_payload(res_wait)

    assert got["status"] == "processing"
    assert got["enqueuedAt"].startswith("2022-07-13T10:21:50.575133")
    assert waited["status"] == "succeeded"
    assert ("wait_for_task", 5, 20, 1000) in calls
    assert ("get_tasks", "?indexUids=books_test&limit=3&statuses=failed") in calls


@pytest.mark.asyncio
async def test_documents_update_and_deletes(monkeypatch: pytest.MonkeyPatch) -> None:
    mcp = FastMCP("test")
    state = DummyState()
    register_document_tools(mcp, get_state=lambda: state)

    from meilikit.mcp.tools import documents as tools_documents_module

    calls: List[Any] = []
    monkeypatch.setattr(tools_documents_module, "MeilisearchClient", make_fake_client_class(calls))

    client = Client(mcp)
    async with client:
        res_update = await client.call_tool(
            "documents_update",
            {"index_uid": "books_test", "documents": [{"id": 1, "title": "x"}], "wait": True},
        )
        res_delete = await client.call_tool(
            "documents_delete", {"index_uid": "books_test", "document_id": "42"}
        )
        res_delete_all = await client.call_tool("documents_delete_all", {"index_uid": "books_test"})

    updated = _extract_json_payload(res_update)
    deleted = _extract_json_payload(res_delete)
    deleted_all = _extract_json_payload(res_delete_all)

    assert ("update", "books_test", [{"id": 1, "title": "x"}], None) in calls
    assert ("wait_for_task", 12, None, None) in calls
    assert updated["uid"] == 12
    assert updated["status"] == "succeeded"
    assert ("delete", "books_test", "42") in calls
    assert deleted["taskUid"] == 13
    assert deleted["type"] == "documentDeletion"
    assert ("delete_all", "books_test") in calls
    assert deleted_all["taskUid"] == 14


@pytest.mark.asyncio
async def test_indexes_create_list_and_delete(monkeypatch: pytest.MonkeyPatch) -> None:
    mcp = FastMCP("test")
    state = DummyState()
    register_index_tools(mcp, get_state=lambda: state)

    from meilikit.mcp.tools import indexes as tools_indexes_module

    calls: List[Any] = []
    monkeypatch.setattr(tools_indexes_module, "MeilisearchClient", make_fake_client_class(calls))

    client = Client(mcp)
    async with client:
        res_create = await client.call_tool(
            "indexes_create", {"uid": "books_test", "primary_key": "id"}
        )
        res_list = await client.call_tool("indexes_list", {"limit": 2, "offset": 10})
        res_delete = await client.call_tool("indexes_delete", {"uid": "books_test"})

    created = _extract_json_payload(res_create)
    page = _extract_json_payload(res_list)
    deleted = _extract_json_payload(res_delete)

    assert ("create_index", "books_test", "id") in calls
    assert created["taskUid"] == 20
    assert created["type"] == "indexCreation"
    assert ("get_indexes", "?limit=2&offset=10") in calls
    assert page["total"] == 1
    assert page["results"][0]["primaryKey"] == "id"
    assert ("delete_index", "books_test") in calls
    assert deleted["type"] == "indexDeletion"


@pytest.mark.asyncio
async def test_tools_fail_without_settings() -> None:
    mcp = FastMCP("test")

    class EmptyState:
        settings = None

    state = EmptyState()
    register_index_tools(mcp, get_state=lambda: state)

    client = Client(mcp)
    async with client:
        with pytest.raises(ToolError, match="Meilisearch is not configured"):
            await client.call_tool("indexes_get", {"uid": "books_test"})
