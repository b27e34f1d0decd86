from datetime import datetime, timezone

import pytest

from factories import task_info_json, task_json
from meilikit import Task, TaskInfo, TaskStatus, TaskType, Version
from meilikit.models import Index
from meilikit.models.task import (
    DocumentAdditionOrUpdateDetails,
    DocumentDeletionDetails,
    IndexDetails,
    SettingsUpdateDetails,
    TaskCancelationDetails,
)


@pytest.mark.parametrize(
    "status, terminal",
    [
        (TaskStatus.ENQUEUED, False),
        (TaskStatus.PROCESSING, False),
        (TaskStatus.SUCCEEDED, True),
        (TaskStatus.FAILED, True),
        (TaskStatus.CANCELED, True),
    ],
)
def test_terminal_statuses(status: TaskStatus, terminal: bool) -> None:
    assert status.is_terminal is terminal


def test_task_info_decodes_camel_case_and_nanoseconds() -> None:
    info = TaskInfo.model_validate(task_info_json(17))

    assert info.task_uid == 17
    assert info.index_uid == "books_test"
    assert info.status is TaskStatus.ENQUEUED
    assert info.type is TaskType.DOCUMENT_ADDITION_OR_UPDATE
    assert info.enqueued_at == datetime(2022, 7, 13, 10, 21, 50, 575133, tzinfo=timezone.utc)


def test_task_with_short_fraction_timestamp() -> None:
    payload = task_json(1, "enqueued")
    payload["enqueuedAt"] = "2023-01-02T03:04:05.5Z"

    task = Task.model_validate(payload)

    assert task.enqueued_at == datetime(2023, 1, 2, 3, 4, 5, 500000, tzinfo=timezone.utc)
    assert task.started_at is None
    assert task.finished_at is None


def test_document_addition_details() -> None:
    task = Task.model_validate(
        task_json(1, "succeeded", details={"receivedDocuments": 8, "indexedDocuments": 8})
    )

    assert isinstance(task.details, DocumentAdditionOrUpdateDetails)
    assert task.details.received_documents == 8
    assert task.details.indexed_documents == 8


def test_document_deletion_details() -> None:
    task = Task.model_validate(
        task_json(
            2,
            "succeeded",
            task_type="documentDeletion",
            details={"providedIds": 0, "deletedDocuments": 8, "originalFilter": None},
        )
    )

    assert task.type is TaskType.DOCUMENT_DELETION
    assert isinstance(task.details, DocumentDeletionDetails)
    assert task.details.deleted_documents == 8


def test_index_creation_and_update_share_details() -> None:
    created = Task.model_validate(
        task_json(3, "succeeded", task_type="indexCreation", details={"primaryKey": "id"})
    )
    updated = Task.model_validate(
        task_json(4, "succeeded", task_type="indexUpdate", details={"primaryKey": "isbn"})
    )

    assert isinstance(created.details, IndexDetails)
    assert created.details.primary_key == "id"
    assert isinstance(updated.details, IndexDetails)
    assert updated.details.type == "indexUpdate"


def test_settings_details_keep_unknown_keys() -> None:
    task = Task.model_validate(
        task_json(5, "processing", task_type="settingsUpdate", details={"rankingRules": ["words"]})
    )

    assert isinstance(task.details, SettingsUpdateDetails)
    assert task.details.model_extra == {"rankingRules": ["words"]}


def test_task_cancelation_details_have_no_index() -> None:
    task = Task.model_validate(
        task_json(
            6,
            "succeeded",
            task_type="taskCancelation",
            index_uid=None,
            details={"matchedTasks": 2, "canceledTasks": 1, "originalFilter": "?uids=1,2"},
        )
    )

    assert task.index_uid is None
    assert isinstance(task.details, TaskCancelationDetails)
    assert task.details.canceled_tasks == 1


def test_details_absent_until_known() -> None:
    task = Task.model_validate(task_json(7, "enqueued"))
    assert task.details is None


def test_snapshot_details_are_dropped() -> None:
    task = Task.model_validate(
        task_json(8, "succeeded", task_type="snapshotCreation", index_uid=None, details={})
    )
    assert task.type is TaskType.SNAPSHOT_CREATION
    assert task.details is None


def test_index_and_version_models() -> None:
    index = Index.model_validate(
        {
            "uid": "movies",
            "primaryKey": "id",
            "createdAt": "2022-02-10T07:45:15.628261Z",
            "updatedAt": "2022-02-21T15:28:43.496574Z",
        }
    )
    version = Version.model_validate(
        {
            "commitSha": "b46889b5f0f2f8b91438a08a358ba8f05fc09fc1",
            "commitDate": "2019-11-15T09:51:54.278247+00:00",
            "pkgVersion": "1.0.0",
        }
    )

    assert index.primary_key == "id"
    assert index.created_at is not None
    assert version.pkg_version == "1.0.0"
    assert version.commit_date.tzinfo is not None
