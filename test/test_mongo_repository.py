from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError

from core.domain.errors import StorageUnavailable
from core.domain.models.todo import Todo, TodoChanges, TodoStatus
from infrastructure.mongo.repository.todo_repository import MongoTodoRepository

DUE = datetime(2025, 1, 10, tzinfo=timezone.utc)
CREATED = datetime(2025, 1, 1, 12, tzinfo=timezone.utc)


def _doc(**overrides):
    doc = {
        "_id": ObjectId(),
        "task": "Buy milk",
        "dueDate": DUE,
        "status": "pending",
        "createdAt": CREATED,
        "updatedAt": CREATED,
    }
    doc.update(overrides)
    return doc


@pytest.fixture
def mock_mongo_collection():
    collection = MagicMock()
    return collection


@pytest.fixture
def mongo_repository(mock_mongo_collection):
    return MongoTodoRepository(collection=mock_mongo_collection)


def test_add_inserts_document_with_id_and_timestamps(mongo_repository, mock_mongo_collection):
    todo = Todo(task="Buy milk", due_date=DUE)

    saved = mongo_repository.add(todo)

    mock_mongo_collection.insert_one.assert_called_once()
    (doc,), _ = mock_mongo_collection.insert_one.call_args
    assert doc["_id"] == ObjectId(saved.id)
    assert doc["task"] == "Buy milk"
    assert doc["dueDate"] == DUE
    assert doc["status"] == "pending"
    assert doc["createdAt"] == doc["updatedAt"] == saved.created_at
    assert todo.id is None


def test_list_sorts_by_due_date_then_newest(mongo_repository, mock_mongo_collection):
    docs = [_doc(task="Tarea 1"), _doc(task="Tarea 2", status="completed")]
    mock_mongo_collection.find.return_value.sort.return_value = docs

    results = mongo_repository.list()

    mock_mongo_collection.find.return_value.sort.assert_called_once_with(
        [("dueDate", 1), ("createdAt", -1)]
    )
    assert [t.task for t in results] == ["Tarea 1", "Tarea 2"]
    assert results[1].status == TodoStatus.COMPLETED
    assert results[0].id == str(docs[0]["_id"])


def test_get_found(mongo_repository, mock_mongo_collection):
    doc = _doc()
    mock_mongo_collection.find_one.return_value = doc

    result = mongo_repository.get(str(doc["_id"]))

    mock_mongo_collection.find_one.assert_called_once_with({"_id": doc["_id"]})
    assert result.task == "Buy milk"
    assert result.due_date == DUE


def test_get_not_found(mongo_repository, mock_mongo_collection):
    mock_mongo_collection.find_one.return_value = None

    assert mongo_repository.get(str(ObjectId())) is None


def test_update_sets_only_supplied_fields(mongo_repository, mock_mongo_collection):
    doc = _doc(status="completed")
    mock_mongo_collection.find_one_and_update.return_value = doc

    result = mongo_repository.update(
        str(doc["_id"]), TodoChanges(status=TodoStatus.COMPLETED)
    )

    args, kwargs = mock_mongo_collection.find_one_and_update.call_args
    assert args[0] == {"_id": doc["_id"]}
    assert set(args[1]["$set"]) == {"status", "updatedAt"}
    assert args[1]["$set"]["status"] == "completed"
    assert kwargs["return_document"] is ReturnDocument.AFTER
    assert result.status == TodoStatus.COMPLETED


def test_update_not_found(mongo_repository, mock_mongo_collection):
    mock_mongo_collection.find_one_and_update.return_value = None

    assert mongo_repository.update(str(ObjectId()), TodoChanges(task="x")) is None


def test_delete_returns_removed_document(mongo_repository, mock_mongo_collection):
    doc = _doc()
    mock_mongo_collection.find_one_and_delete.return_value = doc

    result = mongo_repository.delete(str(doc["_id"]))

    mock_mongo_collection.find_one_and_delete.assert_called_once_with({"_id": doc["_id"]})
    assert result.id == str(doc["_id"])


def test_driver_errors_become_storage_unavailable(mongo_repository, mock_mongo_collection):
    mock_mongo_collection.find.side_effect = ServerSelectionTimeoutError("down")

    with pytest.raises(StorageUnavailable):
        mongo_repository.list()


def test_health_reports_connection(mongo_repository, mock_mongo_collection):
    database = mock_mongo_collection.database
    database.name = "todo_list"
    database.list_collection_names.return_value = ["todos"]

    info = mongo_repository.health()

    assert info == {
        "backend": "mongo",
        "status": "Connected",
        "database": "todo_list",
        "collections": ["todos"],
    }


def test_health_reports_disconnected(mongo_repository, mock_mongo_collection):
    mock_mongo_collection.database.client.admin.command.side_effect = ConnectionFailure("x")

    info = mongo_repository.health()

    assert info["status"] == "Disconnected"
    assert info["collections"] == []
