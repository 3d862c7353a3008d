import logging
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Iterator

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from core.domain.errors import StorageUnavailable
from core.domain.models.todo import Todo, TodoChanges, new_todo_id
from core.domain.ports.todo_repository import TodoRepository
from infrastructure.mongo.models.todo import TodoMongo
from infrastructure.mongo.session.client import get_db

logger = logging.getLogger(__name__)

_SORT = [("dueDate", ASCENDING), ("createdAt", DESCENDING)]


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except PyMongoError as e:
        logger.error(f"🔴 MongoDB error during {operation}: {e}")
        raise StorageUnavailable(f"Storage unavailable during {operation}") from e


class MongoTodoRepository(TodoRepository):
    """
    Implementación de TodoRepository usando MongoDB (Synchronous).

    Cada escritura afecta a un único documento y es atómica en MongoDB.
    """

    def __init__(self, collection: Collection[Any] | None = None) -> None:
        if collection is None:
            self.db = get_db()
            collection = self.db.todos
        self.collection: Collection[Any] = collection

    def list(self) -> list[Todo]:
        """
        Lista todas las tareas ordenadas por fecha límite.

        Retorna:
            list[Todo]: dueDate ascendente; a igual fecha, la más reciente primero.
        """
        with _storage_errors("list"):
            docs = list(self.collection.find().sort(_SORT))
        return [TodoMongo(**doc).to_domain() for doc in docs]

    def add(self, todo: Todo) -> Todo:
        """
        Inserta una tarea nueva asignando id y marcas de tiempo.

        Argumentos:
            todo (Todo): La tarea a guardar.
        """
        now = datetime.now(timezone.utc)
        saved = replace(todo, id=new_todo_id(), created_at=now, updated_at=now)
        doc = TodoMongo.from_domain(saved).model_dump(by_alias=True)

        with _storage_errors("insert"):
            self.collection.insert_one(doc)
        return saved

    def get(self, todo_id: str) -> Todo | None:
        """
        Obtiene una tarea por su ID.

        Retorna:
            Todo | None: La tarea encontrada o None si no existe.
        """
        with _storage_errors("get"):
            doc = self.collection.find_one({"_id": ObjectId(todo_id)})
        if not doc:
            return None
        return TodoMongo(**doc).to_domain()

    def update(self, todo_id: str, changes: TodoChanges) -> Todo | None:
        """
        Aplica los campos presentes en `changes` y refresca updatedAt.

        Retorna:
            Todo | None: La tarea actualizada o None si no existe.
        """
        fields: dict[str, Any] = {"updatedAt": datetime.now(timezone.utc)}
        if changes.task is not None:
            fields["task"] = changes.task
        if changes.due_date is not None:
            fields["dueDate"] = changes.due_date
        if changes.status is not None:
            fields["status"] = changes.status.value

        with _storage_errors("update"):
            doc = self.collection.find_one_and_update(
                {"_id": ObjectId(todo_id)},
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )
        if not doc:
            return None
        return TodoMongo(**doc).to_domain()

    def delete(self, todo_id: str) -> Todo | None:
        """
        Elimina una tarea por su ID.

        Retorna:
            Todo | None: El contenido previo de la tarea, o None si no existía.
        """
        with _storage_errors("delete"):
            doc = self.collection.find_one_and_delete({"_id": ObjectId(todo_id)})
        if not doc:
            return None
        return TodoMongo(**doc).to_domain()

    def health(self) -> dict[str, Any]:
        database = self.collection.database
        info: dict[str, Any] = {
            "backend": "mongo",
            "status": "Disconnected",
            "database": database.name,
            "collections": [],
        }
        try:
            database.client.admin.command("ping")
            info["collections"] = database.list_collection_names()
            info["status"] = "Connected"
        except PyMongoError as e:
            logger.warning(f"MongoDB health check failed: {e}")
        return info
