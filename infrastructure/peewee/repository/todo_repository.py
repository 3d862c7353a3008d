import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, List

from peewee import DatabaseError

from core.domain.errors import StorageUnavailable
from core.domain.models.todo import Todo, TodoChanges, TodoStatus, as_utc, new_todo_id
from core.domain.ports.todo_repository import TodoRepository
from infrastructure.peewee.model.models import TodoModel
from infrastructure.peewee.session.db import db, ensure_schema

logger = logging.getLogger(__name__)


def _naive_utc(value: datetime) -> datetime:
    # SQLite guarda datetimes sin zona; se almacenan siempre en UTC.
    return as_utc(value).replace(tzinfo=None)


def _to_domain(row: TodoModel) -> Todo:
    return Todo(
        id=row.id,
        task=row.task,
        due_date=as_utc(row.due_date),
        status=TodoStatus(row.status),
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class PeeweeTodoRepository(TodoRepository):
    def __init__(self):
        self._schema_ready = False

    def _ensure_schema(self) -> None:
        # Tables are created on first data access; there are no migrations for
        # this schema. health() never goes through here.
        if not self._schema_ready:
            ensure_schema(TodoModel)
            self._schema_ready = True

    def list(self) -> List[Todo]:
        self._ensure_schema()
        query = TodoModel.select().order_by(
            TodoModel.due_date.asc(), TodoModel.created_at.desc()
        )
        try:
            return [_to_domain(row) for row in query]
        except DatabaseError as e:
            raise StorageUnavailable("Storage unavailable during list") from e

    def add(self, todo: Todo) -> Todo:
        self._ensure_schema()
        now = datetime.now(timezone.utc)
        saved = replace(todo, id=new_todo_id(), created_at=now, updated_at=now)
        try:
            with db.atomic():
                TodoModel.create(
                    id=saved.id,
                    task=saved.task,
                    due_date=_naive_utc(saved.due_date),
                    status=saved.status.value,
                    created_at=_naive_utc(now),
                    updated_at=_naive_utc(now),
                )
        except DatabaseError as e:
            raise StorageUnavailable("Storage unavailable during insert") from e
        return saved

    def get(self, todo_id: str) -> Todo | None:
        self._ensure_schema()
        try:
            row = TodoModel.get_or_none(TodoModel.id == todo_id)
        except DatabaseError as e:
            raise StorageUnavailable("Storage unavailable during get") from e
        return _to_domain(row) if row is not None else None

    def update(self, todo_id: str, changes: TodoChanges) -> Todo | None:
        self._ensure_schema()
        fields: dict[Any, Any] = {
            TodoModel.updated_at: _naive_utc(datetime.now(timezone.utc))
        }
        if changes.task is not None:
            fields[TodoModel.task] = changes.task
        if changes.due_date is not None:
            fields[TodoModel.due_date] = _naive_utc(changes.due_date)
        if changes.status is not None:
            fields[TodoModel.status] = changes.status.value

        try:
            with db.atomic():
                updated = (
                    TodoModel.update(fields).where(TodoModel.id == todo_id).execute()
                )
                if not updated:
                    return None
                return _to_domain(TodoModel.get_by_id(todo_id))
        except DatabaseError as e:
            raise StorageUnavailable("Storage unavailable during update") from e

    def delete(self, todo_id: str) -> Todo | None:
        self._ensure_schema()
        try:
            with db.atomic():
                row = TodoModel.get_or_none(TodoModel.id == todo_id)
                if row is None:
                    return None
                row.delete_instance()
        except DatabaseError as e:
            raise StorageUnavailable("Storage unavailable during delete") from e
        return _to_domain(row)

    def health(self) -> dict[str, Any]:
        info: dict[str, Any] = {
            "backend": "peewee",
            "status": "Disconnected",
            "database": db.database,
            "collections": [],
        }
        try:
            db.connect(reuse_if_open=True)
            info["collections"] = db.get_tables()
            info["status"] = "Connected"
        except DatabaseError as e:
            logger.warning(f"SQL health check failed: {e}")
        return info
