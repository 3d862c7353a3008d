import os
import unittest
from datetime import datetime, timedelta, timezone
from unittest import mock

from bson import ObjectId
from peewee import OperationalError

# Use memory database for tests
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from core.domain.errors import StorageUnavailable
from core.domain.models.todo import Todo, TodoChanges, TodoStatus
from infrastructure.peewee.model.models import TodoModel
from infrastructure.peewee.repository.todo_repository import PeeweeTodoRepository
from infrastructure.peewee.session.db import db

DUE = datetime(2025, 1, 10, tzinfo=timezone.utc)


class PeeweeTodoRepositoryTests(unittest.TestCase):
    def setUp(self) -> None:
        # Ensure clean state
        if db.is_closed():
            db.connect()
        db.create_tables([TodoModel], safe=True)
        TodoModel.delete().execute()
        self.repo = PeeweeTodoRepository()

    def tearDown(self) -> None:
        db.drop_tables([TodoModel])
        db.close()

    def test_add_and_get(self) -> None:
        saved = self.repo.add(Todo(task="Tarea Peewee", due_date=DUE))
        loaded = self.repo.get(saved.id)

        self.assertIsNotNone(loaded)
        self.assertEqual(loaded.id, saved.id)
        self.assertEqual(loaded.task, "Tarea Peewee")
        self.assertEqual(loaded.due_date, DUE)
        self.assertEqual(loaded.status, TodoStatus.PENDING)
        self.assertEqual(loaded.created_at, saved.created_at)

    def test_list_orders_by_due_date_then_newest(self) -> None:
        late = self.repo.add(Todo(task="late", due_date=DUE + timedelta(days=3)))
        first = self.repo.add(Todo(task="first", due_date=DUE))
        second = self.repo.add(Todo(task="second", due_date=DUE))
        # createdAt may collide within the same microsecond; force the order.
        TodoModel.update(created_at=datetime(2025, 1, 1)).where(
            TodoModel.id == first.id
        ).execute()

        ids = [t.id for t in self.repo.list()]

        self.assertEqual(ids, [second.id, first.id, late.id])

    def test_update_changes_supplied_fields(self) -> None:
        saved = self.repo.add(Todo(task="a", due_date=DUE))

        updated = self.repo.update(saved.id, TodoChanges(status=TodoStatus.COMPLETED))

        self.assertEqual(updated.status, TodoStatus.COMPLETED)
        self.assertEqual(updated.task, "a")
        self.assertGreaterEqual(updated.updated_at, saved.updated_at)

    def test_update_missing_returns_none(self) -> None:
        self.assertIsNone(self.repo.update(str(ObjectId()), TodoChanges(task="x")))

    def test_delete(self) -> None:
        saved = self.repo.add(Todo(task="Eliminar Peewee", due_date=DUE))

        deleted = self.repo.delete(saved.id)

        self.assertEqual(deleted.id, saved.id)
        self.assertIsNone(self.repo.get(saved.id))
        self.assertIsNone(self.repo.delete(saved.id))

    def test_health(self) -> None:
        info = self.repo.health()

        self.assertEqual(info["backend"], "peewee")
        self.assertEqual(info["status"], "Connected")
        self.assertIn("todos", info["collections"])

    def test_unreachable_database_reports_disconnected(self) -> None:
        with mock.patch.object(db, "connect", side_effect=OperationalError("unreachable")):
            repo = PeeweeTodoRepository()
            info = repo.health()

        self.assertEqual(info["status"], "Disconnected")
        self.assertEqual(info["collections"], [])

    def test_unreachable_database_fails_data_access(self) -> None:
        with mock.patch.object(db, "connect", side_effect=OperationalError("unreachable")):
            repo = PeeweeTodoRepository()
            with self.assertRaises(StorageUnavailable):
                repo.list()


if __name__ == "__main__":
    unittest.main()
