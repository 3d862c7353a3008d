import os

# Use memory database for tests; must be set before the peewee session is imported.
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ.setdefault("ENVIRONMENT", "production")

import pytest
from fastapi.testclient import TestClient

from backend_fastapi.api import deps
from backend_fastapi.main import app
from core.application.check_health import CheckHealthUseCase
from core.application.create_todo import CreateTodoUseCase
from core.application.delete_todo import DeleteTodoUseCase
from core.application.edit_todo import EditTodoUseCase
from core.application.list_todos import ListTodosUseCase
from fakes import InMemoryTodoRepository


def override_repository(repository) -> None:
    """Hace que todas las rutas usen `repository` en vez del contenedor."""
    app.dependency_overrides[deps.list_todos_use_case] = lambda: ListTodosUseCase(repository)
    app.dependency_overrides[deps.create_todo_use_case] = lambda: CreateTodoUseCase(repository)
    app.dependency_overrides[deps.edit_todo_use_case] = lambda: EditTodoUseCase(repository)
    app.dependency_overrides[deps.delete_todo_use_case] = lambda: DeleteTodoUseCase(repository)
    app.dependency_overrides[deps.check_health_use_case] = lambda: CheckHealthUseCase(repository)


@pytest.fixture
def repository():
    repo = InMemoryTodoRepository()
    override_repository(repo)
    yield repo
    app.dependency_overrides.clear()


@pytest.fixture
def client(repository) -> TestClient:
    return TestClient(app)


@pytest.fixture
def use_repository():
    """Permite a un test instalar su propio repositorio."""
    yield override_repository
    app.dependency_overrides.clear()
