import os

from core.application.check_health import CheckHealthUseCase
from core.application.create_todo import CreateTodoUseCase
from core.application.delete_todo import DeleteTodoUseCase
from core.application.edit_todo import EditTodoUseCase
from core.application.list_todos import ListTodosUseCase
from core.domain.ports.todo_repository import TodoRepository
from infrastructure.mongo.repository.todo_repository import MongoTodoRepository
from infrastructure.peewee.repository.todo_repository import PeeweeTodoRepository


def get_todo_repository() -> TodoRepository:
    orm = os.getenv("ORM", "mongo").lower()

    if orm == "peewee":
        return PeeweeTodoRepository()
    # Default to MongoDB
    return MongoTodoRepository()


def get_list_todos_use_case() -> ListTodosUseCase:
    return ListTodosUseCase(repository=get_todo_repository())


def get_create_todo_use_case() -> CreateTodoUseCase:
    return CreateTodoUseCase(repository=get_todo_repository())


def get_edit_todo_use_case() -> EditTodoUseCase:
    return EditTodoUseCase(repository=get_todo_repository())


def get_delete_todo_use_case() -> DeleteTodoUseCase:
    return DeleteTodoUseCase(repository=get_todo_repository())


def get_check_health_use_case() -> CheckHealthUseCase:
    return CheckHealthUseCase(repository=get_todo_repository())
