from core.application.check_health import CheckHealthUseCase
from infrastructure.container import get_check_health_use_case

from core.application.create_todo import CreateTodoUseCase
from infrastructure.container import get_create_todo_use_case

from core.application.edit_todo import EditTodoUseCase
from infrastructure.container import get_edit_todo_use_case

from core.application.delete_todo import DeleteTodoUseCase
from infrastructure.container import get_delete_todo_use_case

from core.application.list_todos import ListTodosUseCase
from infrastructure.container import get_list_todos_use_case


def create_todo_use_case() -> CreateTodoUseCase:
    return get_create_todo_use_case()


def edit_todo_use_case() -> EditTodoUseCase:
    return get_edit_todo_use_case()


def delete_todo_use_case() -> DeleteTodoUseCase:
    return get_delete_todo_use_case()


def list_todos_use_case() -> ListTodosUseCase:
    return get_list_todos_use_case()


def check_health_use_case() -> CheckHealthUseCase:
    return get_check_health_use_case()
