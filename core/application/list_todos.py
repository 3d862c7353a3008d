from core.domain.models.todo import Todo
from core.domain.ports.todo_repository import TodoRepository


class ListTodosUseCase:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self) -> list[Todo]:
        return self._repository.list()
