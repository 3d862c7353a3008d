from abc import ABC, abstractmethod
from typing import Any

from core.domain.models.todo import Todo, TodoChanges


class TodoRepository(ABC):
    """
    Puerto de persistencia de tareas.

    Los adaptadores asignan id y marcas de tiempo, y traducen los errores del
    driver a StorageUnavailable.
    """

    @abstractmethod
    def list(self) -> list[Todo]:
        """Todas las tareas por dueDate ascendente y createdAt descendente."""
        raise NotImplementedError

    @abstractmethod
    def add(self, todo: Todo) -> Todo:
        raise NotImplementedError

    @abstractmethod
    def get(self, todo_id: str) -> Todo | None:
        raise NotImplementedError

    @abstractmethod
    def update(self, todo_id: str, changes: TodoChanges) -> Todo | None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, todo_id: str) -> Todo | None:
        raise NotImplementedError

    @abstractmethod
    def health(self) -> dict[str, Any]:
        raise NotImplementedError
