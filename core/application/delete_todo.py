import logging
from dataclasses import dataclass

from core.domain.errors import InvalidIdentifier, NotFound
from core.domain.models.todo import Todo, is_valid_todo_id
from core.domain.ports.todo_repository import TodoRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DeleteTodoCommand:
    id: str


class DeleteTodoUseCase:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, cmd: DeleteTodoCommand) -> Todo:
        """Elimina la tarea y devuelve su contenido previo."""
        if not is_valid_todo_id(cmd.id):
            raise InvalidIdentifier()

        deleted = self._repository.delete(cmd.id)
        if deleted is None:
            raise NotFound()

        logger.info(f"Todo deleted: {cmd.id}")
        return deleted
