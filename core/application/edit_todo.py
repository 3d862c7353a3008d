import logging
from dataclasses import dataclass
from typing import Any

from core.domain.errors import InvalidIdentifier, NotFound, ValidationError
from core.domain.models.todo import (
    Todo,
    TodoChanges,
    is_valid_todo_id,
    parse_due_date,
    parse_status,
)
from core.domain.ports.todo_repository import TodoRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EditTodoCommand:
    """Campos en None no se modifican."""

    task: str | None = None
    due_date: Any = None
    status: str | None = None


class EditTodoUseCase:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, todo_id: str, cmd: EditTodoCommand) -> Todo:
        """
        Aplica una actualización parcial a una tarea existente.

        Raises:
            InvalidIdentifier: si el id no tiene formato válido.
            ValidationError: si el estado, la tarea o la fecha no son válidos.
            NotFound: si no existe ninguna tarea con ese id.
        """
        if not is_valid_todo_id(todo_id):
            raise InvalidIdentifier()

        changes = self._build_changes(cmd)
        logger.debug(f"Updating todo {todo_id}: {changes}")

        updated = self._repository.update(todo_id, changes)
        if updated is None:
            logger.info(f"Todo not found: {todo_id}")
            raise NotFound()

        logger.info(f"Todo updated: {todo_id}")
        return updated

    @staticmethod
    def _build_changes(cmd: EditTodoCommand) -> TodoChanges:
        changes = TodoChanges()
        if cmd.status is not None:
            changes.status = parse_status(cmd.status)
        if cmd.task is not None:
            task = cmd.task.strip()
            if not task:
                raise ValidationError(
                    "Task cannot be empty",
                    details={"task": "Task is required"},
                )
            changes.task = task
        if cmd.due_date is not None:
            changes.due_date = parse_due_date(cmd.due_date)
        return changes
