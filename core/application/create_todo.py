import logging
from dataclasses import dataclass
from typing import Any

from core.domain.errors import ValidationError
from core.domain.models.todo import Todo, TodoStatus, parse_due_date
from core.domain.ports.todo_repository import TodoRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateTodoCommand:
    task: str | None = None
    due_date: Any = None


class CreateTodoUseCase:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, cmd: CreateTodoCommand) -> Todo:
        """
        Crea una tarea pendiente.

        Raises:
            ValidationError: si falta la tarea o la fecha límite, o si la
                fecha no es válida.
        """
        task = cmd.task.strip() if isinstance(cmd.task, str) else ""
        if not task or not cmd.due_date:
            raise ValidationError(
                "Task and due date are required",
                details={
                    "task": None if task else "Task is required",
                    "dueDate": None if cmd.due_date else "Due date is required",
                },
            )

        todo = Todo(
            task=task,
            due_date=parse_due_date(cmd.due_date),
            status=TodoStatus.PENDING,
        )
        saved = self._repository.add(todo)
        logger.info(f"Todo created: {saved.id}")
        return saved
