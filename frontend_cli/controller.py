import logging
from dataclasses import dataclass

from frontend_cli.commands import (
    AddTodo,
    Command,
    DeleteTodo,
    EditTodo,
    Refresh,
    ToggleTodo,
)
from frontend_cli.errors import ClientError
from frontend_cli.models import RemoteTodo
from frontend_cli.state_manager import TodoStateManager

logger = logging.getLogger(__name__)

SUCCESS = "success"
ERROR = "error"


@dataclass(frozen=True, slots=True)
class Notice:
    message: str
    level: str = SUCCESS


@dataclass(frozen=True, slots=True)
class ViewState:
    todos: tuple[RemoteTodo, ...] = ()
    notice: Notice | None = None


class TodoController:
    """
    Traduce comandos de la interfaz en llamadas al TodoStateManager.

    Tras cada mutación vuelve a pedir la lista al servidor. Todo fallo se
    convierte en un Notice de error visible; nada se descarta en silencio.
    """

    def __init__(self, manager: TodoStateManager) -> None:
        self._manager = manager
        self._handlers = {
            Refresh: self._refresh,
            AddTodo: self._add,
            EditTodo: self._edit,
            ToggleTodo: self._toggle,
            DeleteTodo: self._delete,
        }

    async def dispatch(self, command: Command) -> ViewState:
        handler = self._handlers[type(command)]
        notice = await handler(command)
        return ViewState(todos=self._manager.snapshot(), notice=notice)

    async def _refresh(self, command: Refresh) -> Notice | None:
        try:
            await self._manager.refresh()
        except ClientError as e:
            return self._failure("Failed to fetch tasks", e)
        return None

    async def _add(self, command: AddTodo) -> Notice | None:
        task = command.task.strip()
        if not task or not command.due_date:
            return Notice("Please enter both task and due date", ERROR)
        try:
            await self._manager.create(task, command.due_date)
            await self._manager.refresh()
        except ClientError as e:
            return self._failure("Failed to add task", e)
        return Notice("Task added successfully!")

    async def _edit(self, command: EditTodo) -> Notice | None:
        task = command.task.strip()
        if not task or not command.due_date:
            return Notice("Please enter both task and due date", ERROR)
        try:
            await self._manager.update(command.id, task=task, due_date=command.due_date)
            await self._manager.refresh()
        except ClientError as e:
            return self._failure("Failed to update task", e)
        return Notice("Task updated successfully!")

    async def _toggle(self, command: ToggleTodo) -> Notice | None:
        try:
            await self._manager.toggle_status(command.id)
            await self._manager.refresh()
        except ClientError as e:
            return self._failure("Failed to toggle status", e)
        return None

    async def _delete(self, command: DeleteTodo) -> Notice | None:
        try:
            await self._manager.delete(command.id)
            await self._manager.refresh()
        except ClientError as e:
            return self._failure("Failed to delete task", e)
        return Notice("Task deleted successfully")

    @staticmethod
    def _failure(action: str, error: ClientError) -> Notice:
        logger.warning(f"{action}: {error}")
        return Notice(f"{action}: {error}", ERROR)
