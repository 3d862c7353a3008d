import logging
from datetime import date
from typing import Any, Callable, TypeVar

import httpx

from frontend_cli.errors import NetworkError, NotFoundError, RemoteError
from frontend_cli.models import RemoteTodo

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TodoStateManager:
    """
    Espejo en memoria de la colección de tareas del servidor.

    La caché es solo una copia de la última respuesta: cada operación que
    muta el servidor la ajusta con el registro devuelto. Un fallo nunca
    modifica la caché y no se reintenta.
    """

    def __init__(self, base_url: str, client: httpx.AsyncClient | None = None) -> None:
        self._todos_url = base_url.rstrip("/") + "/todos"
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient()
        self._todos: list[RemoteTodo] = []

    async def __aenter__(self) -> "TodoStateManager":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def snapshot(self) -> tuple[RemoteTodo, ...]:
        return tuple(self._todos)

    def find(self, todo_id: str) -> RemoteTodo | None:
        return next((t for t in self._todos if t.id == todo_id), None)

    async def refresh(self) -> tuple[RemoteTodo, ...]:
        self._todos = await self._request(
            "GET", self._todos_url, "Failed to fetch todos", _parse_todo_list
        )
        return self.snapshot()

    async def create(self, task: str, due_date: str | date) -> RemoteTodo:
        todo = await self._request(
            "POST",
            self._todos_url,
            "Failed to add todo",
            RemoteTodo.model_validate,
            json={"task": task, "dueDate": _date_param(due_date)},
        )
        self._todos.append(todo)
        return todo

    async def update(
        self,
        todo_id: str,
        *,
        task: str | None = None,
        due_date: str | date | None = None,
        status: str | None = None,
    ) -> RemoteTodo:
        """Envía solo los campos indicados; no exige que el id esté en caché."""
        body: dict[str, Any] = {}
        if task is not None:
            body["task"] = task
        if due_date is not None:
            body["dueDate"] = _date_param(due_date)
        if status is not None:
            body["status"] = status

        updated = await self._request(
            "PUT",
            f"{self._todos_url}/{todo_id}",
            "Failed to update todo",
            RemoteTodo.model_validate,
            json=body,
        )
        self._todos = [updated if t.id == todo_id else t for t in self._todos]
        return updated

    async def toggle_status(self, todo_id: str) -> RemoteTodo:
        todo = self.find(todo_id)
        if todo is None:
            raise NotFoundError("Todo not found")
        return await self.update(todo_id, status=todo.flipped_status())

    async def delete(self, todo_id: str) -> RemoteTodo:
        deleted = await self._request(
            "DELETE",
            f"{self._todos_url}/{todo_id}",
            "Failed to delete todo",
            _parse_deleted_todo,
        )
        self._todos = [t for t in self._todos if t.id != todo_id]
        return deleted

    async def _request(
        self,
        method: str,
        url: str,
        failure_message: str,
        parse: Callable[[Any], T],
        json: dict[str, Any] | None = None,
    ) -> T:
        """
        Ejecuta la petición y convierte el cuerpo con `parse`.

        Un cuerpo que no es JSON o que no tiene la forma esperada se trata
        como RemoteError, igual que un estado de error.
        """
        try:
            response = await self._client.request(
                method, url, json=json, headers={"Accept": "application/json"}
            )
        except httpx.RequestError as e:
            logger.error(f"{method} {url} failed: {e!r}")
            raise NetworkError("Network error or server is not running") from e

        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = None
            if not isinstance(body, dict):
                body = {}
            raise RemoteError(
                response.status_code,
                body.get("message") or failure_message,
                body.get("details"),
            )
        try:
            return parse(response.json())
        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"{method} {url}: unexpected response body: {e}")
            raise RemoteError(response.status_code, failure_message) from e


def _parse_todo_list(payload: Any) -> list[RemoteTodo]:
    if not isinstance(payload, list):
        raise TypeError(f"expected a list of todos, got {type(payload).__name__}")
    return [RemoteTodo.model_validate(item) for item in payload]


def _parse_deleted_todo(payload: Any) -> RemoteTodo:
    return RemoteTodo.model_validate(payload["deletedTodo"])


def _date_param(value: str | date) -> str:
    return value.isoformat() if isinstance(value, date) else value
