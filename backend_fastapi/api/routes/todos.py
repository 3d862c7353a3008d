from fastapi import APIRouter, Body, Depends, status

from backend_fastapi.api.deps import (
    create_todo_use_case,
    delete_todo_use_case,
    edit_todo_use_case,
    list_todos_use_case,
)
from backend_fastapi.api.schemas import (
    DeleteTodoResponse,
    ErrorResponse,
    TodoCreateRequest,
    TodoResponse,
    TodoUpdateRequest,
)
from core.application.create_todo import CreateTodoCommand, CreateTodoUseCase
from core.application.delete_todo import DeleteTodoCommand, DeleteTodoUseCase
from core.application.edit_todo import EditTodoCommand, EditTodoUseCase
from core.application.list_todos import ListTodosUseCase

router = APIRouter(prefix="/todos", tags=["todos"])

_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get(
    "",
    response_model=list[TodoResponse],
    summary="List all todos",
    responses={500: _ERRORS[500]},
)
def list_todos(
    use_case: ListTodosUseCase = Depends(list_todos_use_case),
) -> list[TodoResponse]:
    """
    Devuelve todas las tareas ordenadas por fecha límite ascendente; a igual
    fecha, primero la creada más recientemente.
    """
    return [TodoResponse.from_domain(todo) for todo in use_case.execute()]


@router.post(
    "",
    response_model=TodoResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a todo",
    responses={400: _ERRORS[400], 500: _ERRORS[500]},
)
def create_todo(
    body: TodoCreateRequest | None = Body(default=None),
    use_case: CreateTodoUseCase = Depends(create_todo_use_case),
) -> TodoResponse:
    """
    Crea una nueva tarea en estado pending.

    - **task**: texto de la tarea (se recortan los espacios).
    - **dueDate**: fecha límite en formato ISO 8601.
    """
    if body is None:
        body = TodoCreateRequest()
    todo = use_case.execute(CreateTodoCommand(task=body.task, due_date=body.due_date))
    return TodoResponse.from_domain(todo)


@router.put(
    "/{todo_id}",
    response_model=TodoResponse,
    summary="Update a todo",
    responses=_ERRORS,
)
def edit_todo(
    todo_id: str,
    body: TodoUpdateRequest | None = Body(default=None),
    use_case: EditTodoUseCase = Depends(edit_todo_use_case),
) -> TodoResponse:
    """
    Modifica los campos enviados de una tarea existente.

    - **todo_id**: ObjectId de la tarea.
    - **task**, **dueDate**, **status**: opcionales; los ausentes no cambian.
    """
    if body is None:
        body = TodoUpdateRequest()
    todo = use_case.execute(
        todo_id,
        EditTodoCommand(task=body.task, due_date=body.due_date, status=body.status),
    )
    return TodoResponse.from_domain(todo)


@router.delete(
    "/{todo_id}",
    response_model=DeleteTodoResponse,
    summary="Delete a todo",
    responses=_ERRORS,
)
def delete_todo(
    todo_id: str,
    use_case: DeleteTodoUseCase = Depends(delete_todo_use_case),
) -> DeleteTodoResponse:
    """
    Elimina la tarea de forma definitiva y devuelve su contenido previo.
    """
    deleted = use_case.execute(DeleteTodoCommand(id=todo_id))
    return DeleteTodoResponse(
        message="Todo deleted successfully",
        deleted_todo=TodoResponse.from_domain(deleted),
    )
