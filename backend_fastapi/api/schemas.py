from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from core.domain.models.todo import Todo


class TodoCreateRequest(BaseModel):
    """Cuerpo de POST /todos. La validación de presencia la hace el caso de uso."""

    model_config = ConfigDict(populate_by_name=True)

    task: str | None = None
    due_date: str | None = Field(default=None, alias="dueDate")


class TodoUpdateRequest(BaseModel):
    """Cuerpo de PUT /todos/{id}: solo se aplican los campos enviados."""

    model_config = ConfigDict(populate_by_name=True)

    task: str | None = None
    due_date: str | None = Field(default=None, alias="dueDate")
    status: str | None = None


class TodoResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    task: str
    due_date: datetime = Field(alias="dueDate")
    status: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_domain(cls, todo: Todo) -> "TodoResponse":
        return cls(
            id=todo.id,
            task=todo.task,
            due_date=todo.due_date,
            status=todo.status.value,
            created_at=todo.created_at,
            updated_at=todo.updated_at,
        )


class DeleteTodoResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    deleted_todo: TodoResponse = Field(alias="deletedTodo")


class ErrorResponse(BaseModel):
    message: str
    details: dict[str, Any] | None = None
