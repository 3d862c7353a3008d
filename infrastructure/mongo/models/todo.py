from datetime import datetime

from bson import ObjectId
from pydantic import BaseModel, Field

from core.domain.models.todo import Todo, TodoStatus, as_utc


class TodoMongo(BaseModel):
    """
    Modelo de Todo para MongoDB.
    Representa cómo se almacena la tarea en la colección `todos`.
    """

    id: ObjectId = Field(alias="_id")
    task: str
    due_date: datetime = Field(alias="dueDate")
    status: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = {"populate_by_name": True, "arbitrary_types_allowed": True}

    def to_domain(self) -> Todo:
        """
        Convierte el documento de MongoDB al modelo de dominio.

        Retorna:
            Todo: La entidad de dominio.
        """
        return Todo(
            id=str(self.id),
            task=self.task,
            due_date=as_utc(self.due_date),
            status=TodoStatus(self.status),
            created_at=as_utc(self.created_at),
            updated_at=as_utc(self.updated_at),
        )

    @classmethod
    def from_domain(cls, todo: Todo) -> "TodoMongo":
        """
        Crea una instancia de TodoMongo a partir de una entidad de dominio
        ya persistible (con id y marcas de tiempo).

        Argumentos:
            todo (Todo): La entidad de dominio.

        Retorna:
            TodoMongo: El documento de MongoDB.
        """
        return cls(
            id=ObjectId(todo.id),
            task=todo.task,
            due_date=todo.due_date,
            status=todo.status.value,
            created_at=todo.created_at,
            updated_at=todo.updated_at,
        )
