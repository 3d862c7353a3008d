from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from enum import Enum

from bson import ObjectId

from core.domain.errors import ValidationError


class TodoStatus(Enum):
    PENDING = "pending"
    COMPLETED = "completed"

    def toggled(self) -> "TodoStatus":
        if self is TodoStatus.PENDING:
            return TodoStatus.COMPLETED
        return TodoStatus.PENDING


@dataclass(slots=True)
class Todo:
    task: str
    due_date: datetime
    status: TodoStatus = TodoStatus.PENDING
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(slots=True)
class TodoChanges:
    """
    Actualización parcial de una tarea.

    Cada campo en None significa "no enviado": solo se modifican los campos
    presentes.
    """

    task: str | None = None
    due_date: datetime | None = None
    status: TodoStatus | None = None

    def is_empty(self) -> bool:
        return self.task is None and self.due_date is None and self.status is None


def new_todo_id() -> str:
    return str(ObjectId())


def is_valid_todo_id(value: object) -> bool:
    return isinstance(value, str) and ObjectId.is_valid(value)


def as_utc(value: datetime) -> datetime:
    # Los drivers devuelven datetimes naive en UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_due_date(value: object) -> datetime:
    """
    Convierte la fecha límite recibida en un datetime UTC.

    Acepta cadenas ISO 8601 de fecha ("2025-01-10") o de fecha y hora
    ("2025-01-10T08:00:00Z"), y objetos date/datetime.

    Raises:
        ValidationError: si el valor no representa una fecha válida.
    """
    if isinstance(value, datetime):
        return as_utc(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if isinstance(value, str):
        try:
            return as_utc(datetime.fromisoformat(value.strip()))
        except ValueError:
            pass
    raise ValidationError(
        "Invalid due date",
        details={"dueDate": "Due date must be a valid date"},
    )


def parse_status(value: object) -> TodoStatus:
    try:
        return TodoStatus(value)
    except ValueError:
        raise ValidationError(
            "Invalid status value",
            details={"status": f"Status must be one of {[s.value for s in TodoStatus]}"},
        ) from None
