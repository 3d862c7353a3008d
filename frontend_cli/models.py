from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

PENDING = "pending"
COMPLETED = "completed"


class RemoteTodo(BaseModel):
    """Tarea tal y como la devuelve la API."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    task: str
    due_date: datetime = Field(alias="dueDate")
    status: str = PENDING
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")

    def flipped_status(self) -> str:
        return COMPLETED if self.status == PENDING else PENDING
