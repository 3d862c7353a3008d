import platform
from datetime import datetime, timezone
from typing import Any

from core.domain.ports.todo_repository import TodoRepository


class CheckHealthUseCase:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self) -> dict[str, Any]:
        return {
            "status": "OK",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "storage": self._repository.health(),
            "environment": {
                "pythonVersion": platform.python_version(),
                "platform": platform.system().lower(),
            },
        }
