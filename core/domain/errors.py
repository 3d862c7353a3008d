from typing import Any


class TodoError(Exception):
    """
    Error base del dominio.

    Cada subclase declara el código HTTP con el que la capa web la expone.
    """

    status_code = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(TodoError):
    status_code = 400


class InvalidIdentifier(TodoError):
    status_code = 400

    def __init__(self, message: str = "Invalid todo ID format") -> None:
        super().__init__(message)


class NotFound(TodoError):
    status_code = 404

    def __init__(self, message: str = "Todo not found") -> None:
        super().__init__(message)


class StorageUnavailable(TodoError):
    status_code = 500
