from typing import Any


class ClientError(Exception):
    """Error base del cliente; `str(error)` es apto para mostrar al usuario."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NetworkError(ClientError):
    """El transporte falló: no hubo respuesta del servidor."""


class RemoteError(ClientError):
    """El servidor respondió con un estado de error."""

    def __init__(
        self,
        status_code: int,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class NotFoundError(ClientError):
    """La tarea no está en la caché local."""
