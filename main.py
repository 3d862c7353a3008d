"""
Arranque de la API de tareas con uvicorn.

Variables de entorno (se lee también `.env`):
    HOST, PORT       dirección de escucha (127.0.0.1:5000)
    RELOAD           recarga automática en desarrollo (true)
    LOG_LEVEL        nivel de uvicorn y de la aplicación (info)
"""
import os
from typing import Any

import uvicorn
from dotenv import load_dotenv

load_dotenv()

APP = "backend_fastapi.main:app"


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def server_options() -> dict[str, Any]:
    return {
        "host": os.getenv("HOST", "127.0.0.1"),
        "port": int(os.getenv("PORT", "5000")),
        "reload": _as_bool(os.getenv("RELOAD", "true")),
        "log_level": os.getenv("LOG_LEVEL", "info").lower(),
    }


def run() -> None:
    options = server_options()
    base_url = f"http://{options['host']}:{options['port']}"

    print(f"Todo List API at {base_url} (storage: {os.getenv('ORM', 'mongo')}, reload: {options['reload']})")
    print(f"Health check available at {base_url}/health")

    uvicorn.run(APP, **options)


if __name__ == "__main__":
    run()
