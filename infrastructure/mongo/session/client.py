import logging
import os
from typing import Any

from pymongo import MongoClient
from pymongo.database import Database

logger = logging.getLogger(__name__)

_client: MongoClient[Any] | None = None


def get_client() -> MongoClient[Any]:
    """
    Obtiene el cliente de MongoDB (Singleton).

    El cliente conecta de forma perezosa: crearlo no abre ninguna conexión.
    """
    global _client
    if _client is None:
        mongo_uri = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        timeout_ms = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))
        _client = MongoClient(
            mongo_uri,
            tz_aware=True,
            serverSelectionTimeoutMS=timeout_ms,
        )
    return _client


def get_db() -> Database[Any]:
    """
    Obtiene la base de datos de MongoDB.

    Retorna:
        Database: La instancia de la base de datos de MongoDB.
    """
    client = get_client()
    db_name = os.getenv("MONGO_DB_NAME", "todo_list")
    return client[db_name]


def close_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.info("MongoDB connection closed.")
