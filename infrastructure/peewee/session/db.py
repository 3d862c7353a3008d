import logging
import os

from peewee import DatabaseError, Model
from playhouse.db_url import connect

from core.domain.errors import StorageUnavailable

logger = logging.getLogger(__name__)

# SQLite file by default; any playhouse.db_url URL works (postgres://, mysql://).
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///todos.db")

db = connect(DATABASE_URL)


def ensure_schema(*models: type[Model]) -> None:
    """
    Abre la conexión (si no lo está) y crea las tablas que falten.

    Raises:
        StorageUnavailable: si la base de datos no responde.
    """
    try:
        db.connect(reuse_if_open=True)
        db.create_tables(list(models), safe=True)
    except DatabaseError as e:
        logger.error(f"🔴 SQL no disponible: {e}")
        raise StorageUnavailable("Storage unavailable during connect") from e
