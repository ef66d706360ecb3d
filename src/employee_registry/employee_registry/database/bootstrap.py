from __future__ import annotations

import logging

import mysql.connector
from sqlalchemy import inspect

from .connection import DatabaseConnection, DBConfig
from .orm_base import Base

logger = logging.getLogger(__name__)


def _load_models() -> None:
    # Registers every ORM table on Base.metadata.
    from ..employees import record  # noqa: F401


def ensure_database_exists(config: DBConfig) -> None:
    """CREATE DATABASE IF NOT EXISTS on the MySQL server (no-op for other backends)."""
    url = config.sqlalchemy_url()
    if url.get_backend_name() != "mysql":
        return

    conn = mysql.connector.connect(
        host=url.host,
        port=int(url.port or 3306),
        user=url.username,
        password=url.password,
        use_pure=True,
    )
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{url.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def create_schema(conn_factory: DatabaseConnection) -> None:
    """Create all mapped tables (idempotent: CREATE IF NOT EXISTS)."""
    ensure_database_exists(conn_factory.config)
    _load_models()
    Base.metadata.create_all(conn_factory.engine)
    logger.info("Schema ready on %s", conn_factory.config.describe())


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    return sorted(inspect(conn_factory.engine).get_table_names())
