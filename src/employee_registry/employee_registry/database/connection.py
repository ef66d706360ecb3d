from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ..core.constants import DEFAULT_DATABASE_NAME, DEFAULT_DRIVER, DEFAULT_MYSQL_PORT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    host: str = "localhost"
    port: int = DEFAULT_MYSQL_PORT
    user: Optional[str] = None
    password: Optional[str] = None
    database: str = DEFAULT_DATABASE_NAME
    driver: str = DEFAULT_DRIVER
    url: Optional[str] = None  # full SQLAlchemy URL, wins over the fields above
    echo: bool = False

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", DEFAULT_MYSQL_PORT)),
            user=db_config.get("user"),
            password=db_config.get("password"),
            database=str(db_config.get("database", DEFAULT_DATABASE_NAME)),
            driver=str(db_config.get("driver", DEFAULT_DRIVER)),
            url=db_config.get("url") or None,
            echo=bool(db_config.get("echo", False)),
        )

    def sqlalchemy_url(self) -> URL:
        if self.url:
            return make_url(self.url)
        return URL.create(
            self.driver,
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.database,
        )

    def describe(self) -> str:
        """Connection target without the password (safe to log)."""
        return self.sqlalchemy_url().render_as_string(hide_password=True)


def _engine_options(url: URL) -> dict[str, Any]:
    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        # One shared connection, otherwise every session sees its own empty database.
        return {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


class DatabaseConnection:
    """Singleton-like engine + session factory.

    Note: Each repository operation opens a short-lived session from here.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config
        url = config.sqlalchemy_url()
        self._engine: Engine = create_engine(url, echo=config.echo, **_engine_options(url))
        self._sessions = sessionmaker(bind=self._engine, expire_on_commit=False)
        logger.debug("Created engine for %s", config.describe())

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        """Shared connection for ``config``.

        A different config replaces the shared instance. The previous one is left
        open; holders of it dispose it themselves.
        """
        if cls._instance is None or cls._instance.config != config:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    @property
    def config(self) -> DBConfig:
        return self._config

    @property
    def engine(self) -> Engine:
        return self._engine

    def connect(self) -> Session:
        return self._sessions()

    def dispose(self) -> None:
        self._engine.dispose()
        logger.debug("Engine disposed for %s", self._config.describe())
