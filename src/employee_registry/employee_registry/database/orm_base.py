from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session

from ..core.exceptions import DomainError, StorageError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Shared declarative base for all ORM records."""


@contextmanager
def transaction(conn_factory: DatabaseConnection) -> Iterator[Session]:
    """Session scoped to one unit of work.

    Commits on normal exit, rolls back on any exception. Driver/ORM failures are
    re-raised as StorageError; domain errors propagate unchanged.
    """
    session = conn_factory.connect()
    try:
        try:
            yield session
            session.commit()
        except DomainError:
            session.rollback()
            raise
        except SQLAlchemyError as exc:
            session.rollback()
            logger.error("Database error: %s", exc)
            raise StorageError(str(exc)) from exc
        except Exception:
            session.rollback()
            raise
    finally:
        session.close()
