from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from employee_registry.common.converters import decode_locale
from employee_registry.database.bootstrap import create_schema
from employee_registry.database.connection import DatabaseConnection, DBConfig
from employee_registry.employees.model import Employee
from employee_registry.employees.sqlalchemy_employee_repository import SQLAlchemyEmployeeRepository


class StepClock:
    """Deterministic clock: returns the given instants in order, then repeats the last one."""

    def __init__(self, *instants: datetime):
        self._instants = list(instants)

    def __call__(self) -> datetime:
        if len(self._instants) > 1:
            return self._instants.pop(0)
        return self._instants[0]


@pytest.fixture
def step_clock():
    return StepClock


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 3, 2, 8, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def conn():
    conn = DatabaseConnection(DBConfig(url="sqlite+pysqlite:///:memory:"))
    create_schema(conn)
    yield conn
    conn.dispose()


@pytest.fixture
def repo(conn) -> SQLAlchemyEmployeeRepository:
    return SQLAlchemyEmployeeRepository(conn)


@pytest.fixture
def john() -> Employee:
    return Employee(
        name="John Doe",
        position="Software Engineer",
        email="john.doe@example.com",
        salary=Decimal("75000"),
        currency="USD",
        locale=decode_locale("en-US"),
    )


@pytest.fixture
def maria() -> Employee:
    return Employee(
        name="María García",
        position="Product Manager",
        email="maria.garcia@example.com",
        salary=Decimal("68000.50"),
        currency="EUR",
        locale=decode_locale("es-ES"),
    )
