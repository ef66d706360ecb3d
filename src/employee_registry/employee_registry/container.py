from __future__ import annotations

from dataclasses import dataclass

from .database.connection import DatabaseConnection, DBConfig
from .employees.sqlalchemy_employee_repository import SQLAlchemyEmployeeRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: SQLAlchemyEmployeeRepository


def build_container(*, db_config: dict) -> Container:
    config = DBConfig.from_dict(db_config)
    conn = DatabaseConnection.get_instance(config)

    employees_repo = SQLAlchemyEmployeeRepository(conn)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
    )
