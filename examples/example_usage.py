"""Example: use the repository directly (no entry point wiring).

Runs against an in-memory SQLite database so it needs no server.
"""

from decimal import Decimal

from employee_registry.common.converters import decode_locale
from employee_registry.container import build_container
from employee_registry.database.bootstrap import create_schema
from employee_registry.employees.model import Employee


def main():
    container = build_container(db_config={"url": "sqlite+pysqlite:///:memory:"})
    create_schema(container.conn)

    repo = container.employees_repo
    employee_id = repo.add(
        Employee(
            name="Ana Souza",
            position="Data Analyst",
            email="ana.souza@example.com",
            salary=Decimal("6200"),
            currency="BRL",
            locale=decode_locale("pt-BR"),
        )
    )
    print(repo.get(employee_id))
    print(repo)


if __name__ == "__main__":
    main()
