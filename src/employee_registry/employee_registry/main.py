from __future__ import annotations

import dataclasses
import importlib
import logging
from decimal import Decimal

from dotenv import load_dotenv

from config import get_settings_module

from .common.converters import decode_locale
from .container import Container, build_container
from .core.exceptions import DomainError
from .database.bootstrap import create_schema, list_tables
from .database.connection import DBConfig
from .employees.model import Employee

logger = logging.getLogger(__name__)


def create_container() -> Container:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    db_config = getattr(settings, "DB_CONFIG")
    debug = bool(getattr(settings, "DEBUG", False))

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    # Helpful startup info: which settings and which database we are talking to.
    logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())

    container = build_container(db_config=db_config)

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        create_schema(container.conn)
        logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))

    return container


def run_demo(container: Container) -> None:
    """add -> get -> list -> update -> delete, logging each outcome."""
    repo = container.employees_repo

    new_employee = Employee(
        name="John Doe",
        position="Software Engineer",
        email="john.doe@example.com",
        salary=Decimal("75000"),
        currency="USD",
        locale=decode_locale("en-US"),
    )

    try:
        repo.add(new_employee)
        logger.info("Added Employee: %s", new_employee.name)
    except DomainError as exc:
        logger.error("Error adding employee: %s", exc)

    employee = repo.get(new_employee.employee_id)
    if employee is None:
        logger.info("Employee not found. Skipping update and delete operations.")
        return
    logger.info("Employee Details:\n%s", employee)

    logger.info("Total Employees: %d", len(repo.list()))

    updated = dataclasses.replace(
        employee,
        name="Jane Doe",
        email="jane.doe@example.com",
        position="Senior Software Engineer",
        salary=Decimal("85000"),
    )
    try:
        repo.update(updated)
        logger.info("Updated Employee: %s", updated.name)
    except DomainError as exc:
        logger.error("Error updating employee: %s", exc)

    try:
        if repo.delete(updated.employee_id):
            logger.info("Deleted Employee with ID: %s", updated.employee_id)
    except DomainError as exc:
        logger.error("Error deleting employee: %s", exc)


def main() -> None:
    container = create_container()
    try:
        run_demo(container)
    finally:
        container.conn.dispose()


if __name__ == "__main__":
    main()
