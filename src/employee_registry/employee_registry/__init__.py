"""Employee Registry package.

A single Employee record persisted through SQLAlchemy, organized like a feature
module (model / repository interface / SQLAlchemy repository) with explicit
wiring in ``container``.
"""
from __future__ import annotations

from .container import Container, build_container
from .core.exceptions import ConstraintViolation, DomainError, StorageError, ValidationError
from .employees.model import Employee
from .employees.repository import EmployeeRepository
from .employees.sqlalchemy_employee_repository import SQLAlchemyEmployeeRepository

__all__ = [
    "ConstraintViolation",
    "Container",
    "DomainError",
    "Employee",
    "EmployeeRepository",
    "SQLAlchemyEmployeeRepository",
    "StorageError",
    "ValidationError",
    "build_container",
]
