from __future__ import annotations

import logging
import uuid
from datetime import datetime, timedelta
from typing import Callable, Optional, Sequence, Union

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..common.converters import decode_currency, decode_locale, encode_locale
from ..common.datetime_utils import from_storage, now_utc, to_display, to_storage
from ..common.validators import EmployeeConstraints, validate_employee
from ..core.constants import EMAIL_UNIQUE_CONSTRAINT, EMPLOYEES_TABLE
from ..core.exceptions import ConstraintViolation, StorageError, ValidationError
from ..database.connection import DatabaseConnection
from ..database.orm_base import transaction
from .model import Employee
from .record import EmployeeRecord
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_DUPLICATE_EMAIL = "Email address is already in use"


def _as_uuid(value: Union[uuid.UUID, str]) -> uuid.UUID:
    return value if isinstance(value, uuid.UUID) else uuid.UUID(str(value))


def _copy_fields(record: EmployeeRecord, valid: EmployeeConstraints) -> None:
    record.name = valid.name
    record.position = valid.position
    record.email = valid.email
    record.salary = valid.salary
    record.currency = valid.currency
    record.locale = encode_locale(valid.locale)


def _record_to_employee(record: EmployeeRecord) -> Employee:
    """ORM row -> domain object, timestamps shown in the display zone."""
    return Employee(
        employee_id=record.employee_id,
        name=record.name,
        position=record.position,
        email=record.email,
        salary=record.salary,
        currency=decode_currency(record.currency),
        locale=decode_locale(record.locale),
        created_at=to_display(from_storage(record.created_at)),
        modified_at=to_display(from_storage(record.modified_at)),
    )


def _log_violations(exc: ValidationError, action: str) -> None:
    logger.warning("Validation error(s) during %s:", action)
    for violation in exc.violations:
        logger.warning("%s", violation)


class SQLAlchemyEmployeeRepository(EmployeeRepository):
    """EmployeeRepository backed by a SQLAlchemy ORM session per operation.

    Timestamps are set here, right before each write, in the server reference
    zone (UTC). Reads convert them to the process's local zone.
    """

    def __init__(self, conn_factory: DatabaseConnection, *, clock: Callable[[], datetime] = now_utc):
        self._conn_factory = conn_factory
        self._clock = clock

    def add(self, employee: Employee) -> uuid.UUID:
        try:
            with transaction(self._conn_factory) as session:
                valid = validate_employee(employee)
                if session.get(EmployeeRecord, employee.employee_id) is not None:
                    raise StorageError(f"Employee {employee.employee_id} already exists")
                self._ensure_email_free(session, employee.employee_id, valid.email)

                now = self._clock()
                record = EmployeeRecord(
                    employee_id=employee.employee_id,
                    created_at=to_storage(now),
                    modified_at=to_storage(now),
                )
                _copy_fields(record, valid)
                session.add(record)
                self._flush(session, valid.email)
        except ValidationError as exc:
            _log_violations(exc, "insert")
            raise

        logger.info("Added employee %s (%s)", employee.employee_id, employee.name)
        return employee.employee_id

    def get(self, employee_id: Union[uuid.UUID, str]) -> Optional[Employee]:
        with transaction(self._conn_factory) as session:
            record = session.get(EmployeeRecord, _as_uuid(employee_id))
            if record is None:
                return None
            return _record_to_employee(record)

    def list(self) -> Sequence[Employee]:
        with transaction(self._conn_factory) as session:
            records = session.scalars(select(EmployeeRecord)).all()
            return [_record_to_employee(r) for r in records]

    def count(self) -> int:
        with transaction(self._conn_factory) as session:
            return int(session.scalar(select(func.count()).select_from(EmployeeRecord)) or 0)

    def update(self, employee: Employee) -> bool:
        try:
            with transaction(self._conn_factory) as session:
                valid = validate_employee(employee)

                record = session.get(EmployeeRecord, employee.employee_id)
                if record is None:
                    session.rollback()
                    logger.warning("Employee %s not found for update.", employee.employee_id)
                    return False

                self._ensure_email_free(session, employee.employee_id, valid.email)
                _copy_fields(record, valid)
                record.modified_at = to_storage(self._next_modified(from_storage(record.modified_at)))
                self._flush(session, valid.email)
        except ValidationError as exc:
            _log_violations(exc, "update")
            raise

        logger.info("Updated employee %s (%s)", employee.employee_id, employee.name)
        return True

    def delete(self, employee_id: Union[uuid.UUID, str]) -> bool:
        employee_id = _as_uuid(employee_id)
        with transaction(self._conn_factory) as session:
            record = session.get(EmployeeRecord, employee_id)
            if record is None:
                session.rollback()
                logger.warning("Employee %s not found for deletion.", employee_id)
                return False
            session.delete(record)

        logger.info("Deleted employee %s", employee_id)
        return True

    def _next_modified(self, previous: Optional[datetime]) -> datetime:
        # modified_at must move strictly forward even on coarse clocks
        now = self._clock()
        if previous is not None and now <= previous:
            now = previous + timedelta(microseconds=1)
        return now

    @staticmethod
    def _ensure_email_free(session: Session, employee_id: uuid.UUID, email: str) -> None:
        stmt = select(EmployeeRecord.employee_id).where(
            func.lower(EmployeeRecord.email) == email.lower(),
            EmployeeRecord.employee_id != employee_id,
        )
        if session.scalars(stmt).first() is not None:
            raise ValidationError([ConstraintViolation("email", email, _DUPLICATE_EMAIL)])

    @staticmethod
    def _flush(session: Session, email: str) -> None:
        try:
            session.flush()
        except IntegrityError as exc:
            # MySQL reports the constraint name, SQLite the table.column pair
            detail = str(exc.orig).lower()
            if EMAIL_UNIQUE_CONSTRAINT in detail or f"{EMPLOYEES_TABLE}.email" in detail:
                raise ValidationError([ConstraintViolation("email", email, _DUPLICATE_EMAIL)]) from exc
            raise

    def __str__(self) -> str:
        lines = ["Employees in the Database:"]
        lines.extend(str(e) for e in self.list())
        return "\n".join(lines) + "\n"
