"""ORM mapping for the ``employees`` table.

Timestamps are stored as naive UTC with microsecond precision; currency and
locale are stored as plain strings (see ``common.converters``).
"""
from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import CHAR, DateTime, Numeric, String, UniqueConstraint, Uuid
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import Mapped, mapped_column

from ..core.constants import EMAIL_UNIQUE_CONSTRAINT, EMPLOYEES_TABLE, SALARY_PRECISION, SALARY_SCALE
from ..database.orm_base import Base

_Timestamp = DateTime().with_variant(mysql.DATETIME(fsp=6), "mysql")


class EmployeeRecord(Base):
    __tablename__ = EMPLOYEES_TABLE
    __table_args__ = (UniqueConstraint("email", name=EMAIL_UNIQUE_CONSTRAINT),)

    employee_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    position: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    salary: Mapped[Decimal] = mapped_column(Numeric(SALARY_PRECISION, SALARY_SCALE, asdecimal=True), nullable=False)
    currency: Mapped[str] = mapped_column(CHAR(3), nullable=False)
    locale: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    created_at: Mapped[Optional[datetime]] = mapped_column(_Timestamp, nullable=True)
    modified_at: Mapped[Optional[datetime]] = mapped_column(_Timestamp, nullable=True)

    def __repr__(self) -> str:
        return f"<EmployeeRecord(employee_id={self.employee_id!s}, email={self.email!r})>"
