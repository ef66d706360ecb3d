from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

from babel import Locale

from ..common.converters import encode_locale


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: plain data object (no DB access code). The identifier is generated on
    construction; timestamps stay ``None`` until the repository writes the row.
    Use ``dataclasses.replace`` to derive an updated copy.
    """

    name: str
    position: str
    email: str
    salary: Decimal
    currency: str
    locale: Optional[Union[Locale, str]] = None
    employee_id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None

    def __str__(self) -> str:
        return (
            "Employee {"
            f"employee_id={self.employee_id}"
            f", name='{self.name}'"
            f", position='{self.position}'"
            f", email='{self.email}'"
            f", salary={self.salary}"
            f", currency={self.currency}"
            f", locale={encode_locale(self.locale)}"
            f", created_at={self.created_at}"
            f", modified_at={self.modified_at}"
            "}"
        )
