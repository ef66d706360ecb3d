from __future__ import annotations

import uuid
from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): callers depend on this interface, not on a concrete database.
    Not-found is reported through return values (``None`` / ``False``), never raised.
    """

    def add(self, employee: Employee) -> uuid.UUID:
        raise NotImplementedError

    def get(self, employee_id: uuid.UUID) -> Optional[Employee]:
        raise NotImplementedError

    def list(self) -> Sequence[Employee]:
        raise NotImplementedError

    def update(self, employee: Employee) -> bool:
        raise NotImplementedError

    def delete(self, employee_id: uuid.UUID) -> bool:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
