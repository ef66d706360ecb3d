from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable


@dataclass(frozen=True)
class ConstraintViolation:
    """A single field-level validation failure."""

    field: str
    invalid_value: Any
    message: str

    def __str__(self) -> str:
        return f"- Property: {self.field}, Invalid Value: {self.invalid_value!r}, Error Message: {self.message}"


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when an employee violates one or more field constraints.

    The whole write is rejected: nothing is persisted.
    """

    def __init__(self, violations: Iterable[ConstraintViolation]):
        self.violations = tuple(violations)
        lines = ["Validation error(s):", *(str(v) for v in self.violations)]
        super().__init__("\n".join(lines))

    @property
    def fields(self) -> set[str]:
        return {v.field for v in self.violations}


class StorageError(DomainError):
    """Raised when the underlying store fails; the transaction was rolled back."""
