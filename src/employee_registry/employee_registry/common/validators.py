from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Optional

import pydantic
from babel import Locale
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from ..core.constants import SALARY_PRECISION, SALARY_SCALE
from ..core.exceptions import ConstraintViolation, ValidationError
from .converters import decode_locale, normalize_currency

if TYPE_CHECKING:
    from ..employees.model import Employee


# Friendlier wording for the failures callers hit most often.
_MESSAGES = {
    ("email", "value_error"): "Please provide a valid email address.",
    ("salary", "greater_than_equal"): "Salary must be zero or positive",
    ("salary", "decimal_max_digits"): f"Salary must fit in {SALARY_PRECISION} digits",
    ("salary", "decimal_max_places"): f"Salary must have at most {SALARY_SCALE} decimal places",
    ("name", "string_too_short"): "must not be empty",
    ("position", "string_too_short"): "must not be empty",
}


class EmployeeConstraints(BaseModel):
    """Field constraints checked before any employee row is written.

    The validated (stripped, normalized) values are the ones that get stored.
    """

    model_config = ConfigDict(str_strip_whitespace=True, arbitrary_types_allowed=True)

    name: str = Field(min_length=1)
    position: str = Field(min_length=1)
    email: EmailStr
    salary: Decimal = Field(ge=0, max_digits=SALARY_PRECISION, decimal_places=SALARY_SCALE)
    currency: str
    locale: Optional[Locale] = None

    @field_validator("currency")
    @classmethod
    def _known_currency(cls, value: str) -> str:
        return normalize_currency(value)

    @field_validator("locale", mode="before")
    @classmethod
    def _parse_locale(cls, value):
        if isinstance(value, str):
            return decode_locale(value)
        return value


def _validate(employee: "Employee") -> tuple[Optional[EmployeeConstraints], list[ConstraintViolation]]:
    try:
        valid = EmployeeConstraints.model_validate(
            {
                "name": employee.name,
                "position": employee.position,
                "email": employee.email,
                "salary": employee.salary,
                "currency": employee.currency,
                "locale": employee.locale,
            }
        )
    except pydantic.ValidationError as exc:
        violations = []
        for err in exc.errors():
            field = ".".join(str(part) for part in err["loc"]) or "__root__"
            message = _MESSAGES.get((field, err["type"]), err["msg"])
            violations.append(ConstraintViolation(field, err.get("input"), message))
        return None, violations
    return valid, []


def check_employee(employee: "Employee") -> list[ConstraintViolation]:
    """Return every constraint the employee violates (empty list when valid)."""
    return _validate(employee)[1]


def validate_employee(employee: "Employee") -> EmployeeConstraints:
    """Validated, normalized field values; raises ValidationError otherwise."""
    valid, violations = _validate(employee)
    if violations:
        raise ValidationError(violations)
    return valid
