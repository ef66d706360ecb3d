import dataclasses
from decimal import Decimal

import pytest

from employee_registry.employees.model import Employee


def test_new_employee_gets_random_id_and_no_timestamps():
    a = Employee(name="A", position="P", email="a@example.com", salary=Decimal("1"), currency="USD")
    b = Employee(name="A", position="P", email="a@example.com", salary=Decimal("1"), currency="USD")

    assert a.employee_id != b.employee_id
    assert a.employee_id.version == 4
    assert a.created_at is None
    assert a.modified_at is None


def test_identifier_cannot_be_reassigned(john):
    with pytest.raises(dataclasses.FrozenInstanceError):
        john.employee_id = None


def test_replace_keeps_identifier(john):
    assert dataclasses.replace(john, name="Jane Doe").employee_id == john.employee_id


def test_str_renders_every_field(john):
    text = str(john)

    assert text.startswith("Employee {employee_id=")
    assert "name='John Doe'" in text
    assert "email='john.doe@example.com'" in text
    assert "salary=75000" in text
    assert "currency=USD" in text
    assert "locale=en-US" in text
    assert text.endswith("modified_at=None}")
