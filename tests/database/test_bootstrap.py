from __future__ import annotations

import pytest

from employee_registry.database.bootstrap import create_schema, ensure_database_exists, list_tables
from employee_registry.database.connection import DatabaseConnection, DBConfig


@pytest.fixture
def empty_conn():
    conn = DatabaseConnection(DBConfig(url="sqlite+pysqlite:///:memory:"))
    yield conn
    conn.dispose()


def test_fresh_database_has_no_tables(empty_conn):
    assert list_tables(empty_conn) == []


def test_create_schema_creates_employees_table(empty_conn):
    create_schema(empty_conn)
    assert list_tables(empty_conn) == ["employees"]


def test_create_schema_is_idempotent(repo, conn, john):
    repo.add(john)

    create_schema(conn)

    assert list_tables(conn) == ["employees"]
    assert repo.count() == 1


def test_ensure_database_exists_skips_non_mysql_backends(monkeypatch):
    def fail_connect(**kwargs):
        raise AssertionError("mysql connector must not be used for sqlite")

    monkeypatch.setattr("mysql.connector.connect", fail_connect)

    ensure_database_exists(DBConfig(url="sqlite+pysqlite:///:memory:"))


def test_describe_hides_password():
    config = DBConfig(host="db.internal", user="hr_app", password="s3cr@t", database="employee_db")

    described = config.describe()

    assert "s3cr@t" not in described
    assert "hr_app" in described
    assert "db.internal" in described
    assert described.startswith("mysql+mysqlconnector://")
