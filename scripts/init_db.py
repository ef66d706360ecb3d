from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from employee_registry.database.bootstrap import create_schema, list_tables
from employee_registry.database.connection import DatabaseConnection, DBConfig


def main() -> None:
    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO)

    settings = importlib.import_module(get_settings_module())
    config = DBConfig.from_dict(dict(settings.DB_CONFIG))

    conn = DatabaseConnection(config)
    try:
        create_schema(conn)
        tables = list_tables(conn)
    finally:
        conn.dispose()
    print(f"OK: Created schema -> {config.describe()} (tables={len(tables)})")


if __name__ == "__main__":
    main()
