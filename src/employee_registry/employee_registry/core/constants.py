"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import timezone

SERVER_TIMEZONE = timezone.utc

EMPLOYEES_TABLE = "employees"
EMAIL_UNIQUE_CONSTRAINT = "uq_employees_email"

DEFAULT_MYSQL_PORT = 3306
DEFAULT_DATABASE_NAME = "employee_db"
DEFAULT_DRIVER = "mysql+mysqlconnector"

SALARY_PRECISION = 19
SALARY_SCALE = 4
