import os

# In-memory SQLite unless DB_URL points somewhere else
DB_CONFIG = {
    "url": os.getenv("DB_URL", "sqlite+pysqlite:///:memory:"),
    "echo": bool(int(os.getenv("DB_ECHO", "0"))),
}

DEBUG = False
TESTING = True

AUTO_INIT_DB = True
