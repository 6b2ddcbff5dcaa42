import os
from pathlib import Path

DB_PATH = os.environ.get("BOOKSTORE_DB_PATH", str(Path.cwd() / "bookstore.db"))
DATABASE_URL = os.environ.get("BOOKSTORE_DATABASE_URL", f"sqlite+aiosqlite:///{DB_PATH}")
SQL_ECHO = os.environ.get("BOOKSTORE_SQL_ECHO", "").lower() in ("1", "true", "yes")

# Server settings
HOST = os.environ.get("BOOKSTORE_HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8080"))
LOG_LEVEL = os.environ.get("BOOKSTORE_LOG_LEVEL", "INFO").upper()
