"""DB compatibility helpers (SQLite).

SQLite ignores foreign keys unless every connection turns them on. Without
it, deleting an incident state that an incident still points to would
silently succeed locally while PostgreSQL rejects it. The listener below
makes both backends behave the same.
"""

from __future__ import annotations

import sqlite3

from sqlalchemy import event
from sqlalchemy.engine import Engine


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    if not isinstance(dbapi_connection, sqlite3.Connection):
        return
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys=ON")
    finally:
        cursor.close()
