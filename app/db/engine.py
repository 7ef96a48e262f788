# app/db/engine.py

from functools import lru_cache

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from app.config import DATABASE_URL, DB_ECHO


def _enable_sqlite_foreign_keys(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, **kwargs) -> Engine:
    engine = create_engine(url, echo=DB_ECHO, future=True, **kwargs)

    # SQLite ignores FOREIGN KEY clauses unless asked per connection
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    return engine


@lru_cache
def get_engine() -> Engine:
    return build_engine(DATABASE_URL)
