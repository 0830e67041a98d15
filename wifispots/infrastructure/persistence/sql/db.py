# wifispots/infrastructure/persistence/sql/db.py
import logging
import re
from contextlib import contextmanager
from typing import Any, Mapping

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from wifispots.core.errors import StorageError

logger = logging.getLogger(__name__)

SCHEMA_SQL = [
    """
    CREATE TABLE IF NOT EXISTS places (
        id           INTEGER PRIMARY KEY AUTOINCREMENT,
        name         TEXT NOT NULL,
        type         TEXT,
        address      TEXT,
        wifi_quality TEXT,
        work_hours   TEXT,
        description  TEXT,
        photo_path   TEXT,
        contact      TEXT,
        rating       REAL NOT NULL DEFAULT 0.0
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS reviews (
        id         INTEGER PRIMARY KEY AUTOINCREMENT,
        place_id   INTEGER NOT NULL REFERENCES places(id) ON DELETE CASCADE,
        author     TEXT,
        stars      INTEGER NOT NULL CHECK (stars BETWEEN 1 AND 5),
        comment    TEXT,
        created_at TEXT NOT NULL
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS admins (
        id       INTEGER PRIMARY KEY AUTOINCREMENT,
        username TEXT NOT NULL UNIQUE,
        password TEXT NOT NULL
    );
    """,
    "CREATE INDEX IF NOT EXISTS idx_reviews_place ON reviews(place_id, created_at);",
]


@contextmanager
def _storage_errors(sql: str):
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(f"Storage failure on {sql.split()[0]}: {e}")
        raise StorageError(f"Storage failure: {e.__class__.__name__}") from e


def _regexp(pattern: str, value: str | None) -> bool:
    # SQLite evaluates `value REGEXP pattern` as regexp(pattern, value)
    if value is None:
        return False
    return re.search(pattern, value) is not None


def _lower(value: str | None) -> str | None:
    # SQLite's builtin lower() only folds ASCII
    return None if value is None else str(value).lower()


def make_engine(url: str = "sqlite:///wifispots.db") -> Engine:
    engine = create_engine(url, future=True)

    if engine.dialect.name == "sqlite":

        @event.listens_for(engine, "connect")
        def _on_connect(dbapi_conn, _record):
            dbapi_conn.create_function("regexp", 2, _regexp)
            dbapi_conn.create_function("lower", 1, _lower)
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON;")
            cur.close()

        with _storage_errors("CREATE schema"), engine.begin() as conn:
            for stmt in SCHEMA_SQL:
                conn.execute(text(stmt))

    return engine


class SqlDatabase:
    """Data access port over a SQLAlchemy engine. One transaction per call."""

    def __init__(self, engine: Engine):
        self.engine = engine

    @classmethod
    def from_url(cls, url: str) -> "SqlDatabase":
        return cls(make_engine(url))

    def execute_query(self, sql: str, params: Mapping[str, Any] | None = None) -> list[dict]:
        with _storage_errors(sql):
            with self.engine.begin() as conn:
                rows = conn.execute(text(sql), dict(params or {})).mappings().all()
                return [dict(r) for r in rows]

    def execute_scalar(self, sql: str, params: Mapping[str, Any] | None = None) -> Any:
        with _storage_errors(sql):
            with self.engine.begin() as conn:
                return conn.execute(text(sql), dict(params or {})).scalar()

    def execute_command(self, sql: str, params: Mapping[str, Any] | None = None) -> int:
        with _storage_errors(sql):
            with self.engine.begin() as conn:
                return conn.execute(text(sql), dict(params or {})).rowcount

    def execute_insert(self, sql: str, params: Mapping[str, Any] | None = None) -> int:
        with _storage_errors(sql):
            with self.engine.begin() as conn:
                return conn.execute(text(sql), dict(params or {})).lastrowid

    def close(self):
        self.engine.dispose()

