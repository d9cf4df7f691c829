"""SQLite engine and sessions for the preference store."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from taskboard.preferences.models import Base

if TYPE_CHECKING:
    from sqlalchemy import Engine


def _enable_wal(dbapi_connection: Any, _connection_record: object) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.close()


class Database:
    """Lazily opened SQLite database holding the preferences table."""

    def __init__(self, db_path: str = "taskboard.db") -> None:
        """Initialize database connection.

        Args:
            db_path: Path to SQLite database file. Use ":memory:" for in-memory DB.
        """
        self.db_path = db_path
        self._engine: Engine | None = None
        self._sessions: sessionmaker[Session] | None = None

    @property
    def engine(self) -> Engine:
        """Get or create the database engine.

        ``:memory:`` is pinned to a single shared connection so every session
        sees the same tables. Sessions may be opened from any worker thread.
        """
        if self._engine is None:
            options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
            if self.db_path == ":memory:":
                options["poolclass"] = StaticPool
            else:
                Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
            self._engine = create_engine(f"sqlite:///{self.db_path}", **options)
            event.listen(self._engine, "connect", _enable_wal)
        return self._engine

    def create_tables(self) -> None:
        """Create the preferences table if it doesn't exist."""
        Base.metadata.create_all(self.engine)

    def get_session(self) -> Session:
        """Get a new database session."""
        if self._sessions is None:
            self._sessions = sessionmaker(bind=self.engine, expire_on_commit=False)
        return self._sessions()

    def close(self) -> None:
        """Dispose of the engine. The next session reopens it."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._sessions = None
