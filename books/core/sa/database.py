# books/core/sa/database.py
import logging
from contextlib import contextmanager
from typing import Iterator, Optional
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import NullPool

from books.core.config import get_database_url
from books.core.sa.models import Base

logger = logging.getLogger(__name__)

def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()

class Database:
    def __init__(self, connection_string: Optional[str] = None, **engine_kwargs):
        """Initialize database connection

        Args:
            connection_string: Database URL (e.g., "sqlite:///books.sqlite3").
                              If None, the URL comes from books.core.config
            engine_kwargs: Additional keyword arguments to pass to create_engine
        """
        self.connection_string = connection_string or get_database_url()
        self.is_sqlite = self.connection_string.startswith("sqlite")

        # SQLite-specific settings
        if self.is_sqlite:
            engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
            engine_kwargs.setdefault("poolclass", NullPool)

        self.engine = create_engine(
            self.connection_string,
            **engine_kwargs
        )

        # SQLite only enforces REFERENCES ... CASCADE when asked to, per connection
        if self.is_sqlite:
            event.listen(self.engine, "connect", _enable_foreign_keys)

        self._SessionFactory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )
        logger.debug(f"Using database {self.engine.url!r}")

    @contextmanager
    def get_db(self) -> Iterator[Session]:
        """Context manager for database sessions

        Commits when the block succeeds and rolls back on any exception, so a
        single operation either changes every row it touches or none.
        """
        session: Session = self._SessionFactory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def init_db(self) -> None:
        """Initialize database schema (CREATE TABLE IF NOT EXISTS)"""
        Base.metadata.create_all(self.engine)

    def get_session(self) -> Session:
        return self._SessionFactory()

    def dispose(self) -> None:
        self.engine.dispose()
