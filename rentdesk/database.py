"""
Storage client - one engine per process, opened at startup and disposed at shutdown.
"""
import logging
from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from rentdesk.db.base import Base

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Explicitly constructed storage handle.

    Owns the SQLAlchemy engine and session factory. Create it once, call
    open() before serving requests and close() when the process stops.
    """

    def __init__(self, url: str, enforce_foreign_keys: bool = True, echo: bool = False):
        self.url = url
        self.enforce_foreign_keys = enforce_foreign_keys
        self.echo = echo
        self.engine: Optional[Engine] = None
        self.SessionLocal: Optional[sessionmaker] = None

    @property
    def is_sqlite(self) -> bool:
        return self.url.lower().startswith("sqlite")

    def open(self) -> "Database":
        if self.engine is not None:
            return self

        connect_args = {"check_same_thread": False} if self.is_sqlite else {"connect_timeout": 10}
        self.engine = create_engine(
            self.url,
            connect_args=connect_args,
            echo=self.echo,
            pool_pre_ping=True,
        )
        if self.is_sqlite and self.enforce_foreign_keys:
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )
        logger.info(f"[DB] Opened storage: {self.safe_url}")
        return self

    def close(self) -> None:
        if self.engine is None:
            return
        self.engine.dispose()
        self.engine = None
        self.SessionLocal = None
        logger.info("[DB] Storage connections closed")

    @property
    def safe_url(self) -> str:
        """URL with credentials stripped, for logs."""
        if "@" in self.url:
            scheme = self.url.split("://", 1)[0]
            return f"{scheme}://***@{self.url.split('@', 1)[1]}"
        return self.url

    def _require_open(self) -> sessionmaker:
        if self.SessionLocal is None:
            raise RuntimeError("Database is not open")
        return self.SessionLocal

    def session(self) -> Iterator[Session]:
        """Yield a session and always close it."""
        db = self._require_open()()
        try:
            yield db
        finally:
            db.close()

    def init_schema(self) -> None:
        """Create every table that does not exist yet. No migrations, no versioning."""
        # Register all models with Base before create_all
        import rentdesk.models  # noqa: F401

        self._require_open()
        Base.metadata.create_all(bind=self.engine)
        logger.info("[DB] Schema initialized")

    def seed_if_empty(self) -> bool:
        from rentdesk.services.seed_service import seed_if_empty

        db = self._require_open()()
        try:
            return seed_if_empty(db)
        finally:
            db.close()

    def test_connection(self) -> bool:
        """Run SELECT 1 - False when storage is unreachable."""
        if self.engine is None:
            return False
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1")).fetchone()
            return True
        except Exception as e:
            logger.warning(f"[DB] Connection test failed: {e}")
            return False


def get_db(request: Request) -> Iterator[Session]:
    """Dependency for getting a database session from the app's storage client."""
    database: Database = request.app.state.database
    yield from database.session()
