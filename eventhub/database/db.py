import logging
import threading
from concurrent.futures import Future
from contextlib import contextmanager
from typing import Any, Iterator

from fastapi import Request
from sqlalchemy import Engine, create_engine, make_url, text
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from eventhub.services.errors import DatabaseConnectionError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class Database:
    """Lazily connected, process-wide database handle.

    The first call to ``connect`` opens the engine. Calls that arrive while that
    attempt is still running wait on it and get the same engine, or the same
    error. A failed attempt is forgotten so the next call starts over.
    """

    def __init__(self, url: str, **engine_options: Any) -> None:
        self.url = url
        self._engine_options = engine_options
        self._lock = threading.Lock()
        self._pending: Future[Engine] | None = None
        self._engine: Engine | None = None
        self._sessionmaker = sessionmaker(autoflush=False, expire_on_commit=False)

    @property
    def safe_url(self) -> str:
        return make_url(self.url).render_as_string(hide_password=True)

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    def connect(self) -> Engine:
        if self._engine is not None:
            return self._engine

        with self._lock:
            if self._engine is not None:
                return self._engine
            pending = self._pending
            owner = pending is None
            if owner:
                pending = self._pending = Future()

        if not owner:
            return pending.result()

        try:
            engine = self._open()
        except Exception as exc:
            with self._lock:
                self._pending = None
            pending.set_exception(exc)
            raise

        with self._lock:
            self._engine = engine
            self._pending = None
        pending.set_result(engine)
        return engine

    def _open(self) -> Engine:
        # Import models so that they register with Base.metadata
        from eventhub.models import bookings, events  # noqa: F401

        logger.info("Connecting to database %s", self.safe_url)
        try:
            engine = create_engine(self.url, **self._engine_options)
        except Exception as exc:
            logger.error("Invalid database configuration for %s: %s", self.safe_url, exc)
            raise DatabaseConnectionError("Could not configure the database engine.") from exc
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            # Create all tables (in production, use migrations such as Alembic)
            Base.metadata.create_all(bind=engine)
        except Exception as exc:
            engine.dispose()
            logger.error("Database connection to %s failed: %s", self.safe_url, exc)
            raise DatabaseConnectionError("Could not connect to the database.") from exc
        logger.info("Connected to database %s", self.safe_url)
        return engine

    @contextmanager
    def session(self) -> Iterator[Session]:
        # Bind to the engine this call got, even if dispose() runs meanwhile
        db = self._sessionmaker(bind=self.connect())
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        with self._lock:
            engine, self._engine = self._engine, None
        if engine is not None:
            engine.dispose()
            logger.info("Disposed database engine for %s", self.safe_url)


def get_database(request: Request) -> Database:
    return request.app.state.database
