"""
Database Connection and Setup
"""
from contextlib import contextmanager
from typing import Iterator, Optional
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from fiftyhertz.core.config import settings

# Base class for models
Base = declarative_base()


class Database:
    """
    Owns the engine (connection pool) and the session factory.

    Constructed once and initialised on application startup; released on
    shutdown with close().
    """

    def __init__(self):
        self.engine: Optional[Engine] = None
        self.session_factory: Optional[sessionmaker] = None

    def init(self, url: Optional[str] = None, **engine_kwargs) -> None:
        url = url or settings.database_url
        options = self._engine_options(url)
        options.update(engine_kwargs)
        self.engine = create_engine(url, **options)
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def _engine_options(self, url: str) -> dict:
        backend = make_url(url).get_backend_name()
        if backend == "sqlite":
            return {"connect_args": {"check_same_thread": False}}

        options = {
            "pool_pre_ping": True,
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_timeout": settings.DB_POOL_TIMEOUT,
            "echo": False,
        }
        if backend == "postgresql":
            options["connect_args"] = {
                "connect_timeout": settings.DB_CONNECT_TIMEOUT,
                "options": f"-c statement_timeout={settings.DB_STATEMENT_TIMEOUT_MS}",
            }
        return options

    def create_all(self) -> None:
        """Initialize database (create tables)"""
        # Register every model on Base.metadata
        import fiftyhertz.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        if self.session_factory is None:
            raise RuntimeError("Database not initialized")
        return self.session_factory()

    def close(self) -> None:
        """Cleanup connection pool"""
        if self.engine is not None:
            self.engine.dispose()
        self.engine = None
        self.session_factory = None


database = Database()


def get_db() -> Iterator[Session]:
    """Dependency for getting database session"""
    db = database.session()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def unit_of_work(db: Session) -> Iterator[Session]:
    """
    Run a multi-step sequence as one transaction.

    Commits when the block exits normally, rolls back on any exception.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
