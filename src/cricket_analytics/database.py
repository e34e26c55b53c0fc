"""Database connection and session management."""

from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from .config import get_settings


# Global engine instance
_engine: Engine | None = None
_SessionLocal: sessionmaker | None = None


def _build_engine(url: str, echo: bool = False) -> Engine:
    if url.startswith("sqlite") and (":memory:" in url or url.rstrip("/") == "sqlite:"):
        # In-memory SQLite lives in a single connection; share it across sessions
        return create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if url.startswith("sqlite"):
        return create_engine(url, echo=echo)
    return create_engine(url, echo=echo, pool_pre_ping=True, pool_recycle=3600)


def configure_engine(url: Optional[str] = None, echo: Optional[bool] = None) -> Engine:
    """Replace the global engine, e.g. to point the CLI at another database."""
    global _engine, _SessionLocal
    settings = get_settings()
    if _engine is not None:
        _engine.dispose()
    _engine = _build_engine(
        url or settings.database.url,
        settings.database.echo if echo is None else echo,
    )
    _SessionLocal = None
    return _engine


def get_database_engine() -> Engine:
    """Get or create the database engine."""
    if _engine is None:
        return configure_engine()
    return _engine


def get_session_local() -> sessionmaker:
    """Get or create the session factory."""
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=get_database_engine()
        )
    return _SessionLocal


@contextmanager
def get_session() -> Generator[Session, None, None]:
    """Get a database session with automatic cleanup."""
    session_local = get_session_local()
    session = session_local()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def create_tables(engine: Optional[Engine] = None) -> None:
    """Create all database tables."""
    from .models import Base
    Base.metadata.create_all(bind=engine or get_database_engine())


def drop_tables(engine: Optional[Engine] = None) -> None:
    """Drop all database tables."""
    from .models import Base
    Base.metadata.drop_all(bind=engine or get_database_engine())
