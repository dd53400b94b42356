"""Engine and session lifecycle for the SQLAlchemy order repository."""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ordering.config import Settings, get_settings


class Base(DeclarativeBase):
    """Declarative base for the order tables."""


# Process-wide; set by initialize_database, cleared by dispose_engine
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def _build_engine(settings: Settings) -> Engine:
    url = make_url(settings.DATABASE_URL)
    if url.get_backend_name() == "sqlite":
        connect_args = {"check_same_thread": False, "timeout": settings.SQLITE_BUSY_TIMEOUT}
        if url.database in (None, "", ":memory:") or url.query.get("mode") == "memory":
            # An in-memory database lives on one connection; every session must share it
            return create_engine(url, connect_args=connect_args, poolclass=StaticPool)
        # A connection per session so SQLite locking keeps transactions apart
        return create_engine(url, connect_args=connect_args)
    return create_engine(url, pool_size=20, max_overflow=30, pool_pre_ping=True, pool_recycle=3600)


def initialize_database(settings: Settings) -> None:
    """Create the engine and session factory. Call once at startup."""
    global _engine, _session_factory  # noqa: PLW0603

    _engine = _build_engine(settings)
    _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=_engine)


def get_engine() -> Engine:
    if _engine is None:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")
    return _engine


def get_session_factory(settings: Settings | None = None) -> sessionmaker[Session]:
    """Return the session factory, initializing the database on first use."""
    if _session_factory is None:
        initialize_database(settings or get_settings())
    if _session_factory is None:
        raise RuntimeError("Failed to initialize database session factory.")
    return _session_factory


def create_schema(engine: Engine | None = None) -> None:
    """Create the order tables if they do not exist."""
    # Importing the models registers their tables on Base.metadata
    from ordering import models  # noqa: F401, PLC0415

    Base.metadata.create_all(bind=engine or get_engine())


def dispose_engine() -> None:
    """Close pooled connections and forget the engine."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None
