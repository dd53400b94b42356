"""Tests for settings, logging setup and database lifecycle."""

from pathlib import Path

import pytest
import structlog
from sqlalchemy.pool import StaticPool

from ordering import database
from ordering.config import Settings, configure_logging, get_settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)  # type: ignore[call-arg]

    assert settings.DATABASE_URL == "sqlite:///./orders.db"
    assert settings.PERSISTENCE_BACKEND == "sqlalchemy"
    assert settings.ENVIRONMENT == "development"
    assert settings.SQLITE_BUSY_TIMEOUT == 5.0


def test_environment_variables_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PERSISTENCE_BACKEND", "memory")
    monkeypatch.setenv("ENVIRONMENT", "test")

    settings = Settings(_env_file=None)  # type: ignore[call-arg]

    assert settings.PERSISTENCE_BACKEND == "memory"
    assert settings.ENVIRONMENT == "test"


def test_blank_database_url_is_rejected() -> None:
    with pytest.raises(ValueError, match="DATABASE_URL"):
        Settings(DATABASE_URL="   ")


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


@pytest.mark.parametrize("environment", ["development", "production", "test"])
def test_configure_logging(environment: str) -> None:
    configure_logging(environment)
    try:
        structlog.get_logger("ordering.tests").info("logging_configured", environment=environment)
    finally:
        structlog.reset_defaults()


def test_database_lifecycle() -> None:
    database.initialize_database(Settings(DATABASE_URL="sqlite:///:memory:"))
    try:
        engine = database.get_engine()
        database.create_schema(engine)
        assert {"orders", "order_items"} <= set(database.Base.metadata.tables)
        session = database.get_session_factory()()
        session.close()
    finally:
        database.dispose_engine()

    with pytest.raises(RuntimeError, match="not initialized"):
        database.get_engine()


def test_in_memory_sqlite_shares_one_connection() -> None:
    database.initialize_database(Settings(DATABASE_URL="sqlite:///:memory:"))
    try:
        assert isinstance(database.get_engine().pool, StaticPool)
    finally:
        database.dispose_engine()


def test_file_sqlite_gives_each_session_its_own_connection(tmp_path: Path) -> None:
    database.initialize_database(Settings(DATABASE_URL=f"sqlite:///{tmp_path / 'orders.db'}"))
    try:
        engine = database.get_engine()
        assert not isinstance(engine.pool, StaticPool)
        with engine.connect() as first, engine.connect() as second:
            assert first.connection.dbapi_connection is not second.connection.dbapi_connection
    finally:
        database.dispose_engine()
