"""
Engine and session handling.

The seeding pipeline receives an explicit Session; callers acquire it
with session_scope(), which always closes it.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from roomdirectory.config.settings import DatabaseConfig
from roomdirectory.database.models import Base
from roomdirectory.utils.logging import get_logger

log = get_logger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(config: DatabaseConfig) -> Engine:
    """
    Create an engine for the configured database.

    Args:
        config: Database configuration.

    Returns:
        SQLAlchemy engine. SQLite engines enforce foreign keys.
    """
    engine = create_engine(config.url, echo=config.echo)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    log.debug("Created database engine", dialect=engine.dialect.name)
    return engine


def create_schema(engine: Engine) -> None:
    """Create any missing tables."""
    Base.metadata.create_all(engine)


@contextmanager
def session_scope(engine: Engine) -> Iterator[Session]:
    """
    Provide a session for the duration of a block.

    Uncommitted work is rolled back when the block raises. The session is
    closed on every exit path.

    Args:
        engine: Engine to bind the session to.

    Yields:
        Open session.
    """
    factory = sessionmaker(bind=engine, expire_on_commit=False)
    session = factory()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
