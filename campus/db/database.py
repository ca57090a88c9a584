"""
Database engine and session management.

Builds the SQLAlchemy engine from environment settings (in-memory SQLite under
pytest) and exposes a session dependency plus a transactional scope helper.
"""
import logging
from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from campus.utils.settings import get_settings


logger = logging.getLogger(__name__)


def _engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {}
    kwargs = {"connect_args": {"check_same_thread": False}}
    if ":memory:" in url or url.rstrip("/").endswith("sqlite://"):
        # In-memory SQLite with StaticPool so the schema persists across connections
        kwargs["poolclass"] = StaticPool
    return kwargs


def build_engine(url: str | None = None, *, echo: bool | None = None) -> Engine:
    settings = get_settings()
    url = url or settings.database_url
    echo = settings.sql_echo if echo is None else echo
    eng = create_engine(url, echo=echo, **_engine_kwargs(url))
    if eng.dialect.name == "sqlite":
        # SQLite leaves foreign keys unenforced unless asked per connection.
        event.listen(eng, "connect", _enable_sqlite_foreign_keys)
    logger.debug("Database engine created", extra={"dialect": eng.dialect.name})
    return eng


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys=ON")
    finally:
        cursor.close()


engine = build_engine()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None) -> None:
    """Create all tables for the campus models."""
    from campus.db import models  # local import keeps model registration lazy
    models.Base.metadata.create_all(bind=bind or engine)


def drop_db(bind=None) -> None:
    from campus.db import models
    models.Base.metadata.drop_all(bind=bind or engine)


def get_db():
    """Dependency to get a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def session_scope():
    """Yield a session that commits on success and rolls back on error."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
