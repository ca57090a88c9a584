import pytest

from campus.db import models
from campus.db.database import SessionLocal, engine
from campus.utils.settings import refresh_settings_cache


@pytest.fixture
def db():
    models.Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        models.Base.metadata.drop_all(bind=engine)


@pytest.fixture
def orphan_policy(monkeypatch):
    """Switch the address orphan policy for the duration of a test."""
    def _set(value: str):
        monkeypatch.setenv("CAMPUS_ADDRESS_ORPHAN_POLICY", value)
        refresh_settings_cache()
    yield _set
    monkeypatch.delenv("CAMPUS_ADDRESS_ORPHAN_POLICY", raising=False)
    refresh_settings_cache()
