import pytest

from campus.utils import settings as settings_mod
from campus.utils.settings import (
    ORPHAN_POLICY_DELETE,
    ORPHAN_POLICY_KEEP,
    SQLITE_MEMORY_URL,
    get_settings,
    refresh_settings_cache,
)

_ENV_VARS = (
    "CAMPUS_TEST_DB",
    "CAMPUS_SQL_ECHO",
    "CAMPUS_ADDRESS_ORPHAN_POLICY",
    "CAMPUS_PROFILE",
    "DATABASE_URL",
    "POSTGRES_USER",
    "POSTGRES_PASSWORD",
    "POSTGRES_HOST",
    "POSTGRES_PORT",
    "POSTGRES_DB",
)


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Clear env + cached values for each test to avoid cross-contamination."""
    for env_name in _ENV_VARS:
        monkeypatch.delenv(env_name, raising=False)
    refresh_settings_cache()
    yield
    refresh_settings_cache()


def test_defaults_under_pytest():
    settings = get_settings()
    assert settings.database_url == SQLITE_MEMORY_URL
    assert settings.sql_echo is False
    assert settings.address_orphan_policy == ORPHAN_POLICY_KEEP
    assert settings.profile == "default"


def test_settings_are_cached_until_refreshed(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("CAMPUS_PROFILE", "production")
    assert get_settings() is first
    refresh_settings_cache()
    assert get_settings().profile == "production"


def test_explicit_test_database_wins(monkeypatch):
    monkeypatch.setenv("CAMPUS_TEST_DB", "sqlite+pysqlite:///tmp-campus.db")
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@h:5432/d")
    assert get_settings().database_url == "sqlite+pysqlite:///tmp-campus.db"


@pytest.mark.parametrize("raw,expected", [("1", True), ("yes", True), ("off", False), ("", False)])
def test_sql_echo_parsing(monkeypatch, raw, expected):
    monkeypatch.setenv("CAMPUS_SQL_ECHO", raw)
    assert get_settings().sql_echo is expected


def test_orphan_policy_delete(monkeypatch):
    monkeypatch.setenv("CAMPUS_ADDRESS_ORPHAN_POLICY", " Delete ")
    assert get_settings().address_orphan_policy == ORPHAN_POLICY_DELETE


def test_invalid_orphan_policy_rejected(monkeypatch):
    monkeypatch.setenv("CAMPUS_ADDRESS_ORPHAN_POLICY", "cascade")
    with pytest.raises(ValueError, match="CAMPUS_ADDRESS_ORPHAN_POLICY"):
        get_settings()


def test_postgres_url_from_parts(monkeypatch):
    monkeypatch.setenv("POSTGRES_USER", "campus")
    monkeypatch.setenv("POSTGRES_PASSWORD", "secret")
    monkeypatch.setenv("POSTGRES_HOST", "db")
    monkeypatch.setenv("POSTGRES_PORT", "5432")
    monkeypatch.setenv("POSTGRES_DB", "campus")
    assert settings_mod._postgres_url_from_parts() == "postgresql://campus:secret@db:5432/campus"


def test_postgres_url_reports_missing_parts(monkeypatch):
    monkeypatch.setenv("POSTGRES_USER", "campus")
    with pytest.raises(ValueError) as exc:
        settings_mod._postgres_url_from_parts()
    assert "POSTGRES_PASSWORD" in str(exc.value)
    assert "POSTGRES_USER" not in str(exc.value)


def test_no_postgres_parts_returns_none():
    assert settings_mod._postgres_url_from_parts() is None
