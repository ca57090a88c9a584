"""Environment-sourced runtime settings for the persistence layer."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal, Optional, cast


OrphanPolicy = Literal["keep", "delete"]

ORPHAN_POLICY_KEEP: OrphanPolicy = "keep"
ORPHAN_POLICY_DELETE: OrphanPolicy = "delete"

PROFILE_PRODUCTION = "production"

SQLITE_MEMORY_URL = "sqlite+pysqlite:///:memory:"

_POSTGRES_ENV_VARS = (
    "POSTGRES_USER",
    "POSTGRES_PASSWORD",
    "POSTGRES_HOST",
    "POSTGRES_PORT",
    "POSTGRES_DB",
)


@dataclass(frozen=True)
class Settings:
    database_url: str
    sql_echo: bool
    address_orphan_policy: OrphanPolicy
    profile: str


def _normalize_bool(value: str | None, default: bool = False) -> bool:
    """Return normalized boolean from environment-style value."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"", "0", "false", "no", "off"}:
        return False
    if normalized in {"1", "true", "yes", "on"}:
        return True
    return default


def _is_pytest_runtime() -> bool:
    """Best-effort detection that we're executing under pytest."""
    if os.getenv("PYTEST_RUNNING") == "1":
        return True
    if "PYTEST_CURRENT_TEST" in os.environ:
        return True
    return "pytest" in sys.modules


def _postgres_url_from_parts() -> Optional[str]:
    values = {name: os.getenv(name) for name in _POSTGRES_ENV_VARS}
    if not any(values.values()):
        return None
    missing = [name for name, value in values.items() if not value]
    if missing:
        raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")
    return (
        f"postgresql://{values['POSTGRES_USER']}:{values['POSTGRES_PASSWORD']}"
        f"@{values['POSTGRES_HOST']}:{values['POSTGRES_PORT']}/{values['POSTGRES_DB']}"
    )


def _resolve_database_url() -> str:
    # Test override strategy:
    # 1. CAMPUS_TEST_DB wins when set.
    # 2. Under pytest, always use in-memory SQLite so unit runs never touch a real server.
    # 3. Otherwise DATABASE_URL, then the POSTGRES_* parts, then a local SQLite file.
    explicit_test_db = os.getenv("CAMPUS_TEST_DB")
    if explicit_test_db:
        return explicit_test_db
    if _is_pytest_runtime():
        return SQLITE_MEMORY_URL
    if os.getenv("DATABASE_URL"):
        return os.environ["DATABASE_URL"]
    return _postgres_url_from_parts() or "sqlite+pysqlite:///campus.db"


def _resolve_orphan_policy(value: str | None) -> OrphanPolicy:
    if value is None or not value.strip():
        return ORPHAN_POLICY_KEEP
    normalized = value.strip().lower()
    if normalized not in (ORPHAN_POLICY_KEEP, ORPHAN_POLICY_DELETE):
        raise ValueError(
            f"CAMPUS_ADDRESS_ORPHAN_POLICY must be 'keep' or 'delete', got {value!r}"
        )
    return cast(OrphanPolicy, normalized)


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Return the cached settings sourced from the environment."""
    return Settings(
        database_url=_resolve_database_url(),
        sql_echo=_normalize_bool(os.getenv("CAMPUS_SQL_ECHO"), default=False),
        address_orphan_policy=_resolve_orphan_policy(os.getenv("CAMPUS_ADDRESS_ORPHAN_POLICY")),
        profile=(os.getenv("CAMPUS_PROFILE") or "default").strip().lower(),
    )


def refresh_settings_cache() -> None:
    """Clear cached settings so subsequent calls re-read the environment."""
    get_settings.cache_clear()
