"""Connection to the fleet PostgreSQL store.

Investor profiles, vehicles, financial records and the transaction
ledger all live in one hosted database. The record store adapter reads
them through the single engine built here from ``FLEET_DB_URL``.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Return a required setting, loading ``.env`` first.

    Args:
        name: Variable holding the setting, e.g. ``FLEET_DB_URL``.

    Returns:
        str: The configured value.

    Raises:
        RuntimeError: If the setting is absent or blank.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Build the pooled engine used by every report read.

    Report requests are short and read-only, so a small pool is enough.
    Stale connections are detected with a pre-ping before each checkout.

    Args:
        db_url: Connection URL of the fleet database.

    Returns:
        Engine: Pooled SQLAlchemy engine.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_fleet_engine: Optional[Engine] = None


def get_fleet_engine() -> Engine:
    """Return the process-wide fleet engine, creating it on first use."""
    global _fleet_engine
    if _fleet_engine is None:
        db_url = _get_env_var("FLEET_DB_URL")
        _fleet_engine = _create_engine(db_url)
    return _fleet_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """Hands the shared fleet engine to the record store and CLIs."""

    def get_fleet_engine(self) -> Engine:
        return get_fleet_engine()


__all__ = [
    "get_fleet_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
