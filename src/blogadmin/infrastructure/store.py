"""Database: engine ownership and transaction coordination.

The Database is the single persistence dependency injected into services
and repositories. Services own their transaction boundaries through
:meth:`Database.transaction`; repository writes take the yielded
connection so that one service operation commits or rolls back as a unit.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

from blogadmin.infrastructure.database.engine import init_database

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

    from blogadmin.config.settings import BlogSettings

logger = logging.getLogger(__name__)


class Database:
    """Owns the SQLAlchemy engine for one blogadmin database."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    @classmethod
    def open(cls, db_path: Path) -> Database:
        """Initialize (if needed) and open the database at *db_path*."""
        return cls(init_database(db_path))

    @classmethod
    def from_settings(cls, settings: BlogSettings) -> Database:
        return cls.open(settings.database_path)

    @property
    def engine(self) -> Engine:
        return self._engine

    @contextmanager
    def connect(self) -> Iterator[Connection]:
        """Read-only connection (no transaction is committed)."""
        with self._engine.connect() as conn:
            yield conn

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Yield a connection inside ``engine.begin()``.

        Commits on normal exit, rolls back if the body raises.
        """
        with self._engine.begin() as conn:
            try:
                yield conn
            except Exception:
                logger.debug("Transaction rolled back", exc_info=True)
                raise

    def close(self) -> None:
        self._engine.dispose()
