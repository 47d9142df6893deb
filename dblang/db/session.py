"""SQLAlchemy engine and session management."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import Engine, create_engine
from sqlalchemy.exc import NoSuchModuleError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from dblang.config import LangSettings, get_settings
from dblang.logging import logger
from dblang.services.exceptions import DatabaseLibraryError

_MEMORY_DSNS = {"sqlite://", "sqlite:///:memory:"}


class Database:
    """Lazy SQLAlchemy engine/session factory wrapper."""

    def __init__(self, settings: LangSettings | None = None) -> None:
        self.settings = settings or get_settings()
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None

    def _ensure_engine(self) -> None:
        if self._engine is not None:
            return
        dsn = self.settings.dsn
        options: dict = {"echo": self.settings.database.echo}
        if dsn in _MEMORY_DSNS:
            options.update(
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        try:
            self._engine = create_engine(dsn, **options)
        except (ImportError, NoSuchModuleError) as exc:
            raise DatabaseLibraryError(str(exc)) from exc
        self._session_factory = sessionmaker(
            bind=self._engine,
            expire_on_commit=False,
            autoflush=False,
        )
        logger.info("db_engine_initialized", dsn=dsn)

    @property
    def engine(self) -> Engine:
        self._ensure_engine()
        assert self._engine is not None
        return self._engine

    @property
    def session_factory(self) -> sessionmaker[Session]:
        self._ensure_engine()
        assert self._session_factory is not None
        return self._session_factory

    @contextmanager
    def session(self) -> Iterator[Session]:
        factory = self.session_factory
        with factory() as session:
            try:
                yield session
            except Exception:
                session.rollback()
                raise

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """Session whose work is committed on exit and rolled back on error."""

        with self.session() as session:
            with session.begin():
                yield session

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None


def get_database(settings: LangSettings | None = None) -> Database:
    return Database(settings=settings)


__all__ = ["Database", "get_database"]
