from __future__ import annotations

from collections.abc import Generator, Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from rentassist.db.base import Base
from rentassist.db import models  # noqa: F401


class Database:
    """Owns the engine and session factory for one database URL.

    Built once at process startup and disposed at shutdown; callers get
    short-lived sessions from it rather than sharing a connection.
    """

    def __init__(self, url: str, *, echo: bool = False):
        self.url = url
        connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
        self.engine: Engine = create_engine(url, connect_args=connect_args, echo=echo, future=True)
        self.session_factory = sessionmaker(
            bind=self.engine,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
            future=True,
        )

    def create_schema(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def drop_schema(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()

    def iter_sessions(self) -> Generator[Session, None, None]:
        with self.session() as db:
            yield db

    def dispose(self) -> None:
        self.engine.dispose()
