# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, scoped_session, sessionmaker

from carshop.shared.config import AppConfig
from carshop.shared.logging import logger


class Base(DeclarativeBase):
    pass


def build_engine(config: AppConfig) -> Engine:
    kwargs: dict[str, object] = {"echo": False, "pool_pre_ping": True}
    if config.is_sqlite():
        kwargs["connect_args"] = {
            "check_same_thread": False,
            "timeout": int(config.database_pool_timeout),
        }
    else:
        kwargs.update(
            pool_size=config.database_pool_size,
            max_overflow=config.database_max_overflow,
            pool_timeout=config.database_pool_timeout,
        )
    engine = create_engine(config.database_url, **kwargs)

    if config.is_sqlite():

        @event.listens_for(engine, "connect")
        def _set_sqlite_pragmas(dbapi_conn, _):
            cur = dbapi_conn.cursor()
            try:
                cur.execute("PRAGMA foreign_keys=ON;")
                cur.execute("PRAGMA busy_timeout=30000;")
            finally:
                cur.close()

    return engine


class Database:
    """Engine plus the session factory every repository draws from."""

    def __init__(self, config: AppConfig) -> None:
        self.engine = build_engine(config)
        self.session_factory = scoped_session(
            sessionmaker(
                bind=self.engine, autoflush=False, autocommit=False, expire_on_commit=False
            )
        )

    def init_db(self) -> None:
        # models must be imported so their tables are registered on Base.metadata
        from carshop.infrastructure.db import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ensured")

    def drop_all(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def dispose(self) -> None:
        self.session_factory.remove()
        self.engine.dispose()
