# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from askedout.shared.config.settings import StorageConfig
from askedout.shared.logging import logger


class Base(DeclarativeBase):
    pass


def _ensure_sqlite_directory(url: str) -> None:
    database = make_url(url).database
    if database and database != ":memory:":
        Path(database).parent.mkdir(parents=True, exist_ok=True)


def build_engine(config: StorageConfig) -> Engine:
    connect_args: dict[str, object] = {}
    if config.url.startswith("sqlite"):
        _ensure_sqlite_directory(config.url)
        connect_args = {
            "check_same_thread": False,
            "timeout": int(config.pool_timeout),
        }

    engine = create_engine(
        config.url,
        echo=False,
        pool_pre_ping=True,
        connect_args=connect_args,
    )
    logger.debug(f"db.engine: created dialect={engine.dialect.name}")
    return engine


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@contextmanager
def session_scope(factory: Callable[[], Session]) -> Iterator[Session]:
    session = factory()
    logger.debug("db.session: opened")
    try:
        yield session
        session.commit()
        logger.debug("db.session: committed")
    except Exception:
        logger.exception("db.session: error, rolling back")
        session.rollback()
        raise
    finally:
        session.close()


def init_db(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("Store schema ensured")
