# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Key-value persistence adapters."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Protocol

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from askedout.infrastructure.db.models import StoreEntry
from askedout.infrastructure.db.session import session_scope
from askedout.shared.errors.base import InfrastructureError
from askedout.shared.logging import logger


class StorageWriteError(InfrastructureError):
    def __init__(self, keys: list[str]) -> None:
        super().__init__(code="storage_write_failed", context={"keys": keys})


class KeyValueBackend(Protocol):
    """Protocol for string key-value storage.

    ``write_many`` applies every item in one transaction; a ``None`` value
    removes the key.
    """

    def read(self, key: str) -> str | None: ...

    def write_many(self, items: Mapping[str, str | None]) -> None: ...


class SqlAlchemyKeyValueBackend(KeyValueBackend):
    """Stores entries as rows of the ``store_entries`` table."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def read(self, key: str) -> str | None:
        with session_scope(self._session_factory) as session:
            row = session.execute(
                select(StoreEntry.value).where(StoreEntry.key == key)
            ).scalar_one_or_none()
        logger.debug(f"kv.read: key={key} hit={row is not None}")
        return row

    def write_many(self, items: Mapping[str, str | None]) -> None:
        try:
            with session_scope(self._session_factory) as session:
                for key, value in items.items():
                    if value is None:
                        session.execute(delete(StoreEntry).where(StoreEntry.key == key))
                        continue
                    entry = session.get(StoreEntry, key)
                    if entry is None:
                        session.add(StoreEntry(key=key, value=value))
                    else:
                        entry.value = value
        except SQLAlchemyError as exc:
            raise StorageWriteError(sorted(items)) from exc
        logger.debug(f"kv.write: keys={sorted(items)}")


__all__ = ["KeyValueBackend", "SqlAlchemyKeyValueBackend", "StorageWriteError"]
