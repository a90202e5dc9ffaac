# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Process-wide state persisted as three key-value entries.

Layout::

    auth_token      opaque session token, absent when logged out
    users           JSON list of {id, username}
    questions       JSON object of user id -> list of question records
    schema_version  layout version of the two JSON entries

A missing entry loads as its empty default. A corrupt entry is logged and
also loads as its empty default instead of failing the process.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from askedout.domain.questions.entities import Question
from askedout.domain.users.entities import User
from askedout.shared.logging import logger

from .key_value import KeyValueBackend

SCHEMA_VERSION = "1"

TOKEN_KEY = "auth_token"
USERS_KEY = "users"
QUESTIONS_KEY = "questions"
SCHEMA_KEY = "schema_version"

T = TypeVar("T")


class StorageCorruptError(Exception):
    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"{key}: {reason}")
        self.key = key
        self.reason = reason


class UserRecord(BaseModel):
    id: str = Field(min_length=1)
    username: str = Field(min_length=1)

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def from_domain(cls, user: User) -> UserRecord:
        return cls(id=user.id, username=user.username)

    def to_domain(self) -> User:
        return User(id=self.id, username=self.username)


class QuestionRecord(BaseModel):
    id: str = Field(min_length=1)
    content: str
    created_at: datetime = Field(alias="createdAt")
    answer: str | None = None
    answered_at: datetime | None = Field(None, alias="answeredAt")

    model_config = ConfigDict(extra="ignore", validate_by_name=True)

    @classmethod
    def from_domain(cls, question: Question) -> QuestionRecord:
        return cls(
            id=question.id,
            content=question.content,
            created_at=question.created_at,
            answer=question.answer,
            answered_at=question.answered_at,
        )

    def to_domain(self) -> Question:
        return Question(
            id=self.id,
            content=self.content,
            created_at=self.created_at,
            answer=self.answer,
            answered_at=self.answered_at,
        )


_USERS = TypeAdapter(list[UserRecord])
_LEDGER = TypeAdapter(dict[str, list[QuestionRecord]])


@dataclass(slots=True)
class StoreState:
    """In-memory image of the persisted entries.

    Every read-modify-write goes through :meth:`LocalDataStore.mutate`, which
    holds ``lock`` for its whole duration.
    """

    token: str | None = None
    users: list[User] = field(default_factory=list)
    ledger: dict[str, list[Question]] = field(default_factory=dict)
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    def snapshot(self) -> tuple[str | None, list[User], dict[str, list[Question]]]:
        return (
            self.token,
            list(self.users),
            {user_id: list(items) for user_id, items in self.ledger.items()},
        )

    def restore(
        self, snapshot: tuple[str | None, list[User], dict[str, list[Question]]]
    ) -> None:
        self.token, self.users, self.ledger = snapshot


def _parse_users(raw: str) -> list[User]:
    users = [record.to_domain() for record in _USERS.validate_json(raw)]
    seen: set[str] = set()
    for user in users:
        if user.username in seen:
            raise StorageCorruptError(USERS_KEY, f"duplicate username {user.username!r}")
        seen.add(user.username)
    return users


def _parse_ledger(raw: str) -> dict[str, list[Question]]:
    return {
        user_id: [record.to_domain() for record in records]
        for user_id, records in _LEDGER.validate_json(raw).items()
    }


class LocalDataStore:
    def __init__(self, backend: KeyValueBackend) -> None:
        self._backend = backend

    def _load_entry(self, key: str, parse: Callable[[str], T], default: Callable[[], T]) -> T:
        raw = self._backend.read(key)
        if raw is None:
            return default()
        try:
            return parse(raw)
        except (PydanticValidationError, StorageCorruptError) as exc:
            logger.error(f"store.load: corrupt entry key={key}, using empty default ({exc})")
            return default()

    def load(self) -> StoreState:
        version = self._backend.read(SCHEMA_KEY)
        if version is not None and version != SCHEMA_VERSION:
            logger.error(
                f"store.load: unsupported schema_version={version!r} "
                f"(expected {SCHEMA_VERSION}), using empty defaults"
            )
            return StoreState()

        token = self._backend.read(TOKEN_KEY) or None
        users = self._load_entry(USERS_KEY, _parse_users, list)
        ledger = self._load_entry(QUESTIONS_KEY, _parse_ledger, dict)
        logger.info(
            f"store.load: ok users={len(users)} ledgers={len(ledger)} "
            f"token={'present' if token else 'absent'}"
        )
        return StoreState(token=token, users=users, ledger=ledger)

    def save(self, state: StoreState) -> None:
        users = [UserRecord.from_domain(user) for user in state.users]
        ledger = {
            user_id: [QuestionRecord.from_domain(question) for question in questions]
            for user_id, questions in state.ledger.items()
        }
        self._backend.write_many(
            {
                TOKEN_KEY: state.token,
                USERS_KEY: _USERS.dump_json(users, by_alias=True).decode("utf-8"),
                QUESTIONS_KEY: _LEDGER.dump_json(
                    ledger, by_alias=True, exclude_none=True
                ).decode("utf-8"),
                SCHEMA_KEY: SCHEMA_VERSION,
            }
        )

    @contextmanager
    def mutate(self, state: StoreState) -> Iterator[StoreState]:
        """Run a read-modify-write of ``state`` and persist it.

        On any exception the in-memory state is rolled back to what it was
        on entry and nothing is written.
        """
        with state.lock:
            snapshot = state.snapshot()
            try:
                yield state
                self.save(state)
            except Exception:
                state.restore(snapshot)
                raise


__all__ = [
    "SCHEMA_VERSION",
    "LocalDataStore",
    "QuestionRecord",
    "StorageCorruptError",
    "StoreState",
    "UserRecord",
]
