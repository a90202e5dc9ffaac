# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid

from askedout.domain.users.entities import User
from askedout.domain.users.exceptions import (
    InvalidUsernameError,
    UsernameTakenError,
    UserNotFoundError,
)
from askedout.domain.users.repositories import UserDirectory
from askedout.infrastructure.storage.local_store import LocalDataStore, StoreState
from askedout.shared.logging import logger


def new_id() -> str:
    return uuid.uuid4().hex


class StoreUserDirectory(UserDirectory):
    """User registry kept in the ``users`` entry of the local store.

    Passwords are accepted for interface parity but never stored or checked.
    """

    def __init__(self, store: LocalDataStore, state: StoreState) -> None:
        self._store = store
        self._state = state

    def find_by_username(self, username: str) -> User | None:
        with self._state.lock:
            return next((u for u in self._state.users if u.username == username), None)

    def find_by_id(self, user_id: str) -> User | None:
        with self._state.lock:
            return next((u for u in self._state.users if u.id == user_id), None)

    def register(self, username: str, password: str) -> User:
        if not username.strip():
            raise InvalidUsernameError(context={"username": username})
        with self._store.mutate(self._state) as state:
            if self.find_by_username(username) is not None:
                logger.info(f"directory.register: username taken username={username}")
                raise UsernameTakenError(context={"username": username})
            user = User(id=new_id(), username=username)
            state.users.append(user)
            state.ledger[user.id] = []
        logger.info(f"directory.register: ok user_id={user.id}")
        return user

    def login(self, username: str, password: str) -> User:
        # TODO: verify the password once credentials are actually stored.
        user = self.find_by_username(username)
        if user is None:
            logger.info(f"directory.login: unknown username={username}")
            raise UserNotFoundError(context={"username": username})
        return user
