# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Session state machine: Anonymous <-> Authenticated(user).

The stored token is the only session state. It is evaluated lazily: an
expired, malformed or dangling token is noticed (and cleared) the next time
the session is queried.
"""

from __future__ import annotations

from askedout.domain.users.entities import User
from askedout.domain.users.exceptions import NotAuthenticatedError
from askedout.domain.users.repositories import TokenCodec, UserDirectory
from askedout.infrastructure.storage.local_store import LocalDataStore, StoreState
from askedout.shared.errors import InfrastructureError
from askedout.shared.logging import logger


class SessionManager:
    def __init__(
        self,
        *,
        store: LocalDataStore,
        state: StoreState,
        codec: TokenCodec,
        directory: UserDirectory,
    ) -> None:
        self._store = store
        self._state = state
        self._codec = codec
        self._directory = directory

    def _start_session(self, user: User) -> None:
        with self._store.mutate(self._state) as state:
            state.token = self._codec.encode(user)
        logger.info(f"session.start: ok user_id={user.id}")

    def register(self, username: str, password: str) -> User:
        with self._state.lock:
            user = self._directory.register(username, password)
            self._start_session(user)
        return user

    def login(self, username: str, password: str) -> User:
        with self._state.lock:
            user = self._directory.login(username, password)
            self._start_session(user)
        return user

    def logout(self) -> None:
        with self._store.mutate(self._state) as state:
            state.token = None
        logger.info("session.logout: ok")

    def current_user(self) -> User | None:
        with self._state.lock:
            token = self._state.token
            if token is None:
                return None

            decoded = self._codec.decode(token)
            user = self._directory.find_by_id(decoded.user_id) if decoded else None
            if user is None:
                if decoded is not None:
                    logger.warning(
                        f"session.check: token names unknown user_id={decoded.user_id}"
                    )
                self._clear_token()
            return user

    def _clear_token(self) -> None:
        try:
            with self._store.mutate(self._state) as state:
                state.token = None
        except InfrastructureError as exc:
            logger.warning(f"session.check: could not clear invalid session ({exc.code})")
            return
        logger.info("session.check: cleared invalid session")

    def is_authenticated(self) -> bool:
        return self.current_user() is not None

    def require_user(self) -> User:
        user = self.current_user()
        if user is None:
            raise NotAuthenticatedError()
        return user
