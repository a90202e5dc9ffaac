# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import DecodedToken, User


class UserDirectory(Protocol):
    def register(self, username: str, password: str) -> User: ...
    def login(self, username: str, password: str) -> User: ...
    def find_by_username(self, username: str) -> User | None: ...
    def find_by_id(self, user_id: str) -> User | None: ...


class TokenCodec(Protocol):
    def encode(self, user: User) -> str: ...
    def verify(self, token: str) -> DecodedToken: ...
    def decode(self, token: str) -> DecodedToken | None: ...
