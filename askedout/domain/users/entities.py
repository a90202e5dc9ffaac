# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from askedout.domain.exceptions import InvariantViolation


@dataclass(slots=True, frozen=True)
class User:

    id: str
    username: str

    def __post_init__(self) -> None:
        if not self.id:
            raise InvariantViolation("user id must not be empty", field="id")
        if not self.username:
            raise InvariantViolation("username must not be empty", field="username")


@dataclass(slots=True, frozen=True)
class DecodedToken:
    """Claims carried by a session token; ``expires_at`` is epoch seconds."""

    user_id: str
    username: str
    expires_at: int

    def is_expired(self, now_epoch: int) -> bool:
        return self.expires_at <= now_epoch
