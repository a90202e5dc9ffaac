# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Session token encoding.

Tokens are ``base64(JSON({"userId", "username", "exp"}))``. Anyone holding a
token can read and forge its claims: there is no signature. It stands in for
a server-issued token and must not guard anything that matters. A real
deployment needs a MAC-protected claim set issued by a trusted server.
"""

from __future__ import annotations

import base64
import binascii
import json
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from askedout.domain.users.entities import DecodedToken, User
from askedout.domain.users.exceptions import (
    InvalidTokenError,
    MalformedTokenError,
    TokenExpiredError,
)
from askedout.domain.users.repositories import TokenCodec
from askedout.shared.logging import logger

DEFAULT_TOKEN_TTL = timedelta(days=7)


class TokenClaims(BaseModel):
    user_id: str = Field(alias="userId", min_length=1)
    username: str = Field(min_length=1)
    exp: int

    model_config = ConfigDict(validate_by_name=True, extra="ignore", strict=True)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Base64TokenCodec(TokenCodec):
    def __init__(
        self,
        *,
        ttl: timedelta = DEFAULT_TOKEN_TTL,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._ttl = ttl
        self._clock = clock

    def _now_epoch(self) -> int:
        return int(self._clock().timestamp())

    def encode(self, user: User) -> str:
        claims = TokenClaims(
            user_id=user.id,
            username=user.username,
            exp=self._now_epoch() + int(self._ttl.total_seconds()),
        )
        payload = claims.model_dump_json(by_alias=True).encode("utf-8")
        return base64.b64encode(payload).decode("ascii")

    def verify(self, token: str) -> DecodedToken:
        try:
            raw = base64.b64decode(token.encode("ascii"), validate=True)
            claims = TokenClaims.model_validate(json.loads(raw))
        except (UnicodeError, binascii.Error, ValueError, PydanticValidationError) as exc:
            raise MalformedTokenError(str(exc)) from exc

        decoded = DecodedToken(
            user_id=claims.user_id,
            username=claims.username,
            expires_at=claims.exp,
        )
        if decoded.is_expired(self._now_epoch()):
            raise TokenExpiredError(decoded.expires_at)
        return decoded

    def decode(self, token: str) -> DecodedToken | None:
        try:
            return self.verify(token)
        except InvalidTokenError as exc:
            logger.warning(f"token.decode: rejected ({type(exc).__name__}: {exc})")
            return None


__all__ = ["Base64TokenCodec", "DEFAULT_TOKEN_TTL", "TokenClaims"]
