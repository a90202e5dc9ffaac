# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from askedout.shared.errors.base import DomainError


class UsernameTakenError(DomainError):
    code = "username_taken"
    status = HTTPStatus.CONFLICT
    message = "Username already taken"


class InvalidUsernameError(DomainError):
    code = "username_invalid"
    status = HTTPStatus.UNPROCESSABLE_ENTITY
    message = "Username cannot be empty"


class UserNotFoundError(DomainError):
    code = "user_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "User not found"


class NotAuthenticatedError(DomainError):
    code = "not_authenticated"
    status = HTTPStatus.UNAUTHORIZED
    message = "Not authenticated"


class InvalidTokenError(Exception):
    """Base for session token failures; never surfaced to end users."""


class MalformedTokenError(InvalidTokenError):
    pass


class TokenExpiredError(InvalidTokenError):
    def __init__(self, expires_at: int) -> None:
        super().__init__(f"token expired at {expires_at}")
        self.expires_at = expires_at
