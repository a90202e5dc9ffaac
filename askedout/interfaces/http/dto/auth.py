# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from askedout.shared.errors.validation_types import ValidationErrorType

_USERNAME_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


def _check_username(value: str) -> str:
    if not _USERNAME_RE.match(value):
        raise PydanticCustomError(
            ValidationErrorType.USERNAME_INVALID_CHARS,
            "Username may contain only letters, digits, '_', '.' and '-'",
            {"pattern": _USERNAME_RE.pattern},
        )
    return value


class RegisterRequestDTO(BaseModel):
    username: str = Field(min_length=3, max_length=64)
    password: str = Field(max_length=128)
    confirm_password: str | None = Field(None, max_length=128)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        return _check_username(value)

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, value: str) -> str:
        if len(value) < 6:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_TOO_SHORT,
                "Password must be at least 6 characters long",
                {"min_length": 6},
            )
        return value

    @model_validator(mode="after")
    def validate_confirmation(self) -> RegisterRequestDTO:
        if self.confirm_password is not None and self.confirm_password != self.password:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_MISMATCH,
                "Passwords do not match",
                {},
            )
        return self


class LoginRequestDTO(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=128)


class UserDTO(BaseModel):
    id: str
    username: str

    model_config = ConfigDict(from_attributes=True)


class SessionDTO(BaseModel):
    authenticated: bool
    user: UserDTO | None = None
