# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import InvariantViolation, InvariantViolationError
from .questions.entities import Question
from .users.entities import DecodedToken, User

__all__ = [
    "DecodedToken",
    "InvariantViolation",
    "InvariantViolationError",
    "Question",
    "User",
]
