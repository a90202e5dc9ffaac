# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Question


class QuestionRepository(Protocol):
    def submit(self, target_username: str, content: str) -> Question: ...
    def list_for(self, user_id: str) -> Sequence[Question]: ...
    def list_answered(self, user_id: str) -> Sequence[Question]: ...
    def list_unanswered(self, user_id: str) -> Sequence[Question]: ...
    def answer(self, user_id: str, question_id: str, text: str) -> Question: ...
    def get_by_id(self, user_id: str, question_id: str) -> Question | None: ...
