# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from .exceptions import QuestionAlreadyAnsweredError


@dataclass(slots=True, frozen=True)
class Question:

    id: str
    content: str
    created_at: datetime
    answer: str | None = None
    answered_at: datetime | None = None

    @property
    def is_answered(self) -> bool:
        return self.answer is not None

    def answered(self, text: str, at: datetime) -> Question:
        """Return a copy carrying ``text`` as its answer.

        An answer is written once; answering again raises
        :class:`QuestionAlreadyAnsweredError` instead of overwriting it.
        """
        if self.is_answered:
            raise QuestionAlreadyAnsweredError(context={"question_id": self.id})
        return replace(self, answer=text, answered_at=at)
