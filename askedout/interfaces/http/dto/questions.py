# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from askedout.domain.questions.entities import Question

from .auth import UserDTO


class SubmitQuestionRequestDTO(BaseModel):
    content: str


class AnswerRequestDTO(BaseModel):
    answer: str


class QuestionDTO(BaseModel):
    id: str
    content: str
    created_at: datetime = Field(serialization_alias="createdAt")
    answer: str | None = None
    answered_at: datetime | None = Field(None, serialization_alias="answeredAt")

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_domain(cls, question: Question) -> QuestionDTO:
        return cls.model_validate(question)


class ProfileDTO(BaseModel):
    user: UserDTO
    answered: list[QuestionDTO]


class ActionResultDTO(BaseModel):
    ok: bool
    error: str | None = None
    message: str | None = None
