# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""The single entry point used by the presentation layer.

Expected failures (taken username, unknown user or question, re-answering)
come back as failed :class:`ActionResult` values carrying a message meant for
end users. Calling a user-scoped operation without a session raises
:class:`NotAuthenticatedError`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from askedout.application.services.session_manager import SessionManager
from askedout.domain.questions.entities import Question
from askedout.domain.questions.exceptions import (
    EmptyTextError,
    QuestionAlreadyAnsweredError,
    QuestionNotFoundError,
    TextTooLongError,
)
from askedout.domain.questions.repositories import QuestionRepository
from askedout.domain.users.entities import User
from askedout.domain.users.exceptions import (
    InvalidUsernameError,
    UsernameTakenError,
    UserNotFoundError,
)
from askedout.domain.users.repositories import UserDirectory
from askedout.shared.errors.base import DomainError
from askedout.shared.logging import logger

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class ActionResult(Generic[T]):
    success: bool
    message: str | None = None
    error: DomainError | None = None
    value: T | None = None

    @classmethod
    def ok(cls, value: T | None = None) -> ActionResult[T]:
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: DomainError) -> ActionResult[T]:
        return cls(success=False, message=error.message, error=error)


@dataclass(slots=True, frozen=True)
class PublicProfile:
    user: User
    answered: list[Question] = field(default_factory=list)


class AskService:
    def __init__(
        self,
        *,
        sessions: SessionManager,
        directory: UserDirectory,
        questions: QuestionRepository,
        question_max_length: int = 1000,
        answer_max_length: int = 2000,
    ) -> None:
        self._sessions = sessions
        self._directory = directory
        self._questions = questions
        self._question_max_length = question_max_length
        self._answer_max_length = answer_max_length

    @staticmethod
    def _clean_text(text: str, max_length: int) -> str:
        cleaned = text.strip()
        if not cleaned:
            raise EmptyTextError()
        if len(cleaned) > max_length:
            raise TextTooLongError(context={"max_length": max_length})
        return cleaned

    def register(self, username: str, password: str) -> ActionResult[User]:
        try:
            user = self._sessions.register(username, password)
        except (InvalidUsernameError, UsernameTakenError) as exc:
            return ActionResult.fail(exc)
        return ActionResult.ok(user)

    def login(self, username: str, password: str) -> ActionResult[User]:
        try:
            user = self._sessions.login(username, password)
        except UserNotFoundError as exc:
            return ActionResult.fail(exc)
        return ActionResult.ok(user)

    def logout(self) -> ActionResult[None]:
        self._sessions.logout()
        return ActionResult.ok()

    def is_authenticated(self) -> bool:
        return self._sessions.is_authenticated()

    def current_user(self) -> User | None:
        return self._sessions.current_user()

    def find_user(self, username: str) -> User | None:
        return self._directory.find_by_username(username)

    def submit_question(self, username: str, content: str) -> ActionResult[Question]:
        try:
            cleaned = self._clean_text(content, self._question_max_length)
            question = self._questions.submit(username, cleaned)
        except (EmptyTextError, TextTooLongError, UserNotFoundError) as exc:
            return ActionResult.fail(exc)
        return ActionResult.ok(question)

    def list_questions(self, *, answered: bool | None = None) -> list[Question]:
        user = self._sessions.require_user()
        if answered is None:
            return self._questions.list_for(user.id)
        if answered:
            return self._questions.list_answered(user.id)
        return self._questions.list_unanswered(user.id)

    def answer_question(self, question_id: str, text: str) -> ActionResult[Question]:
        user = self._sessions.require_user()
        try:
            cleaned = self._clean_text(text, self._answer_max_length)
            question = self._questions.answer(user.id, question_id, cleaned)
        except (
            EmptyTextError,
            TextTooLongError,
            QuestionNotFoundError,
            QuestionAlreadyAnsweredError,
        ) as exc:
            logger.info(f"facade.answer: rejected {exc.code} question_id={question_id}")
            return ActionResult.fail(exc)
        return ActionResult.ok(question)

    def get_question(self, user_id: str, question_id: str) -> Question | None:
        return self._questions.get_by_id(user_id, question_id)

    def public_profile(self, username: str) -> PublicProfile | None:
        user = self._directory.find_by_username(username)
        if user is None:
            return None
        return PublicProfile(user=user, answered=self._questions.list_answered(user.id))

    def get_public_question(self, username: str, question_id: str) -> Question | None:
        """Look up a question for public display; unanswered ones stay hidden."""
        user = self._directory.find_by_username(username)
        if user is None:
            return None
        question = self._questions.get_by_id(user.id, question_id)
        if question is None or not question.is_answered:
            return None
        return question
