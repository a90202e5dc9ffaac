# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from askedout.domain.questions.entities import Question
from askedout.domain.questions.exceptions import QuestionNotFoundError
from askedout.domain.questions.repositories import QuestionRepository
from askedout.domain.users.exceptions import UserNotFoundError
from askedout.infrastructure.storage.local_store import LocalDataStore, StoreState
from askedout.shared.logging import logger

from .directory import new_id


class StoreQuestionRepository(QuestionRepository):
    """Per-user question ledgers kept in the ``questions`` store entry.

    Performs no authorization: callers decide who may answer.
    """

    def __init__(self, store: LocalDataStore, state: StoreState) -> None:
        self._store = store
        self._state = state

    def submit(self, target_username: str, content: str) -> Question:
        with self._store.mutate(self._state) as state:
            owner = next((u for u in state.users if u.username == target_username), None)
            if owner is None:
                logger.info(f"questions.submit: unknown target username={target_username}")
                raise UserNotFoundError(context={"username": target_username})
            question = Question(id=new_id(), content=content, created_at=datetime.now(UTC))
            state.ledger.setdefault(owner.id, []).append(question)
        logger.info(f"questions.submit: ok user_id={owner.id} question_id={question.id}")
        return question

    def list_for(self, user_id: str) -> list[Question]:
        with self._state.lock:
            return list(self._state.ledger.get(user_id, []))

    def list_answered(self, user_id: str) -> list[Question]:
        return [q for q in self.list_for(user_id) if q.is_answered]

    def list_unanswered(self, user_id: str) -> list[Question]:
        return [q for q in self.list_for(user_id) if not q.is_answered]

    def get_by_id(self, user_id: str, question_id: str) -> Question | None:
        return next((q for q in self.list_for(user_id) if q.id == question_id), None)

    def answer(self, user_id: str, question_id: str, text: str) -> Question:
        with self._store.mutate(self._state) as state:
            questions = state.ledger.get(user_id, [])
            index = next(
                (i for i, q in enumerate(questions) if q.id == question_id), None
            )
            if index is None:
                raise QuestionNotFoundError(
                    context={"user_id": user_id, "question_id": question_id}
                )
            updated = questions[index].answered(text, datetime.now(UTC))
            questions[index] = updated
        logger.info(f"questions.answer: ok user_id={user_id} question_id={question_id}")
        return updated
