from __future__ import annotations

import pytest

from askedout.domain.questions.exceptions import (
    QuestionAlreadyAnsweredError,
    QuestionNotFoundError,
)
from askedout.domain.users.entities import User
from askedout.domain.users.exceptions import UserNotFoundError
from askedout.infrastructure.repositories import StoreQuestionRepository, StoreUserDirectory
from askedout.infrastructure.storage import LocalDataStore
from askedout.infrastructure.storage.local_store import StoreState
from askedout.tests.conftest import InMemoryKeyValueBackend


@pytest.fixture()
def store(backend: InMemoryKeyValueBackend) -> LocalDataStore:
    return LocalDataStore(backend)


@pytest.fixture()
def state(store: LocalDataStore) -> StoreState:
    return store.load()


@pytest.fixture()
def alice(store: LocalDataStore, state: StoreState) -> User:
    return StoreUserDirectory(store, state).register("alice", "secret123")


@pytest.fixture()
def questions(store: LocalDataStore, state: StoreState) -> StoreQuestionRepository:
    return StoreQuestionRepository(store, state)


def test_submit_to_unknown_user_creates_nothing(
    questions: StoreQuestionRepository, state: StoreState, backend: InMemoryKeyValueBackend
) -> None:
    with pytest.raises(UserNotFoundError):
        questions.submit("nobody", "Hello?")

    assert state.ledger == {}
    assert backend.writes == 0


def test_submitted_questions_keep_arrival_order(
    questions: StoreQuestionRepository, alice: User
) -> None:
    first = questions.submit("alice", "First")
    second = questions.submit("alice", "Second")

    ledger = questions.list_for(alice.id)

    assert [q.id for q in ledger] == [first.id, second.id]
    assert all(q.answer is None and q.answered_at is None for q in ledger)
    assert first.created_at <= second.created_at


def test_submit_recreates_missing_ledger(store: LocalDataStore) -> None:
    user = User(id="u" * 32, username="carol")
    state = StoreState(users=[user])
    repo = StoreQuestionRepository(store, state)

    repo.submit("carol", "Anyone home?")

    assert len(state.ledger[user.id]) == 1


def test_list_for_unknown_user_is_empty(questions: StoreQuestionRepository) -> None:
    assert questions.list_for("missing") == []


def test_answer_sets_answer_and_persists(
    questions: StoreQuestionRepository, alice: User, store: LocalDataStore
) -> None:
    question = questions.submit("alice", "Hi Alice")

    answered = questions.answer(alice.id, question.id, "Hello!")

    assert answered.answer == "Hello!"
    assert answered.answered_at is not None
    assert answered.created_at == question.created_at
    reloaded = store.load().ledger[alice.id]
    assert reloaded[0].answer == "Hello!"


def test_answer_is_written_once(questions: StoreQuestionRepository, alice: User) -> None:
    question = questions.submit("alice", "Hi Alice")
    questions.answer(alice.id, question.id, "Hello!")

    with pytest.raises(QuestionAlreadyAnsweredError):
        questions.answer(alice.id, question.id, "Changed my mind")

    assert questions.get_by_id(alice.id, question.id).answer == "Hello!"


def test_answer_unknown_question(questions: StoreQuestionRepository, alice: User) -> None:
    with pytest.raises(QuestionNotFoundError):
        questions.answer(alice.id, "missing", "Hello!")


def test_answer_is_scoped_to_the_ledger_owner(
    questions: StoreQuestionRepository,
    alice: User,
    store: LocalDataStore,
    state: StoreState,
) -> None:
    bob = StoreUserDirectory(store, state).register("bob", "secret123")
    question = questions.submit("alice", "For Alice only")

    with pytest.raises(QuestionNotFoundError):
        questions.answer(bob.id, question.id, "Not mine")

    assert questions.get_by_id(alice.id, question.id).answer is None


def test_partitions(questions: StoreQuestionRepository, alice: User) -> None:
    answered = questions.submit("alice", "One")
    pending = questions.submit("alice", "Two")
    questions.answer(alice.id, answered.id, "Yes")

    assert [q.id for q in questions.list_answered(alice.id)] == [answered.id]
    assert [q.id for q in questions.list_unanswered(alice.id)] == [pending.id]


def test_get_by_id(questions: StoreQuestionRepository, alice: User) -> None:
    question = questions.submit("alice", "Hi")

    assert questions.get_by_id(alice.id, question.id) == question
    assert questions.get_by_id(alice.id, "missing") is None
    assert questions.get_by_id("someone-else", question.id) is None
