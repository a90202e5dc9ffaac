from __future__ import annotations

import pytest

from askedout.application.facade import AskService
from askedout.container import Container
from askedout.domain.users.exceptions import NotAuthenticatedError, UserNotFoundError
from askedout.shared.config import AppConfig
from askedout.shared.config.settings import QuestionsConfig
from askedout.tests.conftest import InMemoryKeyValueBackend


@pytest.fixture()
def container(backend: InMemoryKeyValueBackend) -> Container:
    config = AppConfig(questions=QuestionsConfig(question_max_length=20))
    return Container(config, backend=backend)


@pytest.fixture()
def service(container: Container) -> AskService:
    return container.ask_service


def test_alice_scenario(service: AskService) -> None:
    assert service.register("alice", "secret123").success
    assert service.is_authenticated() is True

    assert service.submit_question("alice", "Hi Alice").success
    questions = service.list_questions()
    assert len(questions) == 1
    assert questions[0].answer is None

    result = service.answer_question(questions[0].id, "Hello!")
    assert result.success
    assert result.value.answer == "Hello!"

    questions = service.list_questions()
    assert len(questions) == 1
    assert questions[0].answer == "Hello!"
    assert questions[0].answered_at is not None


def test_register_twice_reports_username_taken(service: AskService) -> None:
    service.register("alice", "secret123")
    service.logout()

    result = service.register("alice", "secret123")

    assert result.success is False
    assert result.message == "Username already taken"
    assert result.error.code == "username_taken"
    assert service.is_authenticated() is False


@pytest.mark.parametrize("username", ["", "   "])
def test_register_blank_username_reports_failure(
    service: AskService, backend: InMemoryKeyValueBackend, username: str
) -> None:
    result = service.register(username, "secret123")

    assert result.success is False
    assert result.error.code == "username_invalid"
    assert result.message == "Username cannot be empty"
    assert service.is_authenticated() is False
    assert backend.writes == 0


def test_login_unknown_user(service: AskService) -> None:
    result = service.login("bob", "anything")

    assert result.success is False
    assert isinstance(result.error, UserNotFoundError)
    assert result.message == "User not found"


def test_login_then_authenticated(service: AskService) -> None:
    service.register("alice", "secret123")
    service.logout()

    assert service.login("alice", "secret123").success
    assert service.is_authenticated() is True
    assert service.current_user().username == "alice"


def test_logout_always_succeeds(service: AskService) -> None:
    assert service.logout().success
    service.register("alice", "secret123")
    assert service.logout().success
    assert service.is_authenticated() is False


def test_submit_to_unknown_user_creates_no_ledger(
    service: AskService, container: Container
) -> None:
    result = service.submit_question("nobody", "Hello?")

    assert result.success is False
    assert result.message == "User not found"
    assert container.state.ledger == {}


def test_submit_strips_and_rejects_blank_text(service: AskService) -> None:
    service.register("alice", "secret123")

    blank = service.submit_question("alice", "   ")
    assert blank.success is False
    assert blank.error.code == "text_empty"

    too_long = service.submit_question("alice", "x" * 21)
    assert too_long.error.code == "text_too_long"

    assert service.submit_question("alice", "  Hi  ").value.content == "Hi"


def test_user_scoped_calls_require_session(service: AskService) -> None:
    with pytest.raises(NotAuthenticatedError):
        service.list_questions()
    with pytest.raises(NotAuthenticatedError):
        service.answer_question("q1", "text")


def test_answer_questions_only_in_own_ledger(service: AskService) -> None:
    service.register("alice", "secret123")
    question = service.submit_question("alice", "For Alice").value
    service.register("bob", "secret123")

    result = service.answer_question(question.id, "Stolen")

    assert result.success is False
    assert result.message == "Question not found"


def test_second_answer_is_rejected(service: AskService) -> None:
    service.register("alice", "secret123")
    question = service.submit_question("alice", "Hi").value
    service.answer_question(question.id, "First")

    result = service.answer_question(question.id, "Second")

    assert result.success is False
    assert result.message == "Question already answered"
    assert service.list_questions()[0].answer == "First"


def test_list_filters(service: AskService) -> None:
    service.register("alice", "secret123")
    done = service.submit_question("alice", "One").value
    pending = service.submit_question("alice", "Two").value
    service.answer_question(done.id, "Yes")

    assert [q.id for q in service.list_questions(answered=True)] == [done.id]
    assert [q.id for q in service.list_questions(answered=False)] == [pending.id]


def test_public_views_hide_unanswered(service: AskService) -> None:
    user = service.register("alice", "secret123").value
    done = service.submit_question("alice", "One").value
    pending = service.submit_question("alice", "Two").value
    service.answer_question(done.id, "Yes")
    service.logout()

    profile = service.public_profile("alice")
    assert profile.user == user
    assert [q.id for q in profile.answered] == [done.id]
    assert service.public_profile("nobody") is None

    assert service.get_public_question("alice", done.id).answer == "Yes"
    assert service.get_public_question("alice", pending.id) is None
    assert service.get_question(user.id, pending.id) == pending
    assert service.find_user("alice") == user
