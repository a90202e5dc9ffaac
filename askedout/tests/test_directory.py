from __future__ import annotations

import re

import pytest

from askedout.domain.users.exceptions import (
    InvalidUsernameError,
    UsernameTakenError,
    UserNotFoundError,
)
from askedout.infrastructure.repositories import StoreUserDirectory
from askedout.infrastructure.storage import LocalDataStore
from askedout.tests.conftest import InMemoryKeyValueBackend


@pytest.fixture()
def store(backend: InMemoryKeyValueBackend) -> LocalDataStore:
    return LocalDataStore(backend)


@pytest.fixture()
def directory(store: LocalDataStore) -> StoreUserDirectory:
    return StoreUserDirectory(store, store.load())


def test_register_creates_user_and_empty_ledger(
    directory: StoreUserDirectory, store: LocalDataStore
) -> None:
    user = directory.register("alice", "secret123")

    assert user.username == "alice"
    assert re.fullmatch(r"[0-9a-f]{32}", user.id)
    persisted = store.load()
    assert persisted.users == [user]
    assert persisted.ledger == {user.id: []}


def test_register_twice_fails(directory: StoreUserDirectory, store: LocalDataStore) -> None:
    directory.register("alice", "secret123")

    with pytest.raises(UsernameTakenError) as exc_info:
        directory.register("alice", "other")

    assert exc_info.value.message == "Username already taken"
    assert len(store.load().users) == 1


@pytest.mark.parametrize("username", ["", " \t"])
def test_register_rejects_blank_username(
    directory: StoreUserDirectory, store: LocalDataStore, username: str
) -> None:
    with pytest.raises(InvalidUsernameError):
        directory.register(username, "secret123")

    assert store.load().users == []


def test_usernames_are_case_sensitive(directory: StoreUserDirectory) -> None:
    lower = directory.register("alice", "secret123")
    upper = directory.register("Alice", "secret123")

    assert lower.id != upper.id
    assert directory.find_by_username("ALICE") is None


def test_ids_are_unique(directory: StoreUserDirectory) -> None:
    ids = {directory.register(f"user{i}", "secret123").id for i in range(50)}

    assert len(ids) == 50


def test_lookups(directory: StoreUserDirectory) -> None:
    user = directory.register("alice", "secret123")

    assert directory.find_by_username("alice") == user
    assert directory.find_by_id(user.id) == user
    assert directory.find_by_id("missing") is None


def test_login_unknown_user_fails(directory: StoreUserDirectory) -> None:
    with pytest.raises(UserNotFoundError):
        directory.login("bob", "anything")


def test_login_does_not_check_password(directory: StoreUserDirectory) -> None:
    user = directory.register("alice", "secret123")

    assert directory.login("alice", "not-the-password") == user
