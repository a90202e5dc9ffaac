# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Application dependency container.

Built once per process; every service shares the same store and the same
in-memory state loaded from it.
"""

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from askedout.application.facade import AskService
from askedout.application.services.session_manager import SessionManager
from askedout.infrastructure.auth.token_codec import Base64TokenCodec
from askedout.infrastructure.db import build_engine, build_session_factory, init_db
from askedout.infrastructure.repositories import StoreQuestionRepository, StoreUserDirectory
from askedout.infrastructure.storage import (
    SCHEMA_KEY,
    KeyValueBackend,
    LocalDataStore,
    SqlAlchemyKeyValueBackend,
    StoreState,
)
from askedout.interfaces.http.controllers.auth_controller import AuthController
from askedout.interfaces.http.controllers.misc_controller import MiscController
from askedout.interfaces.http.controllers.profiles_controller import ProfilesController
from askedout.interfaces.http.controllers.questions_controller import QuestionsController
from askedout.shared.config import AppConfig, load_config


class Container:
    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        backend: KeyValueBackend | None = None,
    ) -> None:
        self.config = config or load_config()
        self._backend = backend

    @cached_property
    def engine(self) -> Engine:
        engine = build_engine(self.config.storage)
        init_db(engine)
        return engine

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return build_session_factory(self.engine)

    @cached_property
    def backend(self) -> KeyValueBackend:
        if self._backend is not None:
            return self._backend
        return SqlAlchemyKeyValueBackend(self.session_factory)

    @cached_property
    def store(self) -> LocalDataStore:
        return LocalDataStore(self.backend)

    @cached_property
    def state(self) -> StoreState:
        return self.store.load()

    @cached_property
    def token_codec(self) -> Base64TokenCodec:
        return Base64TokenCodec(ttl=timedelta(seconds=self.config.session.token_ttl_seconds))

    @cached_property
    def user_directory(self) -> StoreUserDirectory:
        return StoreUserDirectory(self.store, self.state)

    @cached_property
    def question_repository(self) -> StoreQuestionRepository:
        return StoreQuestionRepository(self.store, self.state)

    @cached_property
    def session_manager(self) -> SessionManager:
        return SessionManager(
            store=self.store,
            state=self.state,
            codec=self.token_codec,
            directory=self.user_directory,
        )

    @cached_property
    def ask_service(self) -> AskService:
        return AskService(
            sessions=self.session_manager,
            directory=self.user_directory,
            questions=self.question_repository,
            question_max_length=self.config.questions.question_max_length,
            answer_max_length=self.config.questions.answer_max_length,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(service=self.ask_service)

    @cached_property
    def questions_controller(self) -> QuestionsController:
        return QuestionsController(service=self.ask_service)

    @cached_property
    def profiles_controller(self) -> ProfilesController:
        return ProfilesController(service=self.ask_service)

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(check_storage=lambda: self.backend.read(SCHEMA_KEY))
