# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from askedout.application.facade import AskService
from askedout.interfaces.http.dto.auth import (
    LoginRequestDTO,
    RegisterRequestDTO,
    SessionDTO,
    UserDTO,
)
from askedout.interfaces.http.responses import parse_body, result_response
from askedout.shared.logging import logger


class AuthController:
    def __init__(self, *, service: AskService) -> None:
        self._service = service

    def register(self):
        dto = parse_body(RegisterRequestDTO)
        result = self._service.register(dto.username, dto.password)
        if result.success:
            logger.info(f"auth.register: ok username={dto.username}")
            return result_response(result, user=UserDTO.model_validate(result.value).model_dump())
        logger.info(f"auth.register: failed username={dto.username} error={result.error.code}")
        return result_response(result)

    def login(self):
        dto = parse_body(LoginRequestDTO)
        result = self._service.login(dto.username, dto.password)
        if result.success:
            logger.info(f"auth.login: ok username={dto.username}")
            return result_response(result, user=UserDTO.model_validate(result.value).model_dump())
        logger.info(f"auth.login: failed username={dto.username} error={result.error.code}")
        return result_response(result)

    def logout(self):
        result = self._service.logout()
        logger.info("auth.logout: ok")
        return result_response(result)

    def me(self) -> Response:
        user = self._service.current_user()
        payload = SessionDTO(
            authenticated=user is not None,
            user=UserDTO.model_validate(user) if user else None,
        )
        return jsonify(payload.model_dump())

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["DELETE"])
        bp.add_url_rule("/me", view_func=self.me, methods=["GET"])
        return bp
