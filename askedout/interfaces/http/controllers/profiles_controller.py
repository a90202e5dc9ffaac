# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from askedout.application.facade import AskService
from askedout.interfaces.http.dto.auth import UserDTO
from askedout.interfaces.http.dto.questions import (
    ProfileDTO,
    QuestionDTO,
    SubmitQuestionRequestDTO,
)
from askedout.interfaces.http.responses import parse_body, result_response


def _not_found(code: str):
    return jsonify({"error": code}), 404


class ProfilesController:
    """Public pages: profile, anonymous question box and answered questions."""

    def __init__(self, *, service: AskService) -> None:
        self._service = service

    def profile(self, username: str):
        profile = self._service.public_profile(username)
        if profile is None:
            return _not_found("user_not_found")
        payload = ProfileDTO(
            user=UserDTO.model_validate(profile.user),
            answered=[QuestionDTO.from_domain(q) for q in profile.answered],
        )
        return jsonify(payload.model_dump(mode="json", by_alias=True))

    def submit(self, username: str):
        dto = parse_body(SubmitQuestionRequestDTO)
        result = self._service.submit_question(username, dto.content)
        return result_response(result)

    def question(self, username: str, question_id: str):
        question = self._service.get_public_question(username, question_id)
        if question is None:
            return _not_found("question_not_found")
        return jsonify(QuestionDTO.from_domain(question).model_dump(mode="json", by_alias=True))

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("profiles", __name__, url_prefix="/api/users")
        bp.add_url_rule("/<string:username>", view_func=self.profile, methods=["GET"])
        bp.add_url_rule(
            "/<string:username>/questions", view_func=self.submit, methods=["POST"]
        )
        bp.add_url_rule(
            "/<string:username>/questions/<string:question_id>",
            view_func=self.question,
            methods=["GET"],
        )
        return bp
