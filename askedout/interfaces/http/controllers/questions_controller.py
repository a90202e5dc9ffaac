# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from flask import Blueprint, jsonify, request

from askedout.application.facade import AskService
from askedout.interfaces.http.dto.questions import AnswerRequestDTO, QuestionDTO
from askedout.interfaces.http.responses import parse_body, result_response
from askedout.shared.errors import ValidationError
from askedout.shared.logging import logger

_STATUS_FILTERS = {None: None, "answered": True, "unanswered": False}


class QuestionsController:
    """Inbox of the signed-in user."""

    def __init__(self, *, service: AskService) -> None:
        self._service = service

    def list_questions(self):
        t0 = perf_counter()
        status = request.args.get("status")
        if status not in _STATUS_FILTERS:
            raise ValidationError(
                context={"fields": ["status"], "allowed": ["answered", "unanswered"]}
            )
        items = self._service.list_questions(answered=_STATUS_FILTERS[status])
        dt = (perf_counter() - t0) * 1000
        logger.info(f"questions.list: ok (n={len(items)}, status={status}, dt_ms={dt:.0f})")
        return jsonify(
            {"items": [QuestionDTO.from_domain(q).model_dump(mode="json", by_alias=True) for q in items]}
        )

    def answer(self, question_id: str):
        dto = parse_body(AnswerRequestDTO)
        result = self._service.answer_question(question_id, dto.answer)
        if not result.success:
            return result_response(result)
        question = QuestionDTO.from_domain(result.value).model_dump(mode="json", by_alias=True)
        return result_response(result, question=question)

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("questions", __name__, url_prefix="/api/questions")
        bp.add_url_rule("", view_func=self.list_questions, methods=["GET"])
        bp.add_url_rule(
            "/<string:question_id>/answer", view_func=self.answer, methods=["POST"]
        )
        return bp
