# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus
from typing import Any, TypeVar

from flask import Response, jsonify, request
from pydantic import BaseModel, ValidationError

from askedout.application.facade import ActionResult
from askedout.interfaces.http.dto.questions import ActionResultDTO
from askedout.shared.errors.validation import raise_validation_error


M = TypeVar("M", bound=BaseModel)


def parse_body(model: type[M]) -> M:
    try:
        return model.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)


def result_response(
    result: ActionResult[Any], **payload: Any
) -> tuple[Response, HTTPStatus]:
    if result.success:
        body = ActionResultDTO(ok=True).model_dump(exclude_none=True)
        body.update(payload)
        return jsonify(body), HTTPStatus.OK

    if result.error is None:
        body = ActionResultDTO(ok=False, message=result.message).model_dump()
        return jsonify(body), HTTPStatus.BAD_REQUEST

    body = ActionResultDTO(
        ok=False, error=result.error.code, message=result.message
    ).model_dump()
    return jsonify(body), result.error.status
