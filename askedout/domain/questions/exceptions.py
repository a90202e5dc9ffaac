# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from askedout.shared.errors.base import DomainError


class QuestionNotFoundError(DomainError):
    code = "question_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "Question not found"


class QuestionAlreadyAnsweredError(DomainError):
    code = "question_already_answered"
    status = HTTPStatus.CONFLICT
    message = "Question already answered"


class EmptyTextError(DomainError):
    code = "text_empty"
    status = HTTPStatus.UNPROCESSABLE_ENTITY
    message = "Text cannot be empty"


class TextTooLongError(DomainError):
    code = "text_too_long"
    status = HTTPStatus.UNPROCESSABLE_ENTITY
    message = "Text is too long"
