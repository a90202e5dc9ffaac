# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from flask import Blueprint, jsonify


class MiscController:
    def __init__(self, *, check_storage: Callable[[], object]) -> None:
        self._check_storage = check_storage

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            self._check_storage()
            status["storage"] = "ok"
        except Exception as exc:  # pragma: no cover
            status["ok"] = False
            status["storage"] = f"error: {type(exc).__name__}"
        return jsonify(status)
