# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, Response
from flask_cors import CORS

from askedout.container import Container
from askedout.shared.config import AppConfig, load_config
from askedout.shared.logging import logger, setup_logging
from askedout.shared.middleware.error_handler import configure_error_handling
from askedout.shared.middleware.request_logger import configure_request_logging


def create_app(
    config: AppConfig | None = None, *, container: Container | None = None
) -> Flask:
    if container is None:
        container = Container(config or load_config())
    config = container.config
    setup_logging(config.log_level, debug_mode=config.debug_logging)

    app = Flask(__name__)
    app.extensions["askedout.container"] = container
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.security.allowed_origins}}
    }
    if any(o != "*" for o in config.security.allowed_origins):
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.questions_controller.as_blueprint())
    app.register_blueprint(container.profiles_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp: Response) -> Response:
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")
        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )
        return resp

    state = container.state
    logger.info(f"Flask app initialized (users={len(state.users)})")
    return app


if __name__ == "__main__":
    create_app().run(host="127.0.0.1", port=5000, debug=True)
