# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, Response
from flask_cors import CORS

from expense_tracker.infrastructure.container import Container, container
from expense_tracker.infrastructure.db import init_db
from expense_tracker.interfaces.http.routes import build_blueprints
from expense_tracker.shared.config import AppConfig
from expense_tracker.shared.logging import logger, setup_logging
from expense_tracker.shared.middleware.error_handler import configure_error_handling
from expense_tracker.shared.middleware.request_logger import configure_request_logging


def _configure_security_headers(app: Flask, config: AppConfig) -> None:
    @app.after_request
    def _add_security_headers(resp: Response) -> Response:
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")
        resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")
        resp.headers.setdefault(
            "Permissions-Policy",
            "geolocation=(), microphone=(), camera=(), payment=(), usb=()",
        )

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp


def create_app(app_container: Container | None = None) -> Flask:
    app_container = app_container or container
    config = app_container.config

    init_db()
    setup_logging(debug_mode=config.debug_logging)

    app = Flask(__name__)
    app.config.update(SECRET_KEY=config.secret_key)
    app.json.sort_keys = False

    configure_error_handling(app)
    configure_request_logging(app)
    _configure_security_headers(app, config)

    # Bearer tokens only, no cookies: credentials stay off.
    CORS(
        app,
        resources={rf"{config.api_prefix}/*": {"origins": config.security.allowed_origins}},
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    )

    for blueprint in build_blueprints(app_container, config.api_prefix):
        app.register_blueprint(blueprint)

    logger.info(f"Flask app initialized (prefix={config.api_prefix or '/'})")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=8080, debug=False)
