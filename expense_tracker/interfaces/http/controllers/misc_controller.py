# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from flask import Blueprint, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from expense_tracker.infrastructure.unit_of_work import unit_of_work_scope
from expense_tracker.shared.logging import logger


class MiscController:
    def __init__(self, *, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def as_blueprint(self, prefix: str = "/api") -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule(f"{prefix}/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        try:
            with unit_of_work_scope(self._session_factory, read_only=True) as session:
                session.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.error(f"health: database check failed ({type(exc).__name__})")
            return jsonify({"ok": False, "database": "error"}), 503
        return jsonify({"ok": True, "database": "ok"}), 200
