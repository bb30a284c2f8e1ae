from __future__ import annotations

from unittest.mock import MagicMock

from flask import Flask
from sqlalchemy.exc import OperationalError

from expense_tracker.interfaces.http.controllers.misc_controller import MiscController


def _app(session: MagicMock) -> Flask:
    app = Flask(__name__)
    app.register_blueprint(MiscController(session_factory=lambda: session).as_blueprint("/api"))
    return app


def test_health_reports_ok_and_releases_session() -> None:
    session = MagicMock()

    response = _app(session).test_client().get("/api/health")

    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "database": "ok"}
    session.execute.assert_called_once()
    session.commit.assert_not_called()
    session.close.assert_called_once()


def test_health_answers_503_when_database_unreachable() -> None:
    session = MagicMock()
    session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("connection refused"))

    response = _app(session).test_client().get("/api/health")

    assert response.status_code == 503
    assert response.get_json() == {"ok": False, "database": "error"}
    session.rollback.assert_called()
    session.close.assert_called_once()
