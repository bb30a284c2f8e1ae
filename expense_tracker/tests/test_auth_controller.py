from __future__ import annotations

from datetime import UTC, datetime
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from expense_tracker.application.use_cases.users.register_user import (
    RegisterUserInput,
    RegisterUserUseCase,
)
from expense_tracker.domain.users.entities import IssuedToken, User
from expense_tracker.domain.users.exceptions import InvalidCredentialsError
from expense_tracker.interfaces.http.controllers.auth_controller import AuthController
from expense_tracker.shared.middleware.error_handler import configure_error_handling

NOW = datetime(2024, 6, 15, tzinfo=UTC)


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def _controller(**overrides) -> AuthController:
    deps = {
        "register_use_case": MagicMock(),
        "login_use_case": MagicMock(),
        "validate_token_use_case": MagicMock(),
        "username_available_use_case": MagicMock(),
        "email_available_use_case": MagicMock(),
    }
    deps.update(overrides)
    return AuthController(**deps)


def test_register_endpoint_returns_token_and_profile(flask_app: Flask) -> None:
    register_called: dict[str, RegisterUserInput] = {}

    class StubRegister:
        def execute(self, data: RegisterUserInput) -> tuple[User, IssuedToken]:
            register_called["data"] = data
            user = User(
                id=7,
                username=data.username,
                email=data.email,
                password_hash="hash",
                first_name=data.first_name,
                last_name=None,
                created_at=NOW,
            )
            return user, IssuedToken(token="token123", username=data.username, expires_at=NOW)

    controller = _controller(register_use_case=cast(RegisterUserUseCase, StubRegister()))
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/register",
            json={
                "username": "alice",
                "email": "alice@example.com",
                "password": "secret123",
                "firstName": "Alice",
            },
        )

    assert response.status_code == 200
    assert register_called["data"].first_name == "Alice"
    assert response.get_json() == {
        "token": "token123",
        "type": "Bearer",
        "id": 7,
        "username": "alice",
        "email": "alice@example.com",
    }


@pytest.mark.parametrize(
    "payload",
    [
        {"username": "al", "email": "alice@example.com", "password": "secret123"},
        {"username": "alice!", "email": "alice@example.com", "password": "secret123"},
        {"username": "alice", "email": "not-an-email", "password": "secret123"},
        {"username": "alice", "email": "alice@example.com", "password": "short"},
    ],
)
def test_register_invalid_payload_returns_400(flask_app: Flask, payload: dict) -> None:
    register = MagicMock()
    flask_app.register_blueprint(_controller(register_use_case=register).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/auth/register", json=payload)

    assert response.status_code == 400
    assert response.get_json()["error"] == "validation_error"
    register.execute.assert_not_called()


def test_login_invalid_credentials_returns_400(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    flask_app.register_blueprint(_controller(login_use_case=login).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/login", json={"usernameOrEmail": "alice", "password": "nope"}
        )

    assert response.status_code == 400
    assert response.get_json() == {"error": "invalid_credentials"}
    login.execute.assert_called_once_with("alice", "nope")


def test_validate_without_bearer_header_returns_invalid_token(flask_app: Flask) -> None:
    flask_app.register_blueprint(_controller().as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/auth/validate")

    assert response.status_code == 400
    assert response.get_json()["error"] == "invalid_token"


def test_check_username_reports_availability(flask_app: Flask) -> None:
    availability = MagicMock()
    availability.execute.return_value = False
    controller = _controller(username_available_use_case=availability)
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.get("/api/auth/check-username/alice")

    assert response.get_json() == {"available": False}
    availability.execute.assert_called_once_with("alice")
