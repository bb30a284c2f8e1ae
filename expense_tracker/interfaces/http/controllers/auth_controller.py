# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from expense_tracker.application.use_cases.users.check_availability import (
    CheckEmailAvailabilityUseCase,
    CheckUsernameAvailabilityUseCase,
)
from expense_tracker.application.use_cases.users.login_user import LoginUserUseCase
from expense_tracker.application.use_cases.users.register_user import (
    RegisterUserInput,
    RegisterUserUseCase,
)
from expense_tracker.application.use_cases.users.validate_token import ValidateTokenUseCase
from expense_tracker.domain.users.exceptions import InvalidCredentialsError, InvalidTokenError
from expense_tracker.infrastructure.audit import AuditAction, audit_log
from expense_tracker.infrastructure.auth.gate import bearer_token
from expense_tracker.interfaces.http.dto.auth import (
    AuthResponseDTO,
    AvailabilityDTO,
    LoginRequestDTO,
    RegisterRequestDTO,
    TokenValidationDTO,
)
from expense_tracker.interfaces.http.requests import client_ip, parse_json
from expense_tracker.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        validate_token_use_case: ValidateTokenUseCase,
        username_available_use_case: CheckUsernameAvailabilityUseCase,
        email_available_use_case: CheckEmailAvailabilityUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._validate_token_use_case = validate_token_use_case
        self._username_available_use_case = username_available_use_case
        self._email_available_use_case = email_available_use_case

    def register(self) -> tuple[Response, int]:
        dto = parse_json(RegisterRequestDTO)

        user, token = self._register_use_case.execute(
            RegisterUserInput(
                username=dto.username,
                email=dto.email,
                password=dto.password,
                first_name=dto.first_name,
                last_name=dto.last_name,
            )
        )

        audit_log(
            AuditAction.REGISTER,
            user_id=user.id,
            ip_address=client_ip(),
            details={"username": user.username},
        )
        logger.info(f"auth.register: ok user_id={user.id}")
        return jsonify(AuthResponseDTO.build(user, token).to_json()), 200

    def login(self) -> tuple[Response, int]:
        dto = parse_json(LoginRequestDTO)
        ip_address = client_ip()

        try:
            user, token = self._login_use_case.execute(dto.username_or_email, dto.password)
        except InvalidCredentialsError:
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"login": dto.username_or_email},
                success=False,
            )
            raise

        audit_log(AuditAction.LOGIN_SUCCESS, user_id=user.id, ip_address=ip_address)
        logger.info(f"auth.login: ok user_id={user.id}")
        return jsonify(AuthResponseDTO.build(user, token).to_json()), 200

    def validate(self) -> tuple[Response, int]:
        token = bearer_token(request.headers.get("Authorization"))
        if not token:
            raise InvalidTokenError()

        user = self._validate_token_use_case.execute(token)
        payload = TokenValidationDTO(id=user.id, username=user.username, email=user.email)
        return jsonify(payload.to_json()), 200

    def check_username(self, username: str) -> tuple[Response, int]:
        available = self._username_available_use_case.execute(username)
        return jsonify(AvailabilityDTO(available=available).to_json()), 200

    def check_email(self, email: str) -> tuple[Response, int]:
        available = self._email_available_use_case.execute(email)
        return jsonify(AvailabilityDTO(available=available).to_json()), 200

    def as_blueprint(self, prefix: str = "/api") -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix=f"{prefix}/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/validate", view_func=self.validate, methods=["POST"])
        bp.add_url_rule(
            "/check-username/<string:username>", view_func=self.check_username, methods=["GET"]
        )
        bp.add_url_rule("/check-email/<string:email>", view_func=self.check_email, methods=["GET"])
        return bp
