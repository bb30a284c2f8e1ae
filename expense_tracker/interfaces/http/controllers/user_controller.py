# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from expense_tracker.application.use_cases.users.change_password import ChangePasswordUseCase
from expense_tracker.application.use_cases.users.delete_account import DeleteAccountUseCase
from expense_tracker.application.use_cases.users.get_profile import GetProfileUseCase
from expense_tracker.application.use_cases.users.update_profile import (
    UpdateProfileInput,
    UpdateProfileUseCase,
)
from expense_tracker.domain.users.entities import AuthContext
from expense_tracker.infrastructure.audit import AuditAction, audit_log
from expense_tracker.infrastructure.auth.gate import BearerAuthenticator
from expense_tracker.interfaces.http.dto.base import MessageDTO
from expense_tracker.interfaces.http.dto.user import (
    ChangePasswordRequestDTO,
    ProfileDTO,
    UpdateProfileRequestDTO,
)
from expense_tracker.interfaces.http.requests import client_ip, parse_json
from expense_tracker.shared.logging import logger


class UserController:
    def __init__(
        self,
        *,
        authenticator: BearerAuthenticator,
        get_profile_use_case: GetProfileUseCase,
        update_profile_use_case: UpdateProfileUseCase,
        change_password_use_case: ChangePasswordUseCase,
        delete_account_use_case: DeleteAccountUseCase,
    ) -> None:
        self._auth = authenticator
        self._get_profile = get_profile_use_case
        self._update_profile = update_profile_use_case
        self._change_password = change_password_use_case
        self._delete_account = delete_account_use_case

    def get_profile(self, *, auth: AuthContext) -> tuple[Response, int]:
        user = self._get_profile.execute(auth.user_id)
        return jsonify(ProfileDTO.from_entity(user).to_json()), 200

    def update_profile(self, *, auth: AuthContext) -> tuple[Response, int]:
        dto = parse_json(UpdateProfileRequestDTO)
        user = self._update_profile.execute(
            auth.user_id,
            UpdateProfileInput(first_name=dto.first_name, last_name=dto.last_name, email=dto.email),
        )
        audit_log(
            AuditAction.PROFILE_UPDATED,
            user_id=auth.user_id,
            ip_address=client_ip(),
            details={"fields": sorted(dto.model_fields_set)},
        )
        return jsonify(ProfileDTO.from_entity(user).to_json()), 200

    def change_password(self, *, auth: AuthContext) -> tuple[Response, int]:
        dto = parse_json(ChangePasswordRequestDTO)
        self._change_password.execute(auth.user_id, dto.current_password, dto.new_password)
        audit_log(AuditAction.PASSWORD_CHANGED, user_id=auth.user_id, ip_address=client_ip())
        return jsonify(MessageDTO(message="Password updated successfully").to_json()), 200

    def delete_account(self, *, auth: AuthContext) -> tuple[Response, int]:
        self._delete_account.execute(auth.user_id)
        audit_log(AuditAction.ACCOUNT_DELETED, user_id=auth.user_id, ip_address=client_ip())
        logger.info(f"user.delete_account: ok user_id={auth.user_id}")
        return jsonify(MessageDTO(message="Account deleted successfully").to_json()), 200

    def as_blueprint(self, prefix: str = "/api") -> Blueprint:
        protect = self._auth.protect
        bp = Blueprint("user", __name__, url_prefix=f"{prefix}/user")
        bp.add_url_rule(
            "/profile", endpoint="get_profile", view_func=protect(self.get_profile), methods=["GET"]
        )
        bp.add_url_rule(
            "/profile",
            endpoint="update_profile",
            view_func=protect(self.update_profile),
            methods=["PUT"],
        )
        bp.add_url_rule(
            "/password",
            endpoint="change_password",
            view_func=protect(self.change_password),
            methods=["PUT"],
        )
        bp.add_url_rule(
            "/account",
            endpoint="delete_account",
            view_func=protect(self.delete_account),
            methods=["DELETE"],
        )
        return bp
