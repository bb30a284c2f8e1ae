# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from expense_tracker.shared.errors.base import DomainError


class DuplicateUsernameError(DomainError):
    code = "duplicate_username"


class DuplicateEmailError(DomainError):
    code = "duplicate_email"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"


class IncorrectPasswordError(DomainError):
    code = "incorrect_password"


class InvalidTokenError(DomainError):
    code = "invalid_token"


class UserNotFoundError(DomainError):
    code = "user_not_found"
    status = HTTPStatus.NOT_FOUND
