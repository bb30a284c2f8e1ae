# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from expense_tracker.domain.users.entities import User
from expense_tracker.domain.users.exceptions import InvalidTokenError
from expense_tracker.domain.users.repositories import TokenService, UserRepository


class ValidateTokenUseCase:
    def __init__(self, *, users: UserRepository, tokens: TokenService) -> None:
        self._users = users
        self._tokens = tokens

    def execute(self, token: str) -> User:
        username = self._tokens.validate(token)
        user = self._users.find_by_username(username)
        if user is None:
            raise InvalidTokenError()
        return user
