# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from expense_tracker.domain.users.exceptions import IncorrectPasswordError, UserNotFoundError
from expense_tracker.domain.users.repositories import PasswordHasher, UserRepository


class ChangePasswordUseCase:
    """Tokens issued before the change stay valid until they expire."""

    def __init__(self, *, users: UserRepository, password_hasher: PasswordHasher) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, user_id: int, current_password: str, new_password: str) -> None:
        user = self._users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        if not self._password_hasher.verify(current_password, user.password_hash):
            raise IncorrectPasswordError()
        if not self._users.update_password_hash(user_id, self._password_hasher.hash(new_password)):
            raise UserNotFoundError()
