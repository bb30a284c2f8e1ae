# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from expense_tracker.domain.users.entities import IssuedToken, User
from expense_tracker.domain.users.exceptions import InvalidCredentialsError
from expense_tracker.domain.users.repositories import PasswordHasher, TokenService, UserRepository


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        self._dummy_hash: str | None = None

    def execute(self, username_or_email: str, password: str) -> tuple[User, IssuedToken]:
        user = self._users.find_by_login(username_or_email)
        if user is None:
            # Same hashing work as a real check so timing does not reveal unknown logins.
            self._password_hasher.verify(password, self._unknown_user_hash())
            raise InvalidCredentialsError()
        password_valid = self._password_hasher.verify(password, user.password_hash)

        # Unknown login and wrong password must be indistinguishable.
        if not password_valid:
            raise InvalidCredentialsError()

        return user, self._tokens.issue(user.username)

    def _unknown_user_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = self._password_hasher.hash("unknown-user-placeholder")
        return self._dummy_hash
