# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from expense_tracker.domain.users.entities import IssuedToken, User
from expense_tracker.domain.users.exceptions import DuplicateEmailError, DuplicateUsernameError
from expense_tracker.domain.users.repositories import PasswordHasher, TokenService, UserRepository


@dataclass(slots=True, frozen=True)
class RegisterUserInput:
    username: str
    email: str
    password: str
    first_name: str | None = None
    last_name: str | None = None


class RegisterUserUseCase:
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

    def execute(self, data: RegisterUserInput) -> tuple[User, IssuedToken]:
        # Early exit only; the unique constraints in the store are authoritative.
        if self._users.exists_by_username(data.username):
            raise DuplicateUsernameError()
        if self._users.exists_by_email(data.email):
            raise DuplicateEmailError()

        now = datetime.now(UTC)
        user = User(
            id=0,
            username=data.username,
            email=data.email,
            password_hash=self._password_hasher.hash(data.password),
            first_name=data.first_name,
            last_name=data.last_name,
            created_at=now,
        )
        persisted = self._users.add(user)
        return persisted, self._tokens.issue(persisted.username)
