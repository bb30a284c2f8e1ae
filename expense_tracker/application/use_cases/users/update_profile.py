# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from expense_tracker.domain.users.entities import User
from expense_tracker.domain.users.exceptions import DuplicateEmailError, UserNotFoundError
from expense_tracker.domain.users.repositories import UserRepository


@dataclass(slots=True, frozen=True)
class UpdateProfileInput:
    """Fields left as ``None`` keep their stored value."""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None


class UpdateProfileUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, user_id: int, data: UpdateProfileInput) -> User:
        user = self._users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError()

        email = user.email
        if data.email is not None and data.email != user.email:
            if self._users.exists_by_email(data.email):
                raise DuplicateEmailError()
            email = data.email

        updated = self._users.update_profile(
            user_id,
            first_name=data.first_name if data.first_name is not None else user.first_name,
            last_name=data.last_name if data.last_name is not None else user.last_name,
            email=email,
        )
        if updated is None:
            raise UserNotFoundError()
        return updated
