"""Use-case for removing a user together with every expense they own."""

from __future__ import annotations

from expense_tracker.domain.users.exceptions import UserNotFoundError
from expense_tracker.domain.users.repositories import UserRepository


class DeleteAccountUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, user_id: int) -> None:
        if not self._users.delete(user_id):
            raise UserNotFoundError()
