"""Advisory availability checks used by the registration form."""

from __future__ import annotations

from expense_tracker.domain.users.repositories import UserRepository


class CheckUsernameAvailabilityUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, username: str) -> bool:
        return not self._users.exists_by_username(username)


class CheckEmailAvailabilityUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, email: str) -> bool:
        return not self._users.exists_by_email(email)
