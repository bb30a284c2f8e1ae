# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import IssuedToken, User


class UserRepository(Protocol):
    def find_by_id(self, user_id: int) -> User | None: ...
    def find_by_username(self, username: str) -> User | None: ...
    def find_by_login(self, username_or_email: str) -> User | None: ...
    def exists_by_username(self, username: str) -> bool: ...
    def exists_by_email(self, email: str) -> bool: ...
    def add(self, user: User) -> User: ...
    def update_profile(
        self,
        user_id: int,
        *,
        first_name: str | None,
        last_name: str | None,
        email: str,
    ) -> User | None: ...
    def update_password_hash(self, user_id: int, password_hash: str) -> bool: ...
    def delete(self, user_id: int) -> bool: ...


class TokenService(Protocol):
    def issue(self, username: str) -> IssuedToken: ...
    def validate(self, token: str) -> str: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
