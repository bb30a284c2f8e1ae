# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import request

from expense_tracker.domain.users.entities import AuthContext
from expense_tracker.domain.users.exceptions import InvalidTokenError
from expense_tracker.domain.users.repositories import TokenService, UserRepository
from expense_tracker.shared.errors import UnauthorizedError
from expense_tracker.shared.logging import logger

BEARER_PREFIX = "Bearer "


def bearer_token(header: str | None) -> str:
    """Token from an ``Authorization`` header value, or ``""`` when absent."""

    if not header or not header.startswith(BEARER_PREFIX):
        return ""
    return header[len(BEARER_PREFIX):].strip()


class BearerAuthenticator:
    """Resolves ``Authorization: Bearer`` to an :class:`AuthContext` per request.

    Nothing is cached between requests; a token whose user was deleted is rejected
    because the lookup fails.
    """

    def __init__(self, *, tokens: TokenService, users: UserRepository) -> None:
        self._tokens = tokens
        self._users = users

    def authenticate(self, header: str | None) -> AuthContext:
        token = bearer_token(header)
        if not token:
            logger.warning(f"No bearer token on {request.method} {request.path}")
            raise UnauthorizedError()

        try:
            username = self._tokens.validate(token)
        except InvalidTokenError as exc:
            logger.warning(f"Invalid or expired token on {request.method} {request.path}")
            raise UnauthorizedError() from exc

        user = self._users.find_by_username(username)
        if user is None:
            logger.warning(f"Token for unknown user on {request.method} {request.path}")
            raise UnauthorizedError()
        return AuthContext(user_id=user.id, username=user.username)

    def protect(self, view: Callable[..., Any]) -> Callable[..., Any]:
        """Wrap ``view`` so it receives the caller as ``auth=AuthContext``."""

        @wraps(view)
        def inner(*args: Any, **kwargs: Any) -> Any:
            kwargs["auth"] = self.authenticate(request.headers.get("Authorization"))
            return view(*args, **kwargs)

        return inner


__all__ = ["BEARER_PREFIX", "BearerAuthenticator", "bearer_token"]
