# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless bearer tokens: HS256 JWTs binding a username to an absolute expiry."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from expense_tracker.domain.users.entities import IssuedToken
from expense_tracker.domain.users.exceptions import InvalidTokenError
from expense_tracker.domain.users.repositories import TokenService
from expense_tracker.shared.logging import logger


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenService):
    def __init__(
        self,
        *,
        secret: str,
        ttl_seconds: int,
        algorithm: str = "HS256",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("token secret must not be empty")
        self._secret = secret
        self._ttl = timedelta(seconds=ttl_seconds)
        self._algorithm = algorithm
        self._clock = clock

    def issue(self, username: str) -> IssuedToken:
        issued_at = self._clock()
        expires_at = issued_at + self._ttl
        claims = {
            "sub": username,
            "iat": int(issued_at.timestamp()),
            # Fractional so the token dies exactly ttl after issue, not up to a second early.
            "exp": expires_at.timestamp(),
        }
        token = jwt.encode(claims, self._secret, algorithm=self._algorithm)
        return IssuedToken(token=token, username=username, expires_at=expires_at)

    def validate(self, token: str) -> str:
        if not token:
            raise InvalidTokenError()
        try:
            # Expiry is compared against the injected clock below, not PyJWT's.
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"verify_exp": False, "verify_iat": False, "require": ["sub", "exp"]},
            )
        except jwt.InvalidTokenError as exc:
            logger.debug(f"tokens.validate: rejected ({type(exc).__name__})")
            raise InvalidTokenError() from exc

        username = claims.get("sub")
        expires = claims.get("exp")
        if not isinstance(username, str) or not username or not isinstance(expires, int | float):
            raise InvalidTokenError()
        if self._clock().timestamp() >= expires:
            logger.debug("tokens.validate: expired")
            raise InvalidTokenError()
        return username


__all__ = ["JwtTokenService"]
