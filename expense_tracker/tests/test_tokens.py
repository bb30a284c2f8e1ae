from __future__ import annotations

from datetime import timedelta

import jwt
import pytest

from expense_tracker.domain.users.exceptions import InvalidTokenError
from expense_tracker.infrastructure.auth.tokens import JwtTokenService


def test_issued_token_validates_to_username(tokens: JwtTokenService) -> None:
    issued = tokens.issue("alice")

    assert issued.username == "alice"
    assert tokens.validate(issued.token) == "alice"


def test_token_is_valid_until_exactly_expiry(tokens: JwtTokenService, clock) -> None:
    issued = tokens.issue("alice")
    start = clock.now

    clock.now = start + timedelta(seconds=3599)
    assert tokens.validate(issued.token) == "alice"

    clock.now = start + timedelta(seconds=3600)
    with pytest.raises(InvalidTokenError):
        tokens.validate(issued.token)


def test_token_signed_with_other_secret_is_rejected(tokens: JwtTokenService, clock) -> None:
    other = JwtTokenService(
        secret="a-completely-different-secret-value-1234", ttl_seconds=3600, clock=clock
    )

    with pytest.raises(InvalidTokenError):
        tokens.validate(other.issue("alice").token)


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
def test_malformed_tokens_are_rejected(tokens: JwtTokenService, token: str) -> None:
    with pytest.raises(InvalidTokenError):
        tokens.validate(token)


def test_token_without_subject_is_rejected(tokens: JwtTokenService, clock) -> None:
    raw = jwt.encode(
        {"exp": int(clock.now.timestamp()) + 60},
        "unit-test-secret-with-at-least-32-bytes",
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenError):
        tokens.validate(raw)


def test_expiry_keeps_sub_second_issue_time(clock) -> None:
    clock.now = clock.now + timedelta(milliseconds=900)
    service = JwtTokenService(
        secret="unit-test-secret-with-at-least-32-bytes", ttl_seconds=3600, clock=clock
    )
    issued = service.issue("alice")
    start = clock.now

    assert issued.expires_at == start + timedelta(seconds=3600)

    clock.now = start + timedelta(seconds=3599, milliseconds=500)
    assert service.validate(issued.token) == "alice"

    clock.now = start + timedelta(seconds=3600)
    with pytest.raises(InvalidTokenError):
        service.validate(issued.token)
