# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError

from expense_tracker.domain.users.entities import IssuedToken, User

from .base import ApiModel

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def check_email(value: str) -> str:
    if not EMAIL_PATTERN.match(value):
        raise PydanticCustomError(
            "email_invalid", "Email must look like name@example.com", {}
        )
    return value


class RegisterRequestDTO(ApiModel):
    username: str = Field(min_length=3, max_length=50)
    email: str = Field(min_length=3, max_length=100)
    password: str = Field(min_length=6, max_length=128)
    first_name: str | None = Field(default=None, max_length=50)
    last_name: str | None = Field(default=None, max_length=50)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        if not USERNAME_PATTERN.match(value):
            raise PydanticCustomError(
                "username_invalid_chars",
                "Username must contain only letters, digits and underscores",
                {"pattern": USERNAME_PATTERN.pattern},
            )
        return value

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return check_email(value)


class LoginRequestDTO(ApiModel):
    username_or_email: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=128)  # No strength check on login


class AuthResponseDTO(ApiModel):
    token: str
    type: str = "Bearer"
    id: int
    username: str
    email: str

    @classmethod
    def build(cls, user: User, token: IssuedToken) -> AuthResponseDTO:
        return cls(token=token.token, id=user.id, username=user.username, email=user.email)


class TokenValidationDTO(ApiModel):
    valid: bool = True
    id: int
    username: str
    email: str


class AvailabilityDTO(ApiModel):
    available: bool
