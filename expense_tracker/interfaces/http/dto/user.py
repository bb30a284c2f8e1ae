# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from pydantic import Field, field_validator

from expense_tracker.domain.users.entities import User

from .auth import check_email
from .base import ApiModel


class ProfileDTO(ApiModel):
    id: int
    username: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> ProfileDTO:
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            created_at=user.created_at,
        )


class UpdateProfileRequestDTO(ApiModel):
    """Omitted fields are left untouched."""

    first_name: str | None = Field(default=None, max_length=50)
    last_name: str | None = Field(default=None, max_length=50)
    email: str | None = Field(default=None, min_length=3, max_length=100)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str | None) -> str | None:
        return check_email(value) if value is not None else None


class ChangePasswordRequestDTO(ApiModel):
    current_password: str = Field(min_length=1, max_length=128)
    new_password: str = Field(min_length=6, max_length=128)
