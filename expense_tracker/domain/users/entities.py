# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    email: str
    password_hash: str
    first_name: str | None
    last_name: str | None
    created_at: datetime


@dataclass(slots=True, frozen=True)
class IssuedToken:
    """Signed bearer token handed out at login or registration. Never persisted."""

    token: str
    username: str
    expires_at: datetime


@dataclass(slots=True, frozen=True)
class AuthContext:
    """Identity resolved by the authentication gate for one request."""

    user_id: int
    username: str
