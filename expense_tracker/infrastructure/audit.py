# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import Enum
from typing import Any

from expense_tracker.shared.logging import logger


class AuditAction(str, Enum):
    # Authentication
    REGISTER = "register"
    LOGIN_SUCCESS = "login_success"
    LOGIN_FAILED = "login_failed"

    # Account
    PROFILE_UPDATED = "profile_updated"
    PASSWORD_CHANGED = "password_changed"
    ACCOUNT_DELETED = "account_deleted"

    # Expenses
    EXPENSE_CREATED = "expense_created"
    EXPENSE_UPDATED = "expense_updated"
    EXPENSE_DELETED = "expense_deleted"


_SENSITIVE_KEYS = ("password", "token", "secret", "key", "hash")


def _sanitize_details(details: dict[str, Any]) -> dict[str, Any]:
    sanitized = {}
    for key, value in details.items():
        if any(sensitive in key.lower() for sensitive in _SENSITIVE_KEYS):
            sanitized[key] = "***REDACTED***"
        else:
            sanitized[key] = value
    return sanitized


def audit_log(
    action: AuditAction,
    user_id: int | None = None,
    ip_address: str | None = None,
    details: dict[str, Any] | None = None,
    success: bool = True,
) -> None:
    """Write one ``AUDIT:`` line; failures are logged at warning level."""

    message = (
        f"AUDIT: {action.value} | user_id={user_id} | ip={ip_address} | success={success}"
    )
    safe_details = _sanitize_details(details) if details else {}
    if safe_details:
        message += f" | details={safe_details}"

    if success:
        logger.info(message)
    else:
        logger.warning(message)


__all__ = ["AuditAction", "audit_log"]
