# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from expense_tracker.shared.errors.base import DomainError


class ExpenseNotFoundError(DomainError):
    """Raised for missing expenses and for expenses owned by someone else alike."""

    code = "expense_not_found"
    status = HTTPStatus.NOT_FOUND
