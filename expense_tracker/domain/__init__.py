# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import InvariantViolation
from .expenses.entities import Expense, ExpenseDraft, ExpenseStatistics
from .users.entities import AuthContext, IssuedToken, User

__all__ = [
    "AuthContext",
    "Expense",
    "ExpenseDraft",
    "ExpenseStatistics",
    "InvariantViolation",
    "IssuedToken",
    "User",
]
