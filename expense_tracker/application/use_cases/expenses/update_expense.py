# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from expense_tracker.domain.expenses.entities import Expense
from expense_tracker.domain.expenses.exceptions import ExpenseNotFoundError
from expense_tracker.domain.expenses.repositories import ExpenseRepository

from .inputs import ExpenseInput


class UpdateExpenseUseCase:
    """Full replace: fields missing from the input are overwritten, not kept."""

    def __init__(self, *, expenses: ExpenseRepository) -> None:
        self._expenses = expenses

    def execute(self, owner_id: int, expense_id: int, data: ExpenseInput) -> Expense:
        draft = data.to_draft()
        updated = self._expenses.replace(owner_id, expense_id, draft)
        if updated is None:
            raise ExpenseNotFoundError(context={"expense_id": expense_id})
        return updated
