# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from expense_tracker.domain.expenses.exceptions import ExpenseNotFoundError
from expense_tracker.domain.expenses.repositories import ExpenseRepository


class DeleteExpenseUseCase:
    def __init__(self, *, expenses: ExpenseRepository) -> None:
        self._expenses = expenses

    def execute(self, owner_id: int, expense_id: int) -> None:
        if not self._expenses.delete(owner_id, expense_id):
            raise ExpenseNotFoundError(context={"expense_id": expense_id})
