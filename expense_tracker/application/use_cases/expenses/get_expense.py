# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from expense_tracker.domain.expenses.entities import Expense
from expense_tracker.domain.expenses.exceptions import ExpenseNotFoundError
from expense_tracker.domain.expenses.repositories import ExpenseRepository


class GetExpenseUseCase:
    def __init__(self, *, expenses: ExpenseRepository) -> None:
        self._expenses = expenses

    def execute(self, owner_id: int, expense_id: int) -> Expense:
        expense = self._expenses.get_for_owner(owner_id, expense_id)
        if expense is None:
            raise ExpenseNotFoundError(context={"expense_id": expense_id})
        return expense
