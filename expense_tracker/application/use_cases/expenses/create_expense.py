# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from expense_tracker.domain.expenses.entities import Expense
from expense_tracker.domain.expenses.repositories import ExpenseRepository

from .inputs import ExpenseInput


class CreateExpenseUseCase:
    def __init__(self, *, expenses: ExpenseRepository) -> None:
        self._expenses = expenses

    def execute(self, owner_id: int, data: ExpenseInput) -> Expense:
        return self._expenses.add(owner_id, data.to_draft())
