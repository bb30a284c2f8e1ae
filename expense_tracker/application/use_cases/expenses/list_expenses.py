# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import date

from expense_tracker.domain.expenses.entities import Expense
from expense_tracker.domain.expenses.periods import month_bounds
from expense_tracker.domain.expenses.repositories import ExpenseFilter, ExpenseRepository
from expense_tracker.shared.errors.base import ValidationError


class ListExpensesUseCase:
    """Owner's expenses, newest expense date first (ties: newest id first)."""

    def __init__(self, *, expenses: ExpenseRepository) -> None:
        self._expenses = expenses

    def execute(self, owner_id: int) -> Sequence[Expense]:
        return self._expenses.list_for_owner(owner_id)

    def by_category(self, owner_id: int, category: str) -> Sequence[Expense]:
        return self._expenses.list_for_owner(owner_id, ExpenseFilter(category=category))

    def by_date_range(self, owner_id: int, start_date: date, end_date: date) -> Sequence[Expense]:
        if start_date > end_date:
            raise ValidationError(
                context={
                    "fields": ["startDate", "endDate"],
                    "errors": [
                        {"field": "startDate", "message": "startDate must not be after endDate"}
                    ],
                }
            )
        return self._expenses.list_for_owner(
            owner_id, ExpenseFilter(start_date=start_date, end_date=end_date)
        )


class ListCurrentMonthExpensesUseCase:
    def __init__(
        self, *, expenses: ExpenseRepository, today: Callable[[], date] = date.today
    ) -> None:
        self._expenses = expenses
        self._today = today

    def execute(self, owner_id: int) -> Sequence[Expense]:
        start, end = month_bounds(self._today())
        return self._expenses.list_for_owner(
            owner_id, ExpenseFilter(start_date=start, end_date=end)
        )
