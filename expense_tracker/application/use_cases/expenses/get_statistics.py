# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import date

from expense_tracker.domain.expenses.entities import ExpenseStatistics
from expense_tracker.domain.expenses.periods import month_bounds
from expense_tracker.domain.expenses.repositories import ExpenseRepository


class GetExpenseStatisticsUseCase:
    def __init__(
        self, *, expenses: ExpenseRepository, today: Callable[[], date] = date.today
    ) -> None:
        self._expenses = expenses
        self._today = today

    def execute(self, owner_id: int) -> ExpenseStatistics:
        start, end = month_bounds(self._today())
        totals = self._expenses.summarize(owner_id, start, end)
        return ExpenseStatistics.from_totals(
            total=totals.total,
            current_month_total=totals.window_total,
            count=totals.count,
        )
