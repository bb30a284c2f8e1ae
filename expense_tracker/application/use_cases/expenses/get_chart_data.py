# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Aggregates backing the category and monthly charts."""

from __future__ import annotations

from decimal import Decimal

from expense_tracker.domain.expenses.entities import to_money
from expense_tracker.domain.expenses.periods import month_key
from expense_tracker.domain.expenses.repositories import ExpenseRepository


class GetCategoryTotalsUseCase:
    """Category -> sum. Callers must not rely on the mapping's order."""

    def __init__(self, *, expenses: ExpenseRepository) -> None:
        self._expenses = expenses

    def execute(self, owner_id: int) -> dict[str, Decimal]:
        return {
            category: to_money(amount)
            for category, amount in self._expenses.totals_by_category(owner_id)
        }


class GetMonthlyTotalsUseCase:
    """``YYYY-MM`` -> sum, in ascending month order."""

    def __init__(self, *, expenses: ExpenseRepository) -> None:
        self._expenses = expenses

    def execute(self, owner_id: int) -> dict[str, Decimal]:
        rows = sorted(self._expenses.totals_by_month(owner_id), key=lambda row: (row[0], row[1]))
        return {month_key(year, month): to_money(amount) for year, month, amount in rows}
