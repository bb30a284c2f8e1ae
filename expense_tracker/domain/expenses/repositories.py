# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Protocol

from .entities import Expense, ExpenseDraft


@dataclass(slots=True, frozen=True)
class ExpenseTotals:
    """Overall sum, sum inside one date window and overall count, read together."""

    total: Decimal
    window_total: Decimal
    count: int


@dataclass(slots=True, frozen=True)
class ExpenseFilter:
    category: str | None = None
    start_date: date | None = None
    end_date: date | None = None


class ExpenseRepository(Protocol):
    """Every method is scoped to ``owner_id``; rows of other users are invisible."""

    def list_for_owner(
        self, owner_id: int, filters: ExpenseFilter | None = None
    ) -> Sequence[Expense]: ...

    def get_for_owner(self, owner_id: int, expense_id: int) -> Expense | None: ...

    def add(self, owner_id: int, draft: ExpenseDraft) -> Expense: ...

    def replace(self, owner_id: int, expense_id: int, draft: ExpenseDraft) -> Expense | None: ...

    def delete(self, owner_id: int, expense_id: int) -> bool: ...

    def summarize(self, owner_id: int, start_date: date, end_date: date) -> ExpenseTotals: ...

    def totals_by_category(self, owner_id: int) -> Sequence[tuple[str, Decimal]]: ...

    def totals_by_month(self, owner_id: int) -> Sequence[tuple[int, int, Decimal]]: ...
