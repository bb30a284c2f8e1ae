# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from expense_tracker.domain.exceptions import InvariantViolation
from expense_tracker.domain.expenses.entities import DEFAULT_CATEGORY, ExpenseDraft
from expense_tracker.shared.errors.base import ValidationError


@dataclass(slots=True, frozen=True)
class ExpenseInput:
    title: str
    amount: Decimal
    expense_date: date
    description: str | None = None
    category: str | None = DEFAULT_CATEGORY

    def to_draft(self) -> ExpenseDraft:
        try:
            return ExpenseDraft(
                title=self.title,
                amount=self.amount,
                expense_date=self.expense_date,
                description=self.description,
                category=self.category or DEFAULT_CATEGORY,
            )
        except InvariantViolation as exc:
            raise ValidationError(
                context={
                    "fields": [exc.field] if exc.field else [],
                    "errors": [{"field": exc.field or "unknown", "message": str(exc)}],
                }
            ) from exc
