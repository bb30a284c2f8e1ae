# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Expense entities and the invariants every stored expense satisfies."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from expense_tracker.domain.exceptions import InvariantViolation

DEFAULT_CATEGORY = "General"
TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 1000
CATEGORY_MAX_LENGTH = 100
AMOUNT_MAX_DIGITS = 10

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value: Decimal | int | float | str | None) -> Decimal:
    """Normalise a store or client value to a two-digit Decimal, rounding half up."""

    if value is None:
        return ZERO
    try:
        return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise InvariantViolation("amount must be a decimal number", field="amount") from exc


@dataclass(slots=True, frozen=True)
class ExpenseDraft:
    """Client-controlled fields of an expense, used for create and full replace."""

    title: str
    amount: Decimal
    expense_date: date
    description: str | None = None
    category: str = DEFAULT_CATEGORY

    def __post_init__(self) -> None:
        title = (self.title or "").strip()
        if not title:
            raise InvariantViolation("title is required", field="title")
        if len(title) > TITLE_MAX_LENGTH:
            raise InvariantViolation(
                f"title cannot exceed {TITLE_MAX_LENGTH} characters", field="title"
            )
        object.__setattr__(self, "title", title)

        if self.description is not None and len(self.description) > DESCRIPTION_MAX_LENGTH:
            raise InvariantViolation(
                f"description cannot exceed {DESCRIPTION_MAX_LENGTH} characters",
                field="description",
            )

        category = (self.category or "").strip() or DEFAULT_CATEGORY
        if len(category) > CATEGORY_MAX_LENGTH:
            raise InvariantViolation(
                f"category cannot exceed {CATEGORY_MAX_LENGTH} characters", field="category"
            )
        object.__setattr__(self, "category", category)

        if self.amount is None:
            raise InvariantViolation("amount is required", field="amount")
        try:
            raw = Decimal(str(self.amount))
        except InvalidOperation as exc:
            raise InvariantViolation("amount must be a decimal number", field="amount") from exc
        if not raw.is_finite():
            raise InvariantViolation("amount must be a decimal number", field="amount")
        if raw <= 0:
            raise InvariantViolation("amount must be greater than 0", field="amount")
        if raw != raw.quantize(CENT):
            raise InvariantViolation("amount allows at most 2 decimal places", field="amount")
        amount = raw.quantize(CENT)
        if len(amount.as_tuple().digits) > AMOUNT_MAX_DIGITS:
            raise InvariantViolation(
                f"amount allows at most {AMOUNT_MAX_DIGITS} digits", field="amount"
            )
        object.__setattr__(self, "amount", amount)

        if not isinstance(self.expense_date, date):
            raise InvariantViolation("expense date is required", field="expense_date")


@dataclass(slots=True, frozen=True)
class Expense:
    """Persisted expense owned by exactly one user."""

    id: int
    user_id: int
    title: str
    description: str | None
    amount: Decimal
    expense_date: date
    category: str
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True, frozen=True)
class ExpenseStatistics:
    total_expenses: Decimal
    current_month_total: Decimal
    total_count: int
    average_expense: Decimal

    @classmethod
    def from_totals(cls, total: Decimal, current_month_total: Decimal, count: int) -> ExpenseStatistics:
        total = to_money(total)
        average = (total / count).quantize(CENT, rounding=ROUND_HALF_UP) if count > 0 else ZERO
        return cls(
            total_expenses=total,
            current_month_total=to_money(current_month_total),
            total_count=count,
            average_expense=average,
        )
