# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from pydantic import Field, field_serializer

from expense_tracker.application.use_cases.expenses.inputs import ExpenseInput
from expense_tracker.domain.expenses.entities import (
    CATEGORY_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    Expense,
    ExpenseStatistics,
)

from .base import ApiModel


def _money(value: Decimal) -> str:
    return f"{value:.2f}"


class ExpenseRequestDTO(ApiModel):
    """Body of create and full-replace update."""

    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    amount: Decimal = Field(gt=0, max_digits=10, decimal_places=2, allow_inf_nan=False)
    expense_date: date
    category: str | None = Field(default=None, max_length=CATEGORY_MAX_LENGTH)

    def to_input(self) -> ExpenseInput:
        return ExpenseInput(
            title=self.title,
            amount=self.amount,
            expense_date=self.expense_date,
            description=self.description,
            category=self.category,
        )


class ExpenseDTO(ApiModel):
    id: int
    title: str
    description: str | None
    amount: Decimal
    expense_date: date
    category: str
    created_at: datetime
    updated_at: datetime

    @field_serializer("amount")
    def _serialize_amount(self, value: Decimal) -> str:
        return _money(value)

    @classmethod
    def from_entity(cls, expense: Expense) -> ExpenseDTO:
        return cls(
            id=expense.id,
            title=expense.title,
            description=expense.description,
            amount=expense.amount,
            expense_date=expense.expense_date,
            category=expense.category,
            created_at=expense.created_at,
            updated_at=expense.updated_at,
        )


class ExpenseStatisticsDTO(ApiModel):
    total_expenses: Decimal
    current_month_total: Decimal
    total_count: int
    average_expense: Decimal

    @field_serializer("total_expenses", "current_month_total", "average_expense")
    def _serialize_money(self, value: Decimal) -> str:
        return _money(value)

    @classmethod
    def from_entity(cls, stats: ExpenseStatistics) -> ExpenseStatisticsDTO:
        return cls(
            total_expenses=stats.total_expenses,
            current_month_total=stats.current_month_total,
            total_count=stats.total_count,
            average_expense=stats.average_expense,
        )


class DateRangeQueryDTO(ApiModel):
    start_date: date
    end_date: date


def money_mapping(totals: dict[str, Decimal]) -> dict[str, str]:
    return {key: _money(value) for key, value in totals.items()}
