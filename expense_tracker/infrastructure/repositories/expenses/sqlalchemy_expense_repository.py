# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, date, datetime
from decimal import Decimal

from sqlalchemy import Select, case, desc, extract, func, select
from sqlalchemy.orm import Session

from expense_tracker.domain.expenses.entities import Expense as DomainExpense
from expense_tracker.domain.expenses.entities import ExpenseDraft, to_money
from expense_tracker.domain.expenses.repositories import (
    ExpenseFilter,
    ExpenseRepository,
    ExpenseTotals,
)
from expense_tracker.infrastructure.db.models import Expense, as_utc
from expense_tracker.infrastructure.unit_of_work import unit_of_work_scope


def _to_domain(row: Expense) -> DomainExpense:
    return DomainExpense(
        id=row.id,
        user_id=row.user_id,
        title=row.title,
        description=row.description,
        amount=to_money(row.amount),
        expense_date=row.expense_date,
        category=row.category,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


def _owned(owner_id: int) -> Select[tuple[Expense]]:
    return select(Expense).where(Expense.user_id == owner_id)


class SqlAlchemyExpenseRepository(ExpenseRepository):
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def list_for_owner(
        self, owner_id: int, filters: ExpenseFilter | None = None
    ) -> Sequence[DomainExpense]:
        stmt = _owned(owner_id)
        if filters is not None:
            if filters.category is not None:
                stmt = stmt.where(Expense.category == filters.category)
            if filters.start_date is not None:
                stmt = stmt.where(Expense.expense_date >= filters.start_date)
            if filters.end_date is not None:
                stmt = stmt.where(Expense.expense_date <= filters.end_date)
        stmt = stmt.order_by(desc(Expense.expense_date), desc(Expense.id))

        with unit_of_work_scope(self._session_factory, read_only=True) as session:
            return [_to_domain(row) for row in session.scalars(stmt).all()]

    def get_for_owner(self, owner_id: int, expense_id: int) -> DomainExpense | None:
        with unit_of_work_scope(self._session_factory, read_only=True) as session:
            row = session.scalars(_owned(owner_id).where(Expense.id == expense_id)).first()
            return _to_domain(row) if row else None

    def add(self, owner_id: int, draft: ExpenseDraft) -> DomainExpense:
        with unit_of_work_scope(self._session_factory) as session:
            row = Expense(
                user_id=owner_id,
                title=draft.title,
                description=draft.description,
                amount=draft.amount,
                expense_date=draft.expense_date,
                category=draft.category,
            )
            session.add(row)
            session.flush()
            return _to_domain(row)

    def replace(
        self, owner_id: int, expense_id: int, draft: ExpenseDraft
    ) -> DomainExpense | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(_owned(owner_id).where(Expense.id == expense_id)).first()
            if row is None:
                return None
            row.title = draft.title
            row.description = draft.description
            row.amount = draft.amount
            row.expense_date = draft.expense_date
            row.category = draft.category
            row.updated_at = datetime.now(UTC)
            session.flush()
            return _to_domain(row)

    def delete(self, owner_id: int, expense_id: int) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(_owned(owner_id).where(Expense.id == expense_id)).first()
            if row is None:
                return False
            session.delete(row)
            return True

    def summarize(self, owner_id: int, start_date: date, end_date: date) -> ExpenseTotals:
        in_window = Expense.expense_date.between(start_date, end_date)
        stmt = select(
            func.coalesce(func.sum(Expense.amount), 0),
            func.coalesce(func.sum(case((in_window, Expense.amount), else_=0)), 0),
            func.count(Expense.id),
        ).where(Expense.user_id == owner_id)
        with unit_of_work_scope(self._session_factory, read_only=True) as session:
            total, window_total, count = session.execute(stmt).one()
        return ExpenseTotals(
            total=to_money(total), window_total=to_money(window_total), count=int(count or 0)
        )

    def totals_by_category(self, owner_id: int) -> Sequence[tuple[str, Decimal]]:
        total = func.sum(Expense.amount).label("total")
        stmt = (
            select(Expense.category, total)
            .where(Expense.user_id == owner_id)
            .group_by(Expense.category)
            .order_by(desc(total))
        )
        with unit_of_work_scope(self._session_factory, read_only=True) as session:
            return [(category, to_money(amount)) for category, amount in session.execute(stmt)]

    def totals_by_month(self, owner_id: int) -> Sequence[tuple[int, int, Decimal]]:
        year = extract("year", Expense.expense_date).label("year")
        month = extract("month", Expense.expense_date).label("month")
        stmt = (
            select(year, month, func.sum(Expense.amount).label("total"))
            .where(Expense.user_id == owner_id)
            .group_by(year, month)
            .order_by(year, month)
        )
        with unit_of_work_scope(self._session_factory, read_only=True) as session:
            return [
                (int(y), int(m), to_money(amount)) for y, m, amount in session.execute(stmt)
            ]
