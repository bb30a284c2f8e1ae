from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator, Sequence
from dataclasses import replace
from datetime import UTC, date, datetime
from decimal import Decimal

import pytest

# Configuration is read once at import time, so the environment must be ready first.
_TMP_DIR = tempfile.mkdtemp(prefix="expense-tracker-tests-")
os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["LOG_FILE"] = os.path.join(_TMP_DIR, "app.log")
os.environ["SECRET_KEY"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["TOKEN_TTL_SECONDS"] = "3600"

from expense_tracker.domain.expenses.entities import Expense, ExpenseDraft  # noqa: E402
from expense_tracker.domain.expenses.repositories import (  # noqa: E402
    ExpenseFilter,
    ExpenseRepository,
    ExpenseTotals,
)
from expense_tracker.domain.users.entities import User  # noqa: E402
from expense_tracker.domain.users.repositories import (  # noqa: E402
    PasswordHasher,
    UserRepository,
)
from expense_tracker.infrastructure.auth.tokens import JwtTokenService  # noqa: E402

FIXED_NOW = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._seq = 1

    def find_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def find_by_username(self, username: str) -> User | None:
        return next((u for u in self._users.values() if u.username == username), None)

    def find_by_login(self, username_or_email: str) -> User | None:
        return self.find_by_username(username_or_email) or next(
            (u for u in self._users.values() if u.email == username_or_email), None
        )

    def exists_by_username(self, username: str) -> bool:
        return self.find_by_username(username) is not None

    def exists_by_email(self, email: str) -> bool:
        return any(u.email == email for u in self._users.values())

    def add(self, user: User) -> User:
        new_user = replace(user, id=self._seq)
        self._seq += 1
        self._users[new_user.id] = new_user
        return new_user

    def update_profile(
        self,
        user_id: int,
        *,
        first_name: str | None,
        last_name: str | None,
        email: str,
    ) -> User | None:
        user = self._users.get(user_id)
        if user is None:
            return None
        updated = replace(user, first_name=first_name, last_name=last_name, email=email)
        self._users[user_id] = updated
        return updated

    def update_password_hash(self, user_id: int, password_hash: str) -> bool:
        user = self._users.get(user_id)
        if user is None:
            return False
        self._users[user_id] = replace(user, password_hash=password_hash)
        return True

    def delete(self, user_id: int) -> bool:
        return self._users.pop(user_id, None) is not None


class InMemoryExpenseRepository(ExpenseRepository):
    def __init__(self) -> None:
        self._rows: dict[int, Expense] = {}
        self._seq = 1

    def _owned(self, owner_id: int) -> list[Expense]:
        return [e for e in self._rows.values() if e.user_id == owner_id]

    def list_for_owner(
        self, owner_id: int, filters: ExpenseFilter | None = None
    ) -> Sequence[Expense]:
        rows = self._owned(owner_id)
        if filters is not None:
            if filters.category is not None:
                rows = [e for e in rows if e.category == filters.category]
            if filters.start_date is not None:
                rows = [e for e in rows if e.expense_date >= filters.start_date]
            if filters.end_date is not None:
                rows = [e for e in rows if e.expense_date <= filters.end_date]
        return sorted(rows, key=lambda e: (e.expense_date, e.id), reverse=True)

    def get_for_owner(self, owner_id: int, expense_id: int) -> Expense | None:
        expense = self._rows.get(expense_id)
        return expense if expense is not None and expense.user_id == owner_id else None

    def add(self, owner_id: int, draft: ExpenseDraft) -> Expense:
        expense = Expense(
            id=self._seq,
            user_id=owner_id,
            title=draft.title,
            description=draft.description,
            amount=draft.amount,
            expense_date=draft.expense_date,
            category=draft.category,
            created_at=FIXED_NOW,
            updated_at=FIXED_NOW,
        )
        self._rows[expense.id] = expense
        self._seq += 1
        return expense

    def replace(self, owner_id: int, expense_id: int, draft: ExpenseDraft) -> Expense | None:
        current = self.get_for_owner(owner_id, expense_id)
        if current is None:
            return None
        updated = replace(
            current,
            title=draft.title,
            description=draft.description,
            amount=draft.amount,
            expense_date=draft.expense_date,
            category=draft.category,
        )
        self._rows[expense_id] = updated
        return updated

    def delete(self, owner_id: int, expense_id: int) -> bool:
        if self.get_for_owner(owner_id, expense_id) is None:
            return False
        del self._rows[expense_id]
        return True

    def summarize(self, owner_id: int, start_date: date, end_date: date) -> ExpenseTotals:
        rows = self._owned(owner_id)
        window = [e for e in rows if start_date <= e.expense_date <= end_date]
        return ExpenseTotals(
            total=sum((e.amount for e in rows), Decimal("0.00")),
            window_total=sum((e.amount for e in window), Decimal("0.00")),
            count=len(rows),
        )

    def totals_by_category(self, owner_id: int) -> Sequence[tuple[str, Decimal]]:
        totals: dict[str, Decimal] = {}
        for e in self._owned(owner_id):
            totals[e.category] = totals.get(e.category, Decimal("0.00")) + e.amount
        return sorted(totals.items(), key=lambda item: item[1], reverse=True)

    def totals_by_month(self, owner_id: int) -> Sequence[tuple[int, int, Decimal]]:
        totals: dict[tuple[int, int], Decimal] = {}
        # Deliberately unordered so callers have to sort.
        for e in self._owned(owner_id):
            key = (e.expense_date.year, e.expense_date.month)
            totals[key] = totals.get(key, Decimal("0.00")) + e.amount
        return [(y, m, amount) for (y, m), amount in reversed(list(totals.items()))]


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


class FrozenClock:
    def __init__(self, now: datetime = FIXED_NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def expenses() -> InMemoryExpenseRepository:
    return InMemoryExpenseRepository()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture()
def tokens(clock: FrozenClock) -> JwtTokenService:
    return JwtTokenService(
        secret="unit-test-secret-with-at-least-32-bytes", ttl_seconds=3600, clock=clock
    )


@pytest.fixture()
def reset_database() -> Iterator[None]:
    from expense_tracker.infrastructure.db import ENGINE, Base, SessionLocal

    SessionLocal.remove()
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    SessionLocal.remove()
    Base.metadata.drop_all(bind=ENGINE)
