# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import delete, exists, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from expense_tracker.domain.users.entities import User as DomainUser
from expense_tracker.domain.users.exceptions import DuplicateEmailError, DuplicateUsernameError
from expense_tracker.domain.users.repositories import UserRepository
from expense_tracker.infrastructure.db.models import Expense, User, as_utc
from expense_tracker.infrastructure.unit_of_work import unit_of_work_scope
from expense_tracker.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        email=row.email,
        password_hash=row.password_hash,
        first_name=row.first_name,
        last_name=row.last_name,
        created_at=as_utc(row.created_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory, read_only=True) as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def find_by_username(self, username: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory, read_only=True) as session:
            row = session.scalars(select(User).where(User.username == username)).first()
            return _to_domain(row) if row else None

    def find_by_login(self, username_or_email: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory, read_only=True) as session:
            row = session.scalars(
                select(User)
                .where(or_(User.username == username_or_email, User.email == username_or_email))
                .order_by((User.username == username_or_email).desc(), User.id.asc())
            ).first()
            return _to_domain(row) if row else None

    def exists_by_username(self, username: str) -> bool:
        with unit_of_work_scope(self._session_factory, read_only=True) as session:
            return bool(session.scalar(select(exists().where(User.username == username))))

    def exists_by_email(self, email: str) -> bool:
        with unit_of_work_scope(self._session_factory, read_only=True) as session:
            return bool(session.scalar(select(exists().where(User.email == email))))

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(
                    username=user.username,
                    email=user.email,
                    password_hash=user.password_hash,
                    first_name=user.first_name,
                    last_name=user.last_name,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            # Lost a registration race; the unique constraint decided.
            logger.info(f"users.add: unique constraint hit for username={user.username}")
            if self.exists_by_username(user.username):
                raise DuplicateUsernameError() from exc
            raise DuplicateEmailError() from exc

    def update_profile(
        self,
        user_id: int,
        *,
        first_name: str | None,
        last_name: str | None,
        email: str,
    ) -> DomainUser | None:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = session.get(User, user_id)
                if row is None:
                    return None
                row.first_name = first_name
                row.last_name = last_name
                row.email = email
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            raise DuplicateEmailError() from exc

    def update_password_hash(self, user_id: int, password_hash: str) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            if row is None:
                return False
            row.password_hash = password_hash
            return True

    def delete(self, user_id: int) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            if row is None:
                return False
            # ON DELETE CASCADE covers the store; the explicit delete keeps dialects
            # without enforced foreign keys consistent too.
            removed = session.execute(delete(Expense).where(Expense.user_id == user_id)).rowcount
            session.delete(row)
            logger.info(f"users.delete: user_id={user_id} expenses_removed={removed}")
            return True
