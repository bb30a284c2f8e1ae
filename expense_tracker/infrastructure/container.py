# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from expense_tracker.application.services.password_hashing import WerkzeugPasswordHasher
from expense_tracker.application.use_cases.expenses.create_expense import CreateExpenseUseCase
from expense_tracker.application.use_cases.expenses.delete_expense import DeleteExpenseUseCase
from expense_tracker.application.use_cases.expenses.get_chart_data import (
    GetCategoryTotalsUseCase,
    GetMonthlyTotalsUseCase,
)
from expense_tracker.application.use_cases.expenses.get_expense import GetExpenseUseCase
from expense_tracker.application.use_cases.expenses.get_statistics import (
    GetExpenseStatisticsUseCase,
)
from expense_tracker.application.use_cases.expenses.list_expenses import (
    ListCurrentMonthExpensesUseCase,
    ListExpensesUseCase,
)
from expense_tracker.application.use_cases.expenses.update_expense import UpdateExpenseUseCase
from expense_tracker.application.use_cases.users.change_password import ChangePasswordUseCase
from expense_tracker.application.use_cases.users.check_availability import (
    CheckEmailAvailabilityUseCase,
    CheckUsernameAvailabilityUseCase,
)
from expense_tracker.application.use_cases.users.delete_account import DeleteAccountUseCase
from expense_tracker.application.use_cases.users.get_profile import GetProfileUseCase
from expense_tracker.application.use_cases.users.login_user import LoginUserUseCase
from expense_tracker.application.use_cases.users.register_user import RegisterUserUseCase
from expense_tracker.application.use_cases.users.update_profile import UpdateProfileUseCase
from expense_tracker.application.use_cases.users.validate_token import ValidateTokenUseCase
from expense_tracker.infrastructure.auth import BearerAuthenticator, JwtTokenService
from expense_tracker.infrastructure.db import SessionLocal
from expense_tracker.infrastructure.repositories.expenses.sqlalchemy_expense_repository import (
    SqlAlchemyExpenseRepository,
)
from expense_tracker.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from expense_tracker.interfaces.http.controllers.auth_controller import AuthController
from expense_tracker.interfaces.http.controllers.expenses_controller import ExpensesController
from expense_tracker.interfaces.http.controllers.misc_controller import MiscController
from expense_tracker.interfaces.http.controllers.user_controller import UserController
from expense_tracker.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config

    @cached_property
    def config(self) -> AppConfig:
        return self._config or load_config()

    # Services

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            secret=self.config.secret_key,
            ttl_seconds=self.config.auth.token_ttl_seconds,
            algorithm=self.config.auth.token_algorithm,
        )

    @cached_property
    def authenticator(self) -> BearerAuthenticator:
        return BearerAuthenticator(tokens=self.token_service, users=self.user_repository)

    # Repositories

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(SessionLocal)

    @cached_property
    def expense_repository(self) -> SqlAlchemyExpenseRepository:
        return SqlAlchemyExpenseRepository(SessionLocal)

    # User use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def validate_token_use_case(self) -> ValidateTokenUseCase:
        return ValidateTokenUseCase(users=self.user_repository, tokens=self.token_service)

    @cached_property
    def username_available_use_case(self) -> CheckUsernameAvailabilityUseCase:
        return CheckUsernameAvailabilityUseCase(users=self.user_repository)

    @cached_property
    def email_available_use_case(self) -> CheckEmailAvailabilityUseCase:
        return CheckEmailAvailabilityUseCase(users=self.user_repository)

    @cached_property
    def get_profile_use_case(self) -> GetProfileUseCase:
        return GetProfileUseCase(users=self.user_repository)

    @cached_property
    def update_profile_use_case(self) -> UpdateProfileUseCase:
        return UpdateProfileUseCase(users=self.user_repository)

    @cached_property
    def change_password_use_case(self) -> ChangePasswordUseCase:
        return ChangePasswordUseCase(
            users=self.user_repository, password_hasher=self.password_hasher
        )

    @cached_property
    def delete_account_use_case(self) -> DeleteAccountUseCase:
        return DeleteAccountUseCase(users=self.user_repository)

    # Expense use cases

    @cached_property
    def list_expenses_use_case(self) -> ListExpensesUseCase:
        return ListExpensesUseCase(expenses=self.expense_repository)

    @cached_property
    def current_month_expenses_use_case(self) -> ListCurrentMonthExpensesUseCase:
        return ListCurrentMonthExpensesUseCase(expenses=self.expense_repository)

    @cached_property
    def get_expense_use_case(self) -> GetExpenseUseCase:
        return GetExpenseUseCase(expenses=self.expense_repository)

    @cached_property
    def create_expense_use_case(self) -> CreateExpenseUseCase:
        return CreateExpenseUseCase(expenses=self.expense_repository)

    @cached_property
    def update_expense_use_case(self) -> UpdateExpenseUseCase:
        return UpdateExpenseUseCase(expenses=self.expense_repository)

    @cached_property
    def delete_expense_use_case(self) -> DeleteExpenseUseCase:
        return DeleteExpenseUseCase(expenses=self.expense_repository)

    @cached_property
    def statistics_use_case(self) -> GetExpenseStatisticsUseCase:
        return GetExpenseStatisticsUseCase(expenses=self.expense_repository)

    @cached_property
    def category_totals_use_case(self) -> GetCategoryTotalsUseCase:
        return GetCategoryTotalsUseCase(expenses=self.expense_repository)

    @cached_property
    def monthly_totals_use_case(self) -> GetMonthlyTotalsUseCase:
        return GetMonthlyTotalsUseCase(expenses=self.expense_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            validate_token_use_case=self.validate_token_use_case,
            username_available_use_case=self.username_available_use_case,
            email_available_use_case=self.email_available_use_case,
        )

    @cached_property
    def expenses_controller(self) -> ExpensesController:
        return ExpensesController(
            authenticator=self.authenticator,
            list_use_case=self.list_expenses_use_case,
            current_month_use_case=self.current_month_expenses_use_case,
            get_use_case=self.get_expense_use_case,
            create_use_case=self.create_expense_use_case,
            update_use_case=self.update_expense_use_case,
            delete_use_case=self.delete_expense_use_case,
            statistics_use_case=self.statistics_use_case,
            category_totals_use_case=self.category_totals_use_case,
            monthly_totals_use_case=self.monthly_totals_use_case,
        )

    @cached_property
    def user_controller(self) -> UserController:
        return UserController(
            authenticator=self.authenticator,
            get_profile_use_case=self.get_profile_use_case,
            update_profile_use_case=self.update_profile_use_case,
            change_password_use_case=self.change_password_use_case,
            delete_account_use_case=self.delete_account_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(session_factory=SessionLocal)


container = Container()
