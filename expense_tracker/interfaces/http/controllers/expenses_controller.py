# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from flask import Blueprint, Response, jsonify, request

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
from expense_tracker.domain.expenses.entities import Expense
from expense_tracker.domain.users.entities import AuthContext
from expense_tracker.infrastructure.audit import AuditAction, audit_log
from expense_tracker.infrastructure.auth.gate import BearerAuthenticator
from expense_tracker.interfaces.http.dto.base import MessageDTO
from expense_tracker.interfaces.http.dto.expenses import (
    DateRangeQueryDTO,
    ExpenseDTO,
    ExpenseRequestDTO,
    ExpenseStatisticsDTO,
    money_mapping,
)
from expense_tracker.interfaces.http.requests import client_ip, parse_json, parse_mapping


def _listing(expenses: Sequence[Expense]) -> Response:
    return jsonify([ExpenseDTO.from_entity(expense).to_json() for expense in expenses])


class ExpensesController:
    """Every view receives the caller as ``auth`` and only touches that user's rows."""

    def __init__(
        self,
        *,
        authenticator: BearerAuthenticator,
        list_use_case: ListExpensesUseCase,
        current_month_use_case: ListCurrentMonthExpensesUseCase,
        get_use_case: GetExpenseUseCase,
        create_use_case: CreateExpenseUseCase,
        update_use_case: UpdateExpenseUseCase,
        delete_use_case: DeleteExpenseUseCase,
        statistics_use_case: GetExpenseStatisticsUseCase,
        category_totals_use_case: GetCategoryTotalsUseCase,
        monthly_totals_use_case: GetMonthlyTotalsUseCase,
    ) -> None:
        self._auth = authenticator
        self._list = list_use_case
        self._current_month = current_month_use_case
        self._get = get_use_case
        self._create = create_use_case
        self._update = update_use_case
        self._delete = delete_use_case
        self._statistics = statistics_use_case
        self._category_totals = category_totals_use_case
        self._monthly_totals = monthly_totals_use_case

    def list_expenses(self, *, auth: AuthContext) -> tuple[Response, int]:
        return _listing(self._list.execute(auth.user_id)), 200

    def get_expense(self, expense_id: int, *, auth: AuthContext) -> tuple[Response, int]:
        expense = self._get.execute(auth.user_id, expense_id)
        return jsonify(ExpenseDTO.from_entity(expense).to_json()), 200

    def create_expense(self, *, auth: AuthContext) -> tuple[Response, int]:
        dto = parse_json(ExpenseRequestDTO)
        expense = self._create.execute(auth.user_id, dto.to_input())
        audit_log(
            AuditAction.EXPENSE_CREATED,
            user_id=auth.user_id,
            ip_address=client_ip(),
            details={"expense_id": expense.id},
        )
        return jsonify(ExpenseDTO.from_entity(expense).to_json()), 200

    def update_expense(self, expense_id: int, *, auth: AuthContext) -> tuple[Response, int]:
        dto = parse_json(ExpenseRequestDTO)
        expense = self._update.execute(auth.user_id, expense_id, dto.to_input())
        audit_log(
            AuditAction.EXPENSE_UPDATED,
            user_id=auth.user_id,
            ip_address=client_ip(),
            details={"expense_id": expense.id},
        )
        return jsonify(ExpenseDTO.from_entity(expense).to_json()), 200

    def delete_expense(self, expense_id: int, *, auth: AuthContext) -> tuple[Response, int]:
        self._delete.execute(auth.user_id, expense_id)
        audit_log(
            AuditAction.EXPENSE_DELETED,
            user_id=auth.user_id,
            ip_address=client_ip(),
            details={"expense_id": expense_id},
        )
        return jsonify(MessageDTO(message="Expense deleted successfully").to_json()), 200

    def by_category(self, category: str, *, auth: AuthContext) -> tuple[Response, int]:
        return _listing(self._list.by_category(auth.user_id, category)), 200

    def by_date_range(self, *, auth: AuthContext) -> tuple[Response, int]:
        query = parse_mapping(DateRangeQueryDTO, request.args.to_dict())
        expenses = self._list.by_date_range(auth.user_id, query.start_date, query.end_date)
        return _listing(expenses), 200

    def current_month(self, *, auth: AuthContext) -> tuple[Response, int]:
        return _listing(self._current_month.execute(auth.user_id)), 200

    def statistics(self, *, auth: AuthContext) -> tuple[Response, int]:
        stats = self._statistics.execute(auth.user_id)
        return jsonify(ExpenseStatisticsDTO.from_entity(stats).to_json()), 200

    def category_chart(self, *, auth: AuthContext) -> tuple[Response, int]:
        return jsonify(money_mapping(self._category_totals.execute(auth.user_id))), 200

    def monthly_chart(self, *, auth: AuthContext) -> tuple[Response, int]:
        return jsonify(money_mapping(self._monthly_totals.execute(auth.user_id))), 200

    def as_blueprint(self, prefix: str = "/api") -> Blueprint:
        protect = self._auth.protect
        bp = Blueprint("expenses", __name__, url_prefix=f"{prefix}/expenses")
        bp.add_url_rule(
            "", endpoint="list", view_func=protect(self.list_expenses), methods=["GET"]
        )
        bp.add_url_rule(
            "", endpoint="create", view_func=protect(self.create_expense), methods=["POST"]
        )
        bp.add_url_rule(
            "/<int:expense_id>",
            endpoint="get",
            view_func=protect(self.get_expense),
            methods=["GET"],
        )
        bp.add_url_rule(
            "/<int:expense_id>",
            endpoint="update",
            view_func=protect(self.update_expense),
            methods=["PUT"],
        )
        bp.add_url_rule(
            "/<int:expense_id>",
            endpoint="delete",
            view_func=protect(self.delete_expense),
            methods=["DELETE"],
        )
        bp.add_url_rule(
            "/category/<string:category>",
            endpoint="by_category",
            view_func=protect(self.by_category),
            methods=["GET"],
        )
        bp.add_url_rule(
            "/date-range",
            endpoint="by_date_range",
            view_func=protect(self.by_date_range),
            methods=["GET"],
        )
        bp.add_url_rule(
            "/current-month",
            endpoint="current_month",
            view_func=protect(self.current_month),
            methods=["GET"],
        )
        bp.add_url_rule(
            "/statistics",
            endpoint="statistics",
            view_func=protect(self.statistics),
            methods=["GET"],
        )
        bp.add_url_rule(
            "/chart/category",
            endpoint="category_chart",
            view_func=protect(self.category_chart),
            methods=["GET"],
        )
        bp.add_url_rule(
            "/chart/monthly",
            endpoint="monthly_chart",
            view_func=protect(self.monthly_chart),
            methods=["GET"],
        )
        return bp
