# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint

from expense_tracker.infrastructure.container import Container


def build_blueprints(container: Container, prefix: str) -> list[Blueprint]:
    return [
        container.misc_controller.as_blueprint(prefix),
        container.auth_controller.as_blueprint(prefix),
        container.expenses_controller.as_blueprint(prefix),
        container.user_controller.as_blueprint(prefix),
    ]


__all__ = ["build_blueprints"]
