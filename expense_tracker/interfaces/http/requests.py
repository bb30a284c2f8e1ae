# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Request helpers shared by the controllers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from flask import request
from pydantic import BaseModel, ValidationError

from expense_tracker.shared.errors.validation import raise_validation_error

ModelT = TypeVar("ModelT", bound=BaseModel)


def client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


def parse_json(model: type[ModelT]) -> ModelT:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    return parse_mapping(model, payload)


def parse_mapping(model: type[ModelT], data: Mapping[str, Any]) -> ModelT:
    try:
        return model.model_validate(dict(data))
    except ValidationError as exc:
        raise_validation_error(exc)
