# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import calendar
from datetime import date


def month_bounds(day: date) -> tuple[date, date]:
    """First and last calendar day of the month containing ``day``."""

    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)


def month_key(year: int, month: int) -> str:
    return f"{int(year):04d}-{int(month):02d}"
