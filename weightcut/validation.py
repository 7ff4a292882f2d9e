# -*- coding: utf-8 -*-
"""Boundary checks for numeric inputs."""

from __future__ import annotations

import math
from typing import Any, Optional

from .errors import InvalidInputError


def _as_float(value: Any, name: str) -> float:
    if isinstance(value, bool):
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{name} must be a number, got {value!r}") from exc
    if math.isnan(number) or math.isinf(number):
        raise InvalidInputError(f"{name} must be finite, got {value!r}")
    return number


def require_positive(value: Any, name: str) -> float:
    """Reject missing, NaN, infinite, zero or negative values."""
    if value is None:
        raise InvalidInputError(f"{name} is required")
    number = _as_float(value, name)
    if number <= 0:
        raise InvalidInputError(f"{name} must be > 0, got {number}")
    return number


def require_non_negative(value: Any, name: str, *, missing_as_zero: bool = False) -> float:
    if value is None:
        if missing_as_zero:
            return 0.0
        raise InvalidInputError(f"{name} is required")
    number = _as_float(value, name)
    if number < 0:
        raise InvalidInputError(f"{name} must be >= 0, got {number}")
    return number


def coerce_non_negative(value: Optional[Any]) -> float:
    """Tracking aggregates only: anything unusable counts as 0."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or math.isinf(number) or number < 0:
        return 0.0
    return number
