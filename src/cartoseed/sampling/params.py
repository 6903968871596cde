"""Entry-point argument checks shared by the samplers."""
from __future__ import annotations

import math
import numbers

from ..errors import InvalidParameter

__all__ = ["check_min_dist", "check_count"]


def check_min_dist(min_dist) -> float:
    try:
        value = float(min_dist)
    except (TypeError, ValueError):
        raise InvalidParameter(f"min_dist must be a number, got {min_dist!r}") from None
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidParameter(f"min_dist must be positive and finite, got {min_dist!r}")
    return value


def check_count(name: str, value, *, optional: bool = False) -> int | None:
    """Validate a positive integer argument such as ``k`` or ``max_rounds``."""
    if value is None and optional:
        return None
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameter(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidParameter(f"{name} must be >= 1, got {value!r}")
    return int(value)
