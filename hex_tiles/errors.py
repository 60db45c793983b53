"""Error types and argument guards shared by the geometry helpers."""

from __future__ import annotations

import operator
from typing import Any


class InvalidArgumentError(ValueError):
    """Raised when a caller passes a value outside an operation's contract."""


def require_positive_size(hex_size: float) -> float:
    """Return ``hex_size`` as a float, rejecting non-positive sizes."""

    size = float(hex_size)
    if not size > 0.0:
        raise InvalidArgumentError(f"hex_size must be positive, got {hex_size!r}")
    return size


def require_integer(value: Any, name: str) -> int:
    """Return ``value`` as an int; floats and other non-integral values are rejected."""

    try:
        return operator.index(value)
    except TypeError:
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}") from None


def require_non_negative_radius(radius: int) -> int:
    value = require_integer(radius, "radius")
    if value < 0:
        raise InvalidArgumentError(f"radius must be non-negative, got {radius!r}")
    return value
