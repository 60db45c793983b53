from __future__ import annotations

from math import sqrt

from ..errors import require_positive_size
from .coords import Orientation


def hex_area(hex_size: float) -> float:
    size = require_positive_size(hex_size)
    return 3.0 * sqrt(3.0) * size * size / 2.0


def hex_perimeter(hex_size: float) -> float:
    return 6.0 * require_positive_size(hex_size)


def hex_width(hex_size: float, orientation: Orientation | str = Orientation.FLAT) -> float:
    size = require_positive_size(hex_size)
    if Orientation.coerce(orientation) is Orientation.FLAT:
        return 2.0 * size
    return sqrt(3.0) * size


def hex_height(hex_size: float, orientation: Orientation | str = Orientation.FLAT) -> float:
    size = require_positive_size(hex_size)
    if Orientation.coerce(orientation) is Orientation.FLAT:
        return sqrt(3.0) * size
    return 2.0 * size
