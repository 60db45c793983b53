from __future__ import annotations

from ..errors import require_non_negative_radius
from .coords import Cube


def distance(a: Cube, b: Cube) -> int:
    # Half the Manhattan sum; always even for valid cubes and equal to the max form.
    return (abs(a.x - b.x) + abs(a.y - b.y) + abs(a.z - b.z)) // 2


def distance_max(a: Cube, b: Cube) -> int:
    return max(abs(a.x - b.x), abs(a.y - b.y), abs(a.z - b.z))


def are_neighbors(a: Cube, b: Cube) -> bool:
    return distance(a, b) == 1


def is_in_area(coord: Cube, center: Cube, radius: int) -> bool:
    return distance(coord, center) <= require_non_negative_radius(radius)


def direction_to(origin: Cube, target: Cube) -> Cube:
    """Raw cube offset leading from ``origin`` to ``target``."""

    return target - origin
