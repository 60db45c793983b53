"""Enumeration of cell shapes around a center cell.

Every function returns a fresh list. Ordering is part of the contract:
rings start at ``center + direction[4] * radius`` and walk the six
directions in index order, spirals concatenate rings from the inside out.
"""

from __future__ import annotations

from ..errors import require_non_negative_radius
from .coords import Cube, Orientation
from .directions import direction_offset, direction_table, steps_for_angle
from .distance import distance
from .rounding import round_cube

RING_START_DIRECTION = 4


def area(center: Cube, radius: int) -> list[Cube]:
    """All cells within ``radius`` of ``center``; ``3R^2 + 3R + 1`` of them."""

    radius = require_non_negative_radius(radius)
    cells: list[Cube] = []
    for q in range(-radius, radius + 1):
        r1 = max(-radius, -q - radius)
        r2 = min(radius, -q + radius)
        for r in range(r1, r2 + 1):
            cells.append(center + Cube(q, r, -q - r))
    return cells


def ring(
    center: Cube, radius: int, orientation: Orientation | str = Orientation.FLAT
) -> list[Cube]:
    radius = require_non_negative_radius(radius)
    if radius == 0:
        return [center]

    directions = direction_table(orientation)
    current = center + directions[RING_START_DIRECTION] * radius
    cells: list[Cube] = []
    for step in directions:
        for _ in range(radius):
            cells.append(current)
            current = current + step
    return cells


def spiral(
    center: Cube, radius: int, orientation: Orientation | str = Orientation.FLAT
) -> list[Cube]:
    radius = require_non_negative_radius(radius)
    cells: list[Cube] = []
    for r in range(radius + 1):
        cells.extend(ring(center, r, orientation))
    return cells


def line(start: Cube, end: Cube) -> list[Cube]:
    """Cells on the straight segment from ``start`` to ``end``, both included."""

    n = distance(start, end)
    if n == 0:
        return [start]

    cells: list[Cube] = []
    for i in range(n + 1):
        t = i / n
        fx = start.x + (end.x - start.x) * t
        fy = start.y + (end.y - start.y) * t
        fz = start.z + (end.z - start.z) * t
        cells.append(round_cube(fx, fy, fz))
    return cells


def line_towards(
    start: Cube,
    direction: int,
    length: int,
    orientation: Orientation | str = Orientation.FLAT,
) -> list[Cube]:
    length = require_non_negative_radius(length)
    return line(start, start + direction_offset(direction, orientation) * length)


def wedge(
    center: Cube,
    direction: int,
    radius: int,
    angle_degrees: float,
    orientation: Orientation | str = Orientation.FLAT,
) -> list[Cube]:
    """Cells along ``round(angle / 60)`` adjacent directions from ``direction``.

    Only the straight spokes are walked, so wide angles at large radii leave
    the cells between spokes out. Steps beyond six revisit directions and
    repeat cells; zero or negative steps give an empty wedge.
    """

    radius = require_non_negative_radius(radius)
    directions = direction_table(orientation)
    start = direction % len(directions)
    steps = steps_for_angle(angle_degrees)

    cells: list[Cube] = []
    for r in range(1, radius + 1):
        for i in range(steps):
            cells.append(center + directions[(start + i) % len(directions)] * r)
    return cells


def cone(
    center: Cube,
    direction: int,
    radius: int,
    angle_degrees: float,
    orientation: Orientation | str = Orientation.FLAT,
) -> list[Cube]:
    return [center, *wedge(center, direction, radius, angle_degrees, orientation)]
