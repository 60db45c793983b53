from __future__ import annotations

from typing import Iterable

from ..errors import require_non_negative_radius
from .coords import Cube, Orientation
from .directions import direction_offset, direction_table
from .distance import distance


def neighbor(
    coord: Cube, direction: int, orientation: Orientation | str = Orientation.FLAT
) -> Cube:
    return coord + direction_offset(direction, orientation)


def all_neighbors(coord: Cube, orientation: Orientation | str = Orientation.FLAT) -> list[Cube]:
    """The six neighbors of ``coord`` in direction-index order."""

    return [coord + offset for offset in direction_table(orientation)]


def iter_neighbors(coord: Cube, orientation: Orientation | str = Orientation.FLAT) -> Iterable[Cube]:
    for offset in direction_table(orientation):
        yield coord + offset


def neighbors_within(
    coord: Cube,
    center: Cube,
    radius: int,
    orientation: Orientation | str = Orientation.FLAT,
) -> list[Cube]:
    """Neighbors of ``coord`` that lie on the hexagonal map around ``center``."""

    limit = require_non_negative_radius(radius)
    return [n for n in iter_neighbors(coord, orientation) if distance(n, center) <= limit]
