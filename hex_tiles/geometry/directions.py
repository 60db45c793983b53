"""Direction tables and index arithmetic for both tiling orientations.

A direction is an integer index into the six-entry table of the chosen
orientation. Every helper normalises the index modulo six, so ``-1`` and
``5`` name the same direction.
"""

from __future__ import annotations

from math import isfinite
from typing import Sequence

from ..errors import InvalidArgumentError
from .coords import Cube, Orientation

DIRECTION_COUNT = 6
DEGREES_PER_STEP = 60.0

FLAT_DIRECTIONS: tuple[Cube, ...] = (
    Cube(+1, -1, 0),
    Cube(+1, 0, -1),
    Cube(0, +1, -1),
    Cube(-1, +1, 0),
    Cube(-1, 0, +1),
    Cube(0, -1, +1),
)

POINTY_DIRECTIONS: tuple[Cube, ...] = (
    Cube(+1, 0, -1),
    Cube(0, +1, -1),
    Cube(-1, +1, 0),
    Cube(-1, 0, +1),
    Cube(0, -1, +1),
    Cube(+1, -1, 0),
)

_TABLES = {
    Orientation.FLAT: FLAT_DIRECTIONS,
    Orientation.POINTY: POINTY_DIRECTIONS,
}

_INDEX_BY_OFFSET = {
    orientation: {offset: index for index, offset in enumerate(table)}
    for orientation, table in _TABLES.items()
}


def direction_table(orientation: Orientation | str = Orientation.FLAT) -> tuple[Cube, ...]:
    return _TABLES[Orientation.coerce(orientation)]


def normalize_direction(direction: int) -> int:
    return direction % DIRECTION_COUNT


def direction_offset(direction: int, orientation: Orientation | str = Orientation.FLAT) -> Cube:
    """Return the unit cube offset for ``direction`` in ``orientation``."""

    return direction_table(orientation)[normalize_direction(direction)]


def direction_index(offset: Cube, orientation: Orientation | str = Orientation.FLAT) -> int | None:
    """Return the index of a unit ``offset``, or ``None`` if it is not one."""

    return _INDEX_BY_OFFSET[Orientation.coerce(orientation)].get(offset)


def steps_for_angle(angle_degrees: float) -> int:
    """Convert an angle to whole 60 degree steps (half-to-even rounding)."""

    if not isfinite(angle_degrees):
        raise InvalidArgumentError(f"angle must be finite, got {angle_degrees!r}")
    return round(angle_degrees / DEGREES_PER_STEP)


def rotate_direction(
    direction: int, steps: int, orientation: Orientation | str = Orientation.FLAT
) -> int:
    """Rotate ``direction`` by ``steps`` entries of the direction table.

    The result is an index and therefore valid for either orientation;
    ``orientation`` only has to name a known table.
    """

    Orientation.coerce(orientation)
    return normalize_direction(direction + steps)


def rotate_direction_by_angle(
    direction: int, angle_degrees: float, orientation: Orientation | str = Orientation.FLAT
) -> int:
    return rotate_direction(direction, steps_for_angle(angle_degrees), orientation)


def rotate_offset(
    offset: Cube, steps: int, orientation: Orientation | str = Orientation.FLAT
) -> Cube:
    """Rotate a unit offset through the table; other offsets come back unchanged."""

    index = direction_index(offset, orientation)
    if index is None:
        return offset
    return direction_offset(index + steps, orientation)


def opposite_direction(direction: int) -> int:
    return normalize_direction(direction + DIRECTION_COUNT // 2)


def angle_between(first: int, second: int) -> float:
    """Counter-clockwise angle in degrees from ``first`` to ``second``."""

    return normalize_direction(second - first) * DEGREES_PER_STEP


def validate_direction_table(table: Sequence[Cube]) -> tuple[Cube, ...]:
    """Check that ``table`` holds the six distinct unit offsets.

    Raises:
        InvalidArgumentError: if the table has the wrong length, repeats an
            entry, or contains an offset that is not a unit step.
    """

    entries = tuple(table)
    if len(entries) != DIRECTION_COUNT:
        raise InvalidArgumentError(
            f"Direction table needs {DIRECTION_COUNT} entries, got {len(entries)}"
        )
    if len(set(entries)) != DIRECTION_COUNT:
        raise InvalidArgumentError("Direction table entries must be distinct")
    for entry in entries:
        if max(abs(entry.x), abs(entry.y), abs(entry.z)) != 1:
            raise InvalidArgumentError(f"{entry!r} is not a unit hex offset")
    return entries


def _check_builtin_tables() -> None:
    for table in _TABLES.values():
        validate_direction_table(table)


_check_builtin_tables()
