from __future__ import annotations

from math import cos, radians, sin, sqrt

from ..errors import require_positive_size
from .coords import Cube, Orientation, PlanarPosition
from .rounding import round_cube

SQRT3 = sqrt(3.0)


def cube_to_planar(
    coord: Cube, hex_size: float, orientation: Orientation | str = Orientation.FLAT
) -> PlanarPosition:
    """Return the center of ``coord`` on the ground plane."""

    size = require_positive_size(hex_size)
    if Orientation.coerce(orientation) is Orientation.FLAT:
        x = size * (SQRT3 * coord.x + SQRT3 / 2.0 * coord.y)
        z = size * (3.0 / 2.0 * coord.y)
    else:
        x = size * (3.0 / 2.0 * coord.x)
        z = size * (SQRT3 / 2.0 * coord.x + SQRT3 * coord.y)
    return PlanarPosition(x, z)


def planar_to_fractional_cube(
    position: PlanarPosition, hex_size: float, orientation: Orientation | str = Orientation.FLAT
) -> tuple[float, float, float]:
    size = require_positive_size(hex_size)
    px, pz = position.x, position.z
    if Orientation.coerce(orientation) is Orientation.FLAT:
        q = (SQRT3 / 3.0 * px - 1.0 / 3.0 * pz) / size
        r = (2.0 / 3.0 * pz) / size
    else:
        q = (2.0 / 3.0 * px) / size
        r = (-1.0 / 3.0 * px + SQRT3 / 3.0 * pz) / size
    return q, r, -q - r


def planar_to_cube(
    position: PlanarPosition, hex_size: float, orientation: Orientation | str = Orientation.FLAT
) -> Cube:
    """Return the cell containing ``position``.

    Points exactly on a cell boundary go wherever :func:`round_cube` sends
    them, which is not stable under floating point error.
    """

    return round_cube(*planar_to_fractional_cube(position, hex_size, orientation))


def hex_corners(
    coord: Cube, hex_size: float, orientation: Orientation | str = Orientation.FLAT
) -> list[PlanarPosition]:
    """Return the six corners of ``coord``, counter-clockwise.

    Flat-topped cells start at 30 degrees, pointy-topped cells at 0.
    """

    center = cube_to_planar(coord, hex_size, orientation)
    size = float(hex_size)
    start = 30.0 if Orientation.coerce(orientation) is Orientation.FLAT else 0.0
    corners: list[PlanarPosition] = []
    for i in range(6):
        angle = radians(start + 60.0 * i)
        corners.append(PlanarPosition(center.x + cos(angle) * size, center.z + sin(angle) * size))
    return corners
