"""Vectorised cube <-> planar conversion for whole maps at once.

Arrays follow the scalar helpers exactly: the same formulas, half-to-even
rounding (``numpy.rint``) and the same x, y, z tie order as
:func:`hex_tiles.geometry.rounding.round_cube`.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..errors import InvalidArgumentError, require_positive_size
from .conversions import SQRT3
from .coords import Cube, Orientation


def _as_columns(values: ArrayLike, width: int, name: str) -> NDArray[np.float64]:
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        return arr.reshape(0, width)
    if arr.ndim != 2 or arr.shape[1] != width:
        raise InvalidArgumentError(f"{name} must have shape (N, {width}), got {arr.shape}")
    return arr


def cubes_to_array(cubes: Iterable[Cube]) -> NDArray[np.int64]:
    rows = [c.as_tuple() for c in cubes]
    if not rows:
        return np.empty((0, 3), dtype=np.int64)
    return np.asarray(rows, dtype=np.int64)


def array_to_cubes(values: ArrayLike) -> list[Cube]:
    arr = _as_columns(values, 3, "cubes").astype(np.int64)
    return [Cube(int(x), int(y), int(z)) for x, y, z in arr]


def round_cube_array(fractional: ArrayLike) -> NDArray[np.int64]:
    frac = _as_columns(fractional, 3, "fractional")
    rounded = np.rint(frac)
    errors = np.abs(rounded - frac)
    qi, ri, si = rounded[:, 0], rounded[:, 1], rounded[:, 2]
    dq, dr, ds = errors[:, 0], errors[:, 1], errors[:, 2]

    fix_x = (dq > dr) & (dq > ds)
    fix_y = ~fix_x & (dr > ds)
    fix_z = ~fix_x & ~fix_y

    out = np.column_stack(
        (
            np.where(fix_x, -ri - si, qi),
            np.where(fix_y, -qi - si, ri),
            np.where(fix_z, -qi - ri, si),
        )
    )
    return out.astype(np.int64)


def cube_array_to_planar(
    cubes: ArrayLike, hex_size: float, orientation: Orientation | str = Orientation.FLAT
) -> NDArray[np.float64]:
    """Return an ``(N, 2)`` array of planar ``(x, z)`` centers."""

    size = require_positive_size(hex_size)
    arr = _as_columns(cubes, 3, "cubes")
    cx, cy = arr[:, 0], arr[:, 1]
    if Orientation.coerce(orientation) is Orientation.FLAT:
        x = size * (SQRT3 * cx + SQRT3 / 2.0 * cy)
        z = size * (3.0 / 2.0 * cy)
    else:
        x = size * (3.0 / 2.0 * cx)
        z = size * (SQRT3 / 2.0 * cx + SQRT3 * cy)
    return np.column_stack((x, z))


def planar_array_to_cube(
    points: ArrayLike, hex_size: float, orientation: Orientation | str = Orientation.FLAT
) -> NDArray[np.int64]:
    """Return an ``(N, 3)`` integer array of the cells containing ``points``."""

    size = require_positive_size(hex_size)
    arr = _as_columns(points, 2, "points")
    px, pz = arr[:, 0], arr[:, 1]
    if Orientation.coerce(orientation) is Orientation.FLAT:
        q = (SQRT3 / 3.0 * px - 1.0 / 3.0 * pz) / size
        r = (2.0 / 3.0 * pz) / size
    else:
        q = (2.0 / 3.0 * px) / size
        r = (-1.0 / 3.0 * px + SQRT3 / 3.0 * pz) / size
    return round_cube_array(np.column_stack((q, r, -q - r)))
