from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from ..errors import InvalidArgumentError, require_integer

logger = logging.getLogger(__name__)


class Orientation(str, Enum):
    """Tiling orientation of the hexagons."""

    FLAT = "flat"
    POINTY = "pointy"

    @classmethod
    def coerce(cls, value: "Orientation | str") -> "Orientation":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidArgumentError(f"Unknown orientation: {value!r}") from None


@dataclass(frozen=True, slots=True)
class Cube:
    """Cube coordinate of a hex cell.

    Components must be integers; floats raise :class:`InvalidArgumentError`.
    The three components always sum to zero. A triple that does not is
    repaired by recomputing ``z`` from ``x`` and ``y`` and a warning is
    logged; construction never fails on the invariant.
    """

    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            object.__setattr__(self, name, require_integer(getattr(self, name), name))
        if self.x + self.y + self.z != 0:
            repaired = -self.x - self.y
            logger.warning(
                "Cube(%s, %s, %s) does not sum to zero; using z=%s",
                self.x,
                self.y,
                self.z,
                repaired,
            )
            object.__setattr__(self, "z", repaired)

    @classmethod
    def from_xy(cls, x: int, y: int) -> "Cube":
        return cls(x, y, -x - y)

    @classmethod
    def zero(cls) -> "Cube":
        return cls(0, 0, 0)

    def __add__(self, other: "Cube") -> "Cube":
        if not isinstance(other, Cube):
            return NotImplemented
        return Cube(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Cube") -> "Cube":
        if not isinstance(other, Cube):
            return NotImplemented
        return Cube(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Cube":
        return Cube(-self.x, -self.y, -self.z)

    def __mul__(self, factor: int) -> "Cube":
        if not isinstance(factor, int):
            return NotImplemented
        return Cube(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y
        yield self.z

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True, slots=True)
class PlanarPosition:
    """Point on the ground plane; height is not part of the hex geometry."""

    x: float
    z: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.z
