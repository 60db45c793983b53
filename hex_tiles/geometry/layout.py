from __future__ import annotations

from dataclasses import dataclass

from ..errors import require_positive_size
from . import conversions, shapes
from .coords import Cube, Orientation, PlanarPosition
from .neighbors import all_neighbors, neighbor


@dataclass(frozen=True, slots=True)
class HexLayout:
    """Hex size and orientation bound together.

    Collaborators that always work with one grid can hold a layout instead
    of threading ``hex_size`` and ``orientation`` through every call.
    """

    hex_size: float = 1.0
    orientation: Orientation = Orientation.FLAT

    def __post_init__(self) -> None:
        object.__setattr__(self, "hex_size", require_positive_size(self.hex_size))
        object.__setattr__(self, "orientation", Orientation.coerce(self.orientation))

    def to_planar(self, coord: Cube) -> PlanarPosition:
        return conversions.cube_to_planar(coord, self.hex_size, self.orientation)

    def to_cube(self, position: PlanarPosition) -> Cube:
        return conversions.planar_to_cube(position, self.hex_size, self.orientation)

    def corners(self, coord: Cube) -> list[PlanarPosition]:
        return conversions.hex_corners(coord, self.hex_size, self.orientation)

    def neighbor(self, coord: Cube, direction: int) -> Cube:
        return neighbor(coord, direction, self.orientation)

    def neighbors(self, coord: Cube) -> list[Cube]:
        return all_neighbors(coord, self.orientation)

    def ring(self, center: Cube, radius: int) -> list[Cube]:
        return shapes.ring(center, radius, self.orientation)

    def spiral(self, center: Cube, radius: int) -> list[Cube]:
        return shapes.spiral(center, radius, self.orientation)

    def cone(self, center: Cube, direction: int, radius: int, angle_degrees: float) -> list[Cube]:
        return shapes.cone(center, direction, radius, angle_degrees, self.orientation)
