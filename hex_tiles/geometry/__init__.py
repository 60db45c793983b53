from .coords import Cube, Orientation, PlanarPosition
from .directions import (
    FLAT_DIRECTIONS,
    POINTY_DIRECTIONS,
    angle_between,
    direction_index,
    direction_offset,
    direction_table,
    normalize_direction,
    opposite_direction,
    rotate_direction,
    rotate_direction_by_angle,
    rotate_offset,
    steps_for_angle,
    validate_direction_table,
)
from .rounding import round_cube
from .conversions import cube_to_planar, hex_corners, planar_to_cube, planar_to_fractional_cube
from .distance import are_neighbors, direction_to, distance, distance_max, is_in_area
from .neighbors import all_neighbors, iter_neighbors, neighbor, neighbors_within
from .shapes import area, cone, line, line_towards, ring, spiral, wedge
from .metrics import hex_area, hex_height, hex_perimeter, hex_width
from .layout import HexLayout

__all__ = [
    "Cube",
    "Orientation",
    "PlanarPosition",
    "FLAT_DIRECTIONS",
    "POINTY_DIRECTIONS",
    "angle_between",
    "direction_index",
    "direction_offset",
    "direction_table",
    "normalize_direction",
    "opposite_direction",
    "rotate_direction",
    "rotate_direction_by_angle",
    "rotate_offset",
    "steps_for_angle",
    "validate_direction_table",
    "round_cube",
    "cube_to_planar",
    "hex_corners",
    "planar_to_cube",
    "planar_to_fractional_cube",
    "are_neighbors",
    "direction_to",
    "distance",
    "distance_max",
    "is_in_area",
    "all_neighbors",
    "iter_neighbors",
    "neighbor",
    "neighbors_within",
    "area",
    "cone",
    "line",
    "line_towards",
    "ring",
    "spiral",
    "wedge",
    "hex_area",
    "hex_height",
    "hex_perimeter",
    "hex_width",
    "HexLayout",
]
