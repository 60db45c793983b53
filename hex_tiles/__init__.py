"""Hex tile geometry package initialization."""

from .errors import InvalidArgumentError
from .geometry import Cube, HexLayout, Orientation, PlanarPosition
from .grid import build_hex_grid, grid_path, without_cells
from .settings import GridSettings

__version__ = "0.1.0"

__all__ = [
    "Cube",
    "GridSettings",
    "HexLayout",
    "InvalidArgumentError",
    "Orientation",
    "PlanarPosition",
    "build_hex_grid",
    "grid_path",
    "without_cells",
    "__version__",
]
