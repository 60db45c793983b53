"""Validated settings for a hex map."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .geometry import Orientation
from .geometry.coords import Cube
from .geometry.layout import HexLayout
from .grid import HexGraph, build_hex_grid


class GridSettings(BaseModel):
    """Size, orientation and extent of a hexagon-shaped map."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    hex_size: float = Field(default=1.0, gt=0.0)
    orientation: Orientation = Orientation.FLAT
    radius: int = Field(default=3, ge=0)

    @field_validator("orientation", mode="before")
    @classmethod
    def _coerce_orientation(cls, value: object) -> object:
        if isinstance(value, str):
            return value.lower()
        return value

    @property
    def cell_count(self) -> int:
        """Number of cells on the map."""

        return 3 * self.radius * self.radius + 3 * self.radius + 1

    def layout(self) -> HexLayout:
        return HexLayout(self.hex_size, self.orientation)

    def build_grid(self, center: Cube | None = None) -> HexGraph:
        return build_hex_grid(
            self.radius, self.orientation, center=center, hex_size=self.hex_size
        )
