"""Footprint cells, styles and block placements."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class BlockType(str, Enum):
    """Wall segment kind of a filled cell.

    STRAIGHT: plain wall segment (the only type produced today)
    CORNER: reserved for corner detection, never generated yet
    """

    CORNER = "Corner"
    STRAIGHT = "Straight"


class BuildingStyle(str, Enum):
    """Row generation strategy.

    SYMMETRICAL: mirrored front row, solid rows behind it
    QUIRKY: declared but without a strategy; produces an empty footprint
    """

    SYMMETRICAL = "Symmetrical"
    QUIRKY = "Quirky"


class InteriorMode(str, Enum):
    """How rows behind the front row are generated.

    SOLID: every column filled (default)
    CONSTRAINED: symmetric row rule with vertical neighbour constraints
    """

    SOLID = "solid"
    CONSTRAINED = "constrained"


class BuildingBlock(BaseModel):
    """A present footprint cell.

    ``position`` is (row, column) and always equals the cell's own
    coordinates in the grid.
    """

    block_type: BlockType = BlockType.STRAIGHT
    position: tuple[int, int]
    decorated: bool = Field(default=False, description="Reserved for ornamentation")

    @property
    def row(self) -> int:
        return self.position[0]

    @property
    def column(self) -> int:
        return self.position[1]


class BlockPlacement(BaseModel):
    """One extruded block: grid column ``x``, grid row ``y``, layer ``height``."""

    x: int = Field(ge=0)
    y: int = Field(ge=0)
    height: int = Field(ge=0)
    block_type: BlockType
