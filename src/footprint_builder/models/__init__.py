"""Footprint data models."""

from footprint_builder.models.blocks import (
    BlockPlacement,
    BlockType,
    BuildingBlock,
    BuildingStyle,
    InteriorMode,
)
from footprint_builder.models.footprint import (
    MAX_DIMENSION,
    MIN_DIMENSION,
    FootprintGrid,
)
from footprint_builder.models.building import DEFAULT_MATERIALS, GeneratedBuilding

__all__ = [
    "BlockPlacement",
    "BlockType",
    "BuildingBlock",
    "BuildingStyle",
    "InteriorMode",
    "MAX_DIMENSION",
    "MIN_DIMENSION",
    "FootprintGrid",
    "DEFAULT_MATERIALS",
    "GeneratedBuilding",
]
