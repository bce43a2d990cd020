"""A generated building: footprint, layer count and block placements."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from footprint_builder.models.blocks import (
    BlockPlacement,
    BlockType,
    BuildingStyle,
    InteriorMode,
)
from footprint_builder.models.footprint import FootprintGrid

DEFAULT_MATERIALS: dict[BlockType, str] = {
    BlockType.CORNER: "_materials/Mat_Building_Yellow_Vert_256",
    BlockType.STRAIGHT: "_materials/Mat_Building_White_Vert_256",
}


class GeneratedBuilding(BaseModel):
    """Output of one generation cycle, ready for a renderer."""

    name: str = Field(default="Building")
    seed: int | None = None
    style: BuildingStyle = BuildingStyle.SYMMETRICAL
    interior: InteriorMode = InteriorMode.SOLID
    footprint: FootprintGrid
    num_layers: int = Field(ge=0)
    min_layers: int = Field(default=5, ge=1, description="Fewest layers allowed when generated")
    max_layers: int = Field(default=9, description="Layer bound used when generated (exclusive)")
    placements: list[BlockPlacement] = Field(default_factory=list)
    materials: dict[BlockType, str] = Field(
        default_factory=lambda: dict(DEFAULT_MATERIALS)
    )

    @property
    def height(self) -> int:
        """Number of stacked block layers."""
        return self.num_layers

    def block_count(self) -> int:
        return len(self.placements)

    def material_for(self, placement: BlockPlacement) -> str:
        """Material identifier the host should use for a placement."""
        try:
            return self.materials[placement.block_type]
        except KeyError:
            raise KeyError(
                f"No material mapped for block type {placement.block_type.value}"
            ) from None

    def layer(self, height: int) -> list[BlockPlacement]:
        """Placements on a single layer."""
        return [p for p in self.placements if p.height == height]

    @classmethod
    def load(cls, path: str | Path) -> GeneratedBuilding:
        """Load a generated building from a JSON file."""
        path = Path(path)
        return cls.model_validate_json(path.read_text())

    def save(self, path: str | Path) -> Path:
        """Save to a JSON file. Creates parent dirs if needed."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2))
        return path
