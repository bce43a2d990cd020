"""Generator configuration.

Host-facing settings for a generation cycle. Dimensions are clamped to
[1, 9] here, the way an inspector slider would clamp them; the generator
itself still rejects out-of-range values.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from footprint_builder.models.blocks import BlockType, BuildingStyle, InteriorMode
from footprint_builder.models.building import DEFAULT_MATERIALS
from footprint_builder.models.footprint import MAX_DIMENSION, MIN_DIMENSION


class GeneratorConfig(BaseModel):
    """Settings for one building."""

    depth: int = Field(default=1, description="Footprint rows (clamped to 1-9)")
    width: int = Field(default=1, description="Footprint columns (clamped to 1-9)")
    style: BuildingStyle = BuildingStyle.SYMMETRICAL
    interior: InteriorMode = InteriorMode.SOLID
    seed: int | None = None
    min_layers: int = Field(default=5, ge=1, description="Fewest block layers")
    max_layers: int = Field(default=9, description="Layer bound (exclusive)")
    materials: dict[BlockType, str] = Field(
        default_factory=lambda: dict(DEFAULT_MATERIALS)
    )

    @field_validator("depth", "width")
    @classmethod
    def clamp_dimension(cls, v: int) -> int:
        return max(MIN_DIMENSION, min(MAX_DIMENSION, v))

    @model_validator(mode="after")
    def layer_range_not_empty(self) -> GeneratorConfig:
        if self.max_layers <= self.min_layers:
            raise ValueError(
                f"max_layers ({self.max_layers}) must exceed "
                f"min_layers ({self.min_layers})"
            )
        return self

    @classmethod
    def load(cls, path: str | Path) -> GeneratorConfig:
        """Load a config from a JSON file."""
        path = Path(path)
        return cls.model_validate_json(path.read_text())

    def save(self, path: str | Path) -> Path:
        """Save the config to a JSON file. Creates parent dirs if needed."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2))
        return path
