"""One full generation cycle: config → footprint → extrusion."""

from __future__ import annotations

import logging

from footprint_builder.config import GeneratorConfig
from footprint_builder.generators.extrude import extrude_building
from footprint_builder.generators.footprint import generate_footprint
from footprint_builder.models.building import GeneratedBuilding
from footprint_builder.random_source import RandomSource, SeededRandomSource

logger = logging.getLogger(__name__)


def build_building(
    config: GeneratorConfig,
    rng: RandomSource | None = None,
    name: str = "Building",
) -> GeneratedBuilding:
    """Generate a footprint and extrude it.

    Args:
        config: Dimensions, style, layer range and materials.
        rng: Random source. Defaults to a SeededRandomSource on config.seed.
        name: Name stored on the result.

    Returns:
        GeneratedBuilding with footprint, layer count and placements.
    """
    if rng is None:
        rng = SeededRandomSource(config.seed)

    footprint = generate_footprint(
        config.depth, config.width, config.style, rng, interior=config.interior,
    )
    extrusion = extrude_building(
        footprint, rng, config.min_layers, config.max_layers,
    )
    building = GeneratedBuilding(
        name=name,
        seed=config.seed,
        style=config.style,
        interior=config.interior,
        footprint=footprint,
        num_layers=extrusion.num_layers,
        min_layers=config.min_layers,
        max_layers=config.max_layers,
        placements=extrusion.placements,
        materials=dict(config.materials),
    )
    logger.info(
        "Generated %s: %dx%d footprint, %d layers, %d blocks",
        name, config.depth, config.width, extrusion.num_layers,
        building.block_count(),
    )
    return building
