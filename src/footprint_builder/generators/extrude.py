"""Footprint extrusion into stacked block placements.

The layer count is drawn once per building. Placements are emitted
height first, then row, then column, so a fixed random sequence always
produces the same ordering.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from footprint_builder.models.blocks import BlockPlacement
from footprint_builder.models.footprint import FootprintGrid
from footprint_builder.random_source import RandomSource

logger = logging.getLogger(__name__)

MIN_LAYERS = 5
MAX_LAYERS = 9  # exclusive


@dataclass
class Extrusion:
    """Materialised extrusion result."""

    num_layers: int
    placements: list[BlockPlacement]


def draw_layer_count(
    rng: RandomSource,
    min_layers: int = MIN_LAYERS,
    max_layers: int = MAX_LAYERS,
) -> int:
    """Number of block layers, in [min_layers, max_layers)."""
    if min_layers < 1 or max_layers <= min_layers:
        raise ValueError(
            f"Invalid layer range [{min_layers}, {max_layers})"
        )
    return rng.integer_in_range(min_layers, max_layers)


def iter_placements(grid: FootprintGrid, num_layers: int) -> Iterator[BlockPlacement]:
    """Yield one placement per (present cell, layer)."""
    for height in range(num_layers):
        for row in range(grid.depth):
            for column in range(grid.width):
                block = grid.cells[row][column]
                if block is not None:
                    yield BlockPlacement(
                        x=column, y=row, height=height, block_type=block.block_type,
                    )


def extrude(
    grid: FootprintGrid,
    rng: RandomSource,
    min_layers: int = MIN_LAYERS,
    max_layers: int = MAX_LAYERS,
) -> Iterator[BlockPlacement]:
    """Extrude a footprint into block placements.

    The layer count is drawn immediately; the returned iterator is lazy
    and single-pass.
    """
    num_layers = draw_layer_count(rng, min_layers, max_layers)
    logger.debug("Extruding %dx%d footprint over %d layers",
                 grid.depth, grid.width, num_layers)
    return iter_placements(grid, num_layers)


def extrude_building(
    grid: FootprintGrid,
    rng: RandomSource,
    min_layers: int = MIN_LAYERS,
    max_layers: int = MAX_LAYERS,
) -> Extrusion:
    """Extrude and keep the layer count alongside the placements."""
    num_layers = draw_layer_count(rng, min_layers, max_layers)
    placements = list(iter_placements(grid, num_layers))
    return Extrusion(num_layers=num_layers, placements=placements)
