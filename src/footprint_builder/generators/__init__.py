"""Building generation tools.

Pure functions over caller-owned random sources:
- Footprint generator: dimensions + style → FootprintGrid
- Extruder: FootprintGrid → stacked BlockPlacements
- build_building: one full cycle driven by a GeneratorConfig
"""

from footprint_builder.generators.footprint import (
    check_and_assign,
    generate_footprint,
    generate_symmetric_row,
)
from footprint_builder.generators.extrude import (
    Extrusion,
    draw_layer_count,
    extrude,
    extrude_building,
    iter_placements,
)
from footprint_builder.generators.building import build_building

__all__ = [
    "check_and_assign",
    "generate_footprint",
    "generate_symmetric_row",
    "Extrusion",
    "draw_layer_count",
    "extrude",
    "extrude_building",
    "iter_placements",
    "build_building",
]
