"""Footprint generator.

Produces the ground-plan wall layout of a building:
- Row 0 (the front) is mirrored around the centre column and obeys the
  contiguity rule: a filled cell never stands alone, runs are >= 2 long
- Rows behind the front are solid walls (InteriorMode.SOLID), or follow
  the same symmetric rule plus vertical constraints (InteriorMode.CONSTRAINED)
- A row whose left half draws entirely empty is filled completely

Columns of a row are decided strictly left to right, because each cell
looks at the cells already decided to its left (and, in CONSTRAINED mode,
above it).
"""

from __future__ import annotations

import logging

from footprint_builder.errors import InvalidDimension, InvalidInteriorMode, InvalidStyle
from footprint_builder.models.blocks import BuildingStyle, InteriorMode
from footprint_builder.models.footprint import (
    MAX_DIMENSION,
    MIN_DIMENSION,
    FootprintGrid,
)
from footprint_builder.random_source import RandomSource

logger = logging.getLogger(__name__)

COIN_FLIP = 0.5


def generate_footprint(
    depth: int,
    width: int,
    style: BuildingStyle | str = BuildingStyle.SYMMETRICAL,
    rng: RandomSource | None = None,
    interior: InteriorMode | str = InteriorMode.SOLID,
) -> FootprintGrid:
    """Generate a ``depth x width`` footprint grid.

    Args:
        depth: Number of rows (front to back), 1-9.
        width: Number of columns, 1-9.
        style: Row generation strategy. QUIRKY yields an empty grid.
        rng: Caller-owned random source. Required for SYMMETRICAL.
        interior: How rows behind the front row are generated.

    Returns:
        The completed FootprintGrid.

    Raises:
        InvalidDimension: depth or width outside [1, 9].
        InvalidStyle: style is not a BuildingStyle.
        InvalidInteriorMode: interior is not an InteriorMode.
    """
    _check_dimension("depth", depth)
    _check_dimension("width", width)
    style = coerce_style(style)
    interior = coerce_interior(interior)

    grid = FootprintGrid.empty(depth, width)

    if style is BuildingStyle.QUIRKY:
        # No strategy for this style yet: the footprint stays empty.
        logger.debug("Quirky style requested, returning empty %dx%d grid", depth, width)
        return grid

    if rng is None:
        raise TypeError("A RandomSource is required for symmetrical footprints")

    generate_symmetric_row(grid, 0, rng, interior)
    for row in range(1, depth):
        if interior is InteriorMode.SOLID:
            grid.fill_row(row)
        else:
            generate_symmetric_row(grid, row, rng, interior)
        logger.debug("Row %d: %s", row, _row_text(grid, row))

    return grid


def generate_symmetric_row(
    grid: FootprintGrid,
    row: int,
    rng: RandomSource,
    interior: InteriorMode = InteriorMode.SOLID,
) -> bool:
    """Fill one row so that it mirrors around the centre column.

    Each left-half cell is decided by :func:`check_and_assign` and copied to
    its mirror column. With an odd width the middle cell copies the
    presence of its left neighbour. If no left-half cell was filled, the
    whole row is filled.

    Returns:
        True if the fallback fill was used.
    """
    width = grid.width
    midpoint = width // 2
    any_filled = False

    for i in range(midpoint):
        value = check_and_assign(grid, row, i, rng, interior)
        if value:
            any_filled = True
            grid.place(row, i)
            grid.place(row, width - 1 - i)

    if width % 2 == 1 and midpoint > 0:
        if grid.is_present(row, midpoint - 1):
            grid.place(row, midpoint, grid.get(row, midpoint - 1).block_type)
        else:
            grid.clear(row, midpoint)

    if not any_filled:
        grid.fill_row(row)
        logger.debug("Row %d drew empty, filled completely", row)
    elif row == 0:
        logger.debug("Row 0: %s", _row_text(grid, 0))
    return not any_filled


def check_and_assign(
    grid: FootprintGrid,
    row: int,
    cell: int,
    rng: RandomSource,
    interior: InteriorMode = InteriorMode.SOLID,
) -> bool:
    """Decide whether ``(row, cell)`` should hold a block.

    The front row only looks left: a block whose left neighbour is the
    first of a run must be placed, so that neighbour is not left isolated.
    Otherwise the cell is a coin flip. Rows behind the front only consult
    this in CONSTRAINED mode, where the cells above apply the same rule
    vertically.
    """
    if row == 0 or interior is InteriorMode.SOLID:
        return _horizontal_rule(grid, row, cell, rng)

    if row == 1:
        if grid.is_present(0, cell):
            return True
        return _horizontal_rule(grid, row, cell, rng)

    return _vertical_rule(grid, row, cell, rng)


def _horizontal_rule(
    grid: FootprintGrid, row: int, cell: int, rng: RandomSource
) -> bool:
    if cell == 0 or not grid.is_present(row, cell - 1):
        return rng.boolean(COIN_FLIP)
    if cell >= 2 and grid.is_present(row, cell - 2):
        # Run is already two long
        return rng.boolean(COIN_FLIP)
    return True


def _vertical_rule(
    grid: FootprintGrid, row: int, cell: int, rng: RandomSource
) -> bool:
    if not grid.is_present(row - 1, cell):
        return rng.boolean(COIN_FLIP)
    if grid.is_present(row - 2, cell):
        return rng.boolean(COIN_FLIP)
    return True


def coerce_style(style: BuildingStyle | str) -> BuildingStyle:
    """Accept a BuildingStyle, its value ("Symmetrical") or name ("SYMMETRICAL")."""
    if isinstance(style, BuildingStyle):
        return style
    if isinstance(style, str):
        for candidate in BuildingStyle:
            if style.lower() in (candidate.value.lower(), candidate.name.lower()):
                return candidate
    raise InvalidStyle(style)


def coerce_interior(interior: InteriorMode | str) -> InteriorMode:
    """Accept an InteriorMode, its value ("solid") or name ("SOLID")."""
    if isinstance(interior, InteriorMode):
        return interior
    if isinstance(interior, str):
        for candidate in InteriorMode:
            if interior.lower() in (candidate.value, candidate.name.lower()):
                return candidate
    raise InvalidInteriorMode(interior)


def _check_dimension(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDimension(name, value, MIN_DIMENSION, MAX_DIMENSION)
    if not MIN_DIMENSION <= value <= MAX_DIMENSION:
        raise InvalidDimension(name, value, MIN_DIMENSION, MAX_DIMENSION)


def _row_text(grid: FootprintGrid, row: int) -> str:
    return "".join("#" if present else "." for present in grid.row_presence(row))
