"""Footprint and block rendering using matplotlib.

Two views:
- Plan: the footprint grid seen from above, front row at the bottom
- Blocks: the extruded placements as voxels, coloured by block type
"""

from __future__ import annotations

from pathlib import Path

import matplotlib
matplotlib.use("Agg")  # headless rendering
import matplotlib.pyplot as plt
import matplotlib.patches as patches
import numpy as np

from footprint_builder.models.blocks import BlockType
from footprint_builder.models.building import GeneratedBuilding
from footprint_builder.models.footprint import FootprintGrid

# Matches the material tint of each block type
BLOCK_COLORS: dict[BlockType, str] = {
    BlockType.CORNER: "#E8C547",
    BlockType.STRAIGHT: "#F2F2F2",
}
EDGE_COLOR = "#333333"


def occupancy(grid: FootprintGrid) -> np.ndarray:
    """Boolean ``(depth, width)`` array of present cells."""
    return np.array(
        [grid.row_presence(r) for r in range(grid.depth)], dtype=bool,
    ).reshape(grid.depth, grid.width)


def voxel_array(building: GeneratedBuilding) -> np.ndarray:
    """Boolean ``(width, depth, layers)`` array of placements."""
    fp = building.footprint
    voxels = np.zeros((fp.width, fp.depth, building.num_layers), dtype=bool)
    for p in building.placements:
        voxels[p.x, p.y, p.height] = True
    return voxels


def render_footprint(
    grid: FootprintGrid,
    output_path: str | Path,
    title: str | None = None,
    dpi: int = 150,
) -> Path:
    """Render a plan view of the footprint to PNG.

    Args:
        grid: Footprint to draw.
        output_path: Output image path.
        title: Plot title (defaults to the grid size).
        dpi: Image resolution.

    Returns:
        Path to the output image.
    """
    output_path = Path(output_path)
    fig, ax = plt.subplots(1, 1, figsize=(max(3, grid.width), max(3, grid.depth)))
    ax.set_aspect("equal")
    ax.set_facecolor("#FAFAFA")

    for block in grid.blocks():
        row, column = block.position
        ax.add_patch(patches.Rectangle(
            (column, row), 1, 1,
            facecolor=BLOCK_COLORS[block.block_type],
            edgecolor=EDGE_COLOR, linewidth=1.0,
        ))

    ax.set_xlim(0, grid.width)
    ax.set_ylim(0, grid.depth)
    ax.set_xticks(np.arange(grid.width) + 0.5, labels=[str(c) for c in range(grid.width)])
    ax.set_yticks(np.arange(grid.depth) + 0.5, labels=[str(r) for r in range(grid.depth)])
    ax.set_xlabel("column")
    ax.set_ylabel("row (0 = front)")
    ax.set_title(title or f"Footprint {grid.depth}x{grid.width}")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(str(output_path), dpi=dpi, bbox_inches="tight")
    plt.close(fig)
    return output_path


def render_blocks(
    building: GeneratedBuilding,
    output_path: str | Path,
    dpi: int = 150,
) -> Path:
    """Render the extruded blocks as a 3D voxel plot."""
    output_path = Path(output_path)
    fp = building.footprint
    filled = voxel_array(building)

    colors = np.empty(filled.shape, dtype=object)
    for p in building.placements:
        colors[p.x, p.y, p.height] = BLOCK_COLORS[p.block_type]

    fig = plt.figure(figsize=(8, 8))
    ax = fig.add_subplot(projection="3d")
    if filled.any():
        ax.voxels(filled, facecolors=colors, edgecolor=EDGE_COLOR)
    ax.set_xlabel("x (column)")
    ax.set_ylabel("y (row)")
    ax.set_zlabel("height")
    ax.set_box_aspect((fp.width, fp.depth, max(1, building.num_layers)))
    ax.set_title(f"{building.name}: {building.num_layers} layers, {building.block_count()} blocks")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(str(output_path), dpi=dpi, bbox_inches="tight")
    plt.close(fig)
    return output_path
