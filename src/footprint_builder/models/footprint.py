"""Footprint grid: which cells of the building base hold wall."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from footprint_builder.models.blocks import BlockType, BuildingBlock

MIN_DIMENSION = 1
MAX_DIMENSION = 9


class FootprintGrid(BaseModel):
    """A ``depth x width`` grid of optional BuildingBlocks.

    Row 0 is the front of the building. ``cells[row][column]`` is None
    where there is no wall.
    """

    depth: int = Field(ge=MIN_DIMENSION, le=MAX_DIMENSION)
    width: int = Field(ge=MIN_DIMENSION, le=MAX_DIMENSION)
    cells: list[list[BuildingBlock | None]]

    @model_validator(mode="after")
    def cells_match_dimensions(self) -> FootprintGrid:
        if len(self.cells) != self.depth:
            raise ValueError(
                f"Expected {self.depth} rows, got {len(self.cells)}"
            )
        for r, row in enumerate(self.cells):
            if len(row) != self.width:
                raise ValueError(
                    f"Row {r} has {len(row)} cells, expected {self.width}"
                )
            for c, cell in enumerate(row):
                if cell is not None and cell.position != (r, c):
                    raise ValueError(
                        f"Cell at ({r}, {c}) reports position {cell.position}"
                    )
        return self

    @classmethod
    def empty(cls, depth: int, width: int) -> FootprintGrid:
        """Grid with every cell absent."""
        return cls(
            depth=depth,
            width=width,
            cells=[[None] * width for _ in range(depth)],
        )

    # ── Cell access ───────────────────────────────────────────────────

    def get(self, row: int, column: int) -> BuildingBlock | None:
        return self.cells[row][column]

    def is_present(self, row: int, column: int) -> bool:
        return self.cells[row][column] is not None

    def place(
        self,
        row: int,
        column: int,
        block_type: BlockType = BlockType.STRAIGHT,
    ) -> BuildingBlock:
        """Put an undecorated block at (row, column)."""
        self._check_bounds(row, column)
        block = BuildingBlock(block_type=block_type, position=(row, column))
        self.cells[row][column] = block
        return block

    def clear(self, row: int, column: int) -> None:
        self._check_bounds(row, column)
        self.cells[row][column] = None

    def _check_bounds(self, row: int, column: int) -> None:
        # Negative indices would wrap and break the position invariant
        if not (0 <= row < self.depth and 0 <= column < self.width):
            raise IndexError(
                f"Cell ({row}, {column}) outside {self.depth}x{self.width} grid"
            )

    def fill_row(self, row: int) -> None:
        """Make every column of ``row`` a straight wall block."""
        for column in range(self.width):
            self.place(row, column)

    # ── Queries ───────────────────────────────────────────────────────

    def row_presence(self, row: int) -> list[bool]:
        return [cell is not None for cell in self.cells[row]]

    def present_count(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell is not None)

    def blocks(self) -> list[BuildingBlock]:
        """Present blocks in row-major order."""
        return [cell for row in self.cells for cell in row if cell is not None]

    def to_ascii(self, filled: str = "#", empty: str = ".") -> str:
        """Rows as text, front row first."""
        return "\n".join(
            "".join(filled if cell is not None else empty for cell in row)
            for row in self.cells
        )
