"""Tests for footprint data models."""

import pytest

from footprint_builder.models import (
    DEFAULT_MATERIALS,
    BlockPlacement,
    BlockType,
    BuildingBlock,
    BuildingStyle,
    FootprintGrid,
    GeneratedBuilding,
)


class TestBuildingBlock:
    def test_defaults(self):
        block = BuildingBlock(position=(2, 3))
        assert block.block_type == BlockType.STRAIGHT
        assert block.decorated is False
        assert block.row == 2
        assert block.column == 3

    def test_enum_values(self):
        assert BlockType("Corner") is BlockType.CORNER
        assert BuildingStyle("Quirky") is BuildingStyle.QUIRKY


class TestFootprintGrid:
    def test_empty(self):
        grid = FootprintGrid.empty(2, 3)
        assert grid.present_count() == 0
        assert grid.to_ascii() == "...\n..."

    def test_place_and_clear(self):
        grid = FootprintGrid.empty(2, 3)
        block = grid.place(1, 2)
        assert block.position == (1, 2)
        assert grid.is_present(1, 2)
        grid.clear(1, 2)
        assert not grid.is_present(1, 2)

    @pytest.mark.parametrize("row,column", [(0, -1), (-1, 0), (2, 0), (0, 3)])
    def test_place_out_of_bounds(self, row, column):
        grid = FootprintGrid.empty(2, 3)
        with pytest.raises(IndexError, match="outside 2x3 grid"):
            grid.place(row, column)
        assert grid.present_count() == 0

    def test_clear_out_of_bounds(self):
        grid = FootprintGrid.empty(2, 3)
        with pytest.raises(IndexError):
            grid.clear(0, -1)

    def test_fill_row(self):
        grid = FootprintGrid.empty(2, 4)
        grid.fill_row(1)
        assert grid.row_presence(1) == [True] * 4
        assert grid.row_presence(0) == [False] * 4
        assert [b.position for b in grid.blocks()] == [(1, 0), (1, 1), (1, 2), (1, 3)]

    @pytest.mark.parametrize("depth,width", [(0, 3), (3, 10)])
    def test_dimension_bounds(self, depth, width):
        with pytest.raises(ValueError):
            FootprintGrid.empty(depth, width)

    def test_position_must_match_coordinates(self):
        with pytest.raises(ValueError, match="reports position"):
            FootprintGrid(
                depth=1, width=2,
                cells=[[BuildingBlock(position=(0, 1)), None]],
            )

    def test_row_count_must_match(self):
        with pytest.raises(ValueError, match="Expected 2 rows"):
            FootprintGrid(depth=2, width=1, cells=[[None]])

    def test_row_width_must_match(self):
        with pytest.raises(ValueError, match="Row 0 has 1 cells"):
            FootprintGrid(depth=1, width=2, cells=[[None]])


def _building() -> GeneratedBuilding:
    grid = FootprintGrid.empty(1, 2)
    grid.fill_row(0)
    placements = [
        BlockPlacement(x=x, y=0, height=h, block_type=BlockType.STRAIGHT)
        for h in range(5) for x in range(2)
    ]
    return GeneratedBuilding(name="Test", seed=3, footprint=grid, num_layers=5, placements=placements)


class TestGeneratedBuilding:
    def test_counts(self):
        b = _building()
        assert b.height == 5
        assert b.block_count() == 10
        assert len(b.layer(0)) == 2
        assert b.layer(9) == []

    def test_material_for(self):
        b = _building()
        assert b.material_for(b.placements[0]) == DEFAULT_MATERIALS[BlockType.STRAIGHT]

    def test_material_missing(self):
        b = _building()
        b.materials = {}
        with pytest.raises(KeyError, match="Straight"):
            b.material_for(b.placements[0])

    def test_save_and_load(self, tmp_path):
        b = _building()
        path = b.save(tmp_path / "out" / "building.json")
        assert path.exists()
        loaded = GeneratedBuilding.load(path)
        assert loaded == b
        assert loaded.footprint.get(0, 1).position == (0, 1)

    def test_negative_placement_rejected(self):
        with pytest.raises(ValueError):
            BlockPlacement(x=-1, y=0, height=0, block_type=BlockType.STRAIGHT)
