"""Tests for image export."""

from footprint_builder.config import GeneratorConfig
from footprint_builder.export.footprint import (
    occupancy,
    render_blocks,
    render_footprint,
    voxel_array,
)
from footprint_builder.generators.building import build_building


def _building():
    return build_building(GeneratorConfig(depth=3, width=5, seed=8), name="Export Test")


class TestArrays:
    def test_occupancy_matches_grid(self):
        b = _building()
        occ = occupancy(b.footprint)
        assert occ.shape == (3, 5)
        assert int(occ.sum()) == b.footprint.present_count()
        assert occ[1:].all()

    def test_voxels_match_placements(self):
        b = _building()
        vox = voxel_array(b)
        assert vox.shape == (5, 3, b.num_layers)
        assert int(vox.sum()) == b.block_count()


class TestRender:
    def test_render_footprint_creates_png(self, tmp_path):
        b = _building()
        path = render_footprint(b.footprint, tmp_path / "plan.png")
        assert path.exists()
        assert path.stat().st_size > 0

    def test_render_blocks_creates_png(self, tmp_path):
        b = _building()
        path = render_blocks(b, tmp_path / "nested" / "blocks.png", dpi=60)
        assert path.exists()
        assert path.stat().st_size > 0

    def test_render_empty_building(self, tmp_path):
        b = build_building(GeneratorConfig(depth=2, width=2, style="Quirky", seed=1))
        path = render_blocks(b, tmp_path / "empty.png", dpi=60)
        assert path.exists()
