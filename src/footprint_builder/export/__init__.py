"""Image export of footprints and extruded buildings."""

from footprint_builder.export.footprint import render_blocks, render_footprint

__all__ = ["render_blocks", "render_footprint"]
