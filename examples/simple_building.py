"""Small symmetric building: proof of concept.

Footprint: 3 rows deep, 7 columns wide, seed 2024
- Front row mirrored around the centre column
- Rows behind the front solid
- 5-8 layers of blocks

Writes building.json, a plan view and a block view next to this script.
"""

from pathlib import Path

from footprint_builder.config import GeneratorConfig
from footprint_builder.export.footprint import render_blocks, render_footprint
from footprint_builder.generators import build_building
from footprint_builder.validators import validate_building

OUT = Path(__file__).parent / "output"


def main() -> None:
    config = GeneratorConfig(depth=3, width=7, seed=2024)
    building = build_building(config, name="Simple Building")

    print(building.footprint.to_ascii())
    print(f"{building.num_layers} layers, {building.block_count()} blocks")

    issues = validate_building(building)
    for issue in issues:
        print(f"[{issue.severity}] {issue.message}")

    building.save(OUT / "building.json")
    render_footprint(building.footprint, OUT / "plan.png", title=building.name)
    render_blocks(building, OUT / "blocks.png")
    print(f"Saved to {OUT}")


if __name__ == "__main__":
    main()
