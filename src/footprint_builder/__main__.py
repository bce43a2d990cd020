"""Footprint Builder CLI.

Usage:
    python -m footprint_builder <command> [options]

Output is JSON on stdout. Logging (``--verbose``) goes to stderr.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError as ModelValidationError

from footprint_builder.config import GeneratorConfig
from footprint_builder.errors import FootprintError
from footprint_builder.generators.building import build_building
from footprint_builder.generators.footprint import coerce_interior, coerce_style
from footprint_builder.models.building import GeneratedBuilding
from footprint_builder.random_source import derive_seed
from footprint_builder.validators.footprint import validate_building

app = typer.Typer(
    name="footprint_builder",
    help="Footprint Builder: procedural building footprints and block extrusion.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _output(data: dict) -> None:
    """Print JSON output to stdout."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _fail(message: str) -> None:
    _output({"ok": False, "error": message})
    raise typer.Exit(1)


def _load_building(path: Path) -> GeneratedBuilding:
    """Load a saved building, failing with a JSON error."""
    if not path.exists():
        _fail(f"File not found: {path}")
    try:
        return GeneratedBuilding.load(path)
    except ModelValidationError as e:
        _fail(f"Invalid building file {path}: {e.error_count()} error(s)")


def _summary(building: GeneratedBuilding) -> dict:
    fp = building.footprint
    return {
        "name": building.name,
        "seed": building.seed,
        "style": building.style.value,
        "interior": building.interior.value,
        "depth": fp.depth,
        "width": fp.width,
        "footprint": fp.to_ascii().splitlines(),
        "layers": building.num_layers,
        "blocks": building.block_count(),
    }


def _validation_json(building: GeneratedBuilding) -> dict:
    issues = validate_building(building)
    return {
        "errors": sum(1 for e in issues if e.severity == "error"),
        "warnings": sum(1 for e in issues if e.severity == "warning"),
        "details": [
            {"severity": e.severity, "element_type": e.element_type,
             "element_id": e.element_id, "message": e.message}
            for e in issues
        ],
    }


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr"),
):
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command()
def generate(
    depth: int = typer.Option(3, "--depth", "-d", help="Footprint rows (1-9)"),
    width: int = typer.Option(5, "--width", "-w", help="Footprint columns (1-9)"),
    style: str = typer.Option("Symmetrical", "--style", help="Symmetrical or Quirky"),
    interior: str = typer.Option("solid", "--interior", help="solid or constrained"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    name: str = typer.Option("Building", "--name", help="Building name"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="GeneratorConfig JSON (overrides flags)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Save building JSON here"),
    placements: bool = typer.Option(False, "--placements", help="Include every block placement"),
    count: int = typer.Option(1, "--count", "-n", min=1, help="Buildings to generate (output becomes a directory)"),
):
    """Generate a footprint and extrude it.

    With ``--count`` above 1, buildings are named "<name> 1", "<name> 2", ...
    and each gets a seed derived from ``--seed`` and its name.
    """
    try:
        if config is not None:
            if not config.exists():
                _fail(f"Config not found: {config}")
            cfg = GeneratorConfig.load(config)
        else:
            cfg = GeneratorConfig(
                depth=depth, width=width, style=coerce_style(style),
                interior=coerce_interior(interior), seed=seed,
            )
        if count == 1:
            batch = [(name, cfg)]
        else:
            batch = []
            for i in range(count):
                building_name = f"{name} {i + 1}"
                building_seed = (
                    derive_seed(cfg.seed, building_name) if cfg.seed is not None else None
                )
                batch.append((building_name, cfg.model_copy(update={"seed": building_seed})))
        buildings = [build_building(c, name=n) for n, c in batch]
    except (FootprintError, ModelValidationError) as e:
        _fail(str(e))

    entries = []
    for i, building in enumerate(buildings):
        entry = {"building": _summary(building)}
        if placements:
            entry["placements"] = [
                {**p.model_dump(mode="json"), "material": building.material_for(p)}
                for p in building.placements
            ]
        if output is not None:
            path = output if count == 1 else output / f"building_{i + 1}.json"
            entry["path"] = str(building.save(path))
        entries.append(entry)

    if count == 1:
        _output({"ok": True, **entries[0]})
    else:
        _output({"ok": True, "buildings": entries})


@app.command()
def show(path: Path = typer.Argument(..., help="Saved building JSON")):
    """Print the footprint of a saved building."""
    building = _load_building(path)
    _output({"ok": True, "building": _summary(building)})


@app.command()
def validate(path: Path = typer.Argument(..., help="Saved building JSON")):
    """Check a saved building against the footprint invariants."""
    building = _load_building(path)
    _output({"ok": True, "validation": _validation_json(building)})


@app.command()
def render(
    path: Path = typer.Argument(..., help="Saved building JSON"),
    output: Path = typer.Option(..., "--output", "-o", help="Output PNG path"),
    view: str = typer.Option("plan", "--view", help="plan or blocks"),
):
    """Render a saved building to PNG."""
    from footprint_builder.export.footprint import render_blocks, render_footprint

    building = _load_building(path)
    if view == "plan":
        out = render_footprint(building.footprint, output, title=building.name)
    elif view == "blocks":
        out = render_blocks(building, output)
    else:
        _fail(f"Unknown view: {view}. Use: plan, blocks")
    _output({"ok": True, "rendered": str(out)})


@app.command()
def version() -> None:
    """Show version."""
    from footprint_builder import __version__

    typer.echo(f"footprint-builder v{__version__}")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    app()
