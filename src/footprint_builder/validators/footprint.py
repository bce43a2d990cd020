"""Invariant checks for generated footprints and buildings.

Generation is expected to produce none of these issues; the checks exist
for saved or externally edited results and for regression tests.
"""

from __future__ import annotations

from dataclasses import dataclass

from footprint_builder.models.blocks import BuildingStyle, InteriorMode
from footprint_builder.models.building import GeneratedBuilding
from footprint_builder.models.footprint import FootprintGrid


@dataclass
class ValidationError:
    """A single validation issue."""

    severity: str  # "error" | "warning"
    element_type: str
    element_id: str
    message: str


def validate_footprint(
    grid: FootprintGrid,
    style: BuildingStyle = BuildingStyle.SYMMETRICAL,
    interior: InteriorMode = InteriorMode.SOLID,
) -> list[ValidationError]:
    """Check a footprint against the rules of the style it was generated with."""
    errors: list[ValidationError] = []

    for r, row in enumerate(grid.cells):
        for c, cell in enumerate(row):
            if cell is not None and cell.position != (r, c):
                errors.append(ValidationError(
                    severity="error",
                    element_type="Cell",
                    element_id=f"{r},{c}",
                    message=f"Cell reports position {cell.position}",
                ))

    if style is BuildingStyle.QUIRKY:
        if grid.present_count() != 0:
            errors.append(ValidationError(
                severity="warning",
                element_type="Footprint",
                element_id="grid",
                message="Quirky footprint is expected to be empty",
            ))
        return errors

    symmetric_rows = range(grid.depth) if interior is InteriorMode.CONSTRAINED else [0]
    for r in symmetric_rows:
        errors.extend(_check_symmetry(grid, r))
        if not any(grid.row_presence(r)):
            errors.append(ValidationError(
                severity="error",
                element_type="Row",
                element_id=str(r),
                message=f"Row {r} is entirely empty",
            ))

    errors.extend(_check_isolated(grid, 0))

    if interior is InteriorMode.SOLID:
        for r in range(1, grid.depth):
            missing = [c for c, present in enumerate(grid.row_presence(r)) if not present]
            if missing:
                errors.append(ValidationError(
                    severity="error",
                    element_type="Row",
                    element_id=str(r),
                    message=f"Interior row {r} is missing columns {missing}",
                ))

    return errors


def validate_building(building: GeneratedBuilding) -> list[ValidationError]:
    """Footprint checks plus extrusion consistency."""
    errors = validate_footprint(building.footprint, building.style, building.interior)

    if not building.min_layers <= building.num_layers < building.max_layers:
        errors.append(ValidationError(
            severity="warning",
            element_type="Building",
            element_id=building.name,
            message=(
                f"{building.num_layers} layers is outside the generated range "
                f"[{building.min_layers}, {building.max_layers})"
            ),
        ))

    expected = building.num_layers * building.footprint.present_count()
    if building.block_count() != expected:
        errors.append(ValidationError(
            severity="error",
            element_type="Building",
            element_id=building.name,
            message=f"Expected {expected} placements, found {building.block_count()}",
        ))

    for p in building.placements:
        if (
            p.y >= building.footprint.depth
            or p.x >= building.footprint.width
            or not building.footprint.is_present(p.y, p.x)
        ):
            errors.append(ValidationError(
                severity="error",
                element_type="Placement",
                element_id=f"{p.x},{p.y},{p.height}",
                message="Placement is not over a filled footprint cell",
            ))
        elif p.height >= building.num_layers:
            errors.append(ValidationError(
                severity="error",
                element_type="Placement",
                element_id=f"{p.x},{p.y},{p.height}",
                message=f"Placement above top layer {building.num_layers - 1}",
            ))

    return errors


def _check_symmetry(grid: FootprintGrid, row: int) -> list[ValidationError]:
    presence = grid.row_presence(row)
    width = grid.width
    mismatched = [
        i for i in range(width // 2) if presence[i] != presence[width - 1 - i]
    ]
    if not mismatched:
        return []
    return [ValidationError(
        severity="error",
        element_type="Row",
        element_id=str(row),
        message=f"Row {row} is not symmetric at columns {mismatched}",
    )]


def _check_isolated(grid: FootprintGrid, row: int) -> list[ValidationError]:
    presence = grid.row_presence(row)
    if all(presence):
        return []
    errors = []
    for i, present in enumerate(presence):
        if not present:
            continue
        left = i > 0 and presence[i - 1]
        right = i < len(presence) - 1 and presence[i + 1]
        if not left and not right:
            errors.append(ValidationError(
                severity="error",
                element_type="Cell",
                element_id=f"{row},{i}",
                message=f"Isolated block at row {row}, column {i}",
            ))
    return errors
