"""Footprint invariant validation.

- footprint: symmetry, contiguity, solid interior, non-empty front
- building: extrusion count and placement bounds
"""

from footprint_builder.validators.footprint import (
    ValidationError,
    validate_building,
    validate_footprint,
)

__all__ = ["ValidationError", "validate_building", "validate_footprint"]
