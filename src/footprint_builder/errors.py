"""Error types raised by the footprint generator."""

from __future__ import annotations


class FootprintError(ValueError):
    """Base class for footprint generation errors."""


class InvalidDimension(FootprintError):
    """Depth or width outside the supported [1, 9] range."""

    def __init__(self, name: str, value: object, low: int = 1, high: int = 9) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} must be an integer in [{low}, {high}], got {value!r}")


class InvalidStyle(FootprintError):
    """Style value that is not a known BuildingStyle."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown building style: {value!r}")


class RandomSourceExhausted(FootprintError):
    """A scripted random source ran out of values."""


class InvalidInteriorMode(FootprintError):
    """Interior value that is not a known InteriorMode."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown interior mode: {value!r}")
