"""Procedural building footprint generation and block extrusion."""

__version__ = "0.1.0"
