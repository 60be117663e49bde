"""Exact rational and interval geometry, JSON polyhedra and SVG rendering for the Rupert property."""

__version__ = "0.1.0"