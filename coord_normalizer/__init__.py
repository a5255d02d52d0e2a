"""Coordinate normalization and validation engine.

Ingests location records of unknown shape from several upstream
producers (maps SDK, GeoJSON backend, legacy ``coord`` field,
spreadsheet exports with comma decimals) and turns each one into a
single canonical WGS 84 coordinate, or rejects it.
"""

from coord_normalizer.models.coordinate import Coordinate
from coord_normalizer.normalize import extract_batch, has_valid_coords, is_valid, normalize

__version__ = "0.1.0"

__all__ = [
    "Coordinate",
    "extract_batch",
    "has_valid_coords",
    "is_valid",
    "normalize",
]
