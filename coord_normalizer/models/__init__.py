"""Data models.

- Coordinate: Canonical, bounds-valid WGS 84 coordinate
- QueryBox: Integer geographic search window for the backend
"""

from coord_normalizer.models.coordinate import Coordinate
from coord_normalizer.models.query_box import QueryBox

__all__ = [
    "Coordinate",
    "QueryBox",
]
