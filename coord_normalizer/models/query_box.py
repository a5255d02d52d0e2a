"""Data model for a backend geographic query window.

The organisation search endpoint filters by an integer box anchored at
its bottom-left corner.  ``(0, 0, 0, 0)`` is a sentinel meaning "no
geographic filter" rather than a zero-size box at null island.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class QueryBox:
    """An integer search window in WGS 84 degrees.

    Attributes:
        location_x: Bottom-left longitude.
        location_y: Bottom-left latitude.
        len_x: Width in degrees of longitude.
        len_y: Height in degrees of latitude.
    """

    location_x: float = 0
    location_y: float = 0
    len_x: float = 0
    len_y: float = 0

    @property
    def is_worldwide(self) -> bool:
        """Whether this is the all-zero "no geographic filter" sentinel."""
        return self.location_x == 0 and self.location_y == 0 and self.len_x == 0 and self.len_y == 0

    def to_dict(self) -> dict[str, float]:
        """Serialise using the backend's query parameter names."""
        return {
            "locationX": self.location_x,
            "locationY": self.location_y,
            "lenX": self.len_x,
            "lenY": self.len_y,
        }
