"""Canonical coordinate value.

A Coordinate is the only thing the engine ever hands back to callers:
a WGS 84 ``(latitude, longitude)`` pair in degrees that is guaranteed
to lie inside geographic bounds.  It is produced whole or not at all.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from coord_normalizer.core.constants import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)
from coord_normalizer.core.exceptions import InvalidCoordinateError


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A bounds-valid WGS 84 coordinate.

    Attributes:
        latitude: Degrees in ``[-90, 90]``.
        longitude: Degrees in ``[-180, 180]``.

    Raises:
        InvalidCoordinateError: On construction with a non-finite or
            out-of-range value.
    """

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.latitude) and math.isfinite(self.longitude)):
            msg = f"Coordinate must be finite, got ({self.latitude!r}, {self.longitude!r})"
            raise InvalidCoordinateError(msg)
        if not (MIN_LATITUDE <= self.latitude <= MAX_LATITUDE):
            msg = f"Latitude {self.latitude} out of WGS 84 range [{MIN_LATITUDE}, {MAX_LATITUDE}]"
            raise InvalidCoordinateError(msg)
        if not (MIN_LONGITUDE <= self.longitude <= MAX_LONGITUDE):
            msg = (
                f"Longitude {self.longitude} out of WGS 84 range "
                f"[{MIN_LONGITUDE}, {MAX_LONGITUDE}]"
            )
            raise InvalidCoordinateError(msg)

    def to_dict(self) -> dict[str, float]:
        """Serialise to the ``{latitude, longitude}`` shape the map layer consumes."""
        return {"latitude": self.latitude, "longitude": self.longitude}

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Coordinate:
        """Deserialise from a strict ``{latitude, longitude}`` dict.

        Unlike ``normalize``, this does not search alternative field
        names or repair swapped axes.

        Raises:
            KeyError: If either key is missing.
            TypeError: If a value is not numeric.
            InvalidCoordinateError: If the values are out of range.
        """
        return cls(
            latitude=float(data["latitude"]),  # type: ignore[arg-type]
            longitude=float(data["longitude"]),  # type: ignore[arg-type]
        )

    @property
    def lon_lat(self) -> tuple[float, float]:
        """``(lon, lat)`` tuple in GeoJSON order."""
        return (self.longitude, self.latitude)
