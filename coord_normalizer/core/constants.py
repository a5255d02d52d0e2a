"""Shared constants for the coordinate engine: single source of truth.

Bounds, upstream field-name conventions, and backend query-box limits
used by the extractor, validator, diagnostics and geo query helpers.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# WGS 84 geographic bounds (degrees, inclusive)
# ---------------------------------------------------------------------------

MIN_LATITUDE: float = -90.0
MAX_LATITUDE: float = 90.0
MIN_LONGITUDE: float = -180.0
MAX_LONGITUDE: float = 180.0

# ---------------------------------------------------------------------------
# Upstream record conventions
# ---------------------------------------------------------------------------

# Key paths tried in order for each axis.  A path step that is an int
# indexes into a list/tuple; a str step looks up a mapping key.
# GeoJSON-style arrays are ``[longitude, latitude]``.
LATITUDE_PATHS: tuple[tuple[str | int, ...], ...] = (
    ("latitude",),
    ("lat",),
    ("billingAddress", "latitude"),
    ("location", "coordinates", 1),
    ("coord", "coordinates", 1),
)
"""Latitude sources: direct, abbreviated, billing address, GeoJSON, backend ``coord``."""

LONGITUDE_PATHS: tuple[tuple[str | int, ...], ...] = (
    ("longitude",),
    ("lng",),
    ("lon",),
    ("billingAddress", "longitude"),
    ("location", "coordinates", 0),
    ("coord", "coordinates", 0),
)
"""Longitude sources, same priority as latitude plus the ``lon`` spelling."""

COORDINATE_ARRAY_PATHS: tuple[tuple[str, ...], ...] = (
    ("location", "coordinates"),
    ("coord", "coordinates"),
)
"""Container paths holding ``[lon, lat]`` arrays (used by diagnostics)."""

RECORD_NAME_KEY: str = "name"
"""Display key used when sampling problem records in diagnostics."""

# ---------------------------------------------------------------------------
# Backend geographic query box
# ---------------------------------------------------------------------------

QUERY_BOX_MIN_DELTA: int = 1
"""Smallest box side in degrees (backend requires integers)."""

QUERY_BOX_MAX_DELTA: int = 10
"""Largest box side in degrees; larger windows make the backend fail."""

QUERY_BOX_MAX_X: float = 179.99
QUERY_BOX_MAX_Y: float = 89.99

DEFAULT_DIAGNOSTIC_SAMPLE_SIZE: int = 3
