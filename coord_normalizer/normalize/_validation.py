"""Axis-swap correction and WGS 84 range validation.

Responsibilities:
- Reject pairs with a missing (NaN) axis
- Undo the latitude/longitude mix-up seen in upstream exports
- Reject pairs that are still outside geographic bounds
"""

from __future__ import annotations

import enum
import logging
import math
from typing import NamedTuple

from coord_normalizer.core.constants import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)

logger = logging.getLogger("coord_normalizer.normalize")


class RejectionReason(enum.Enum):
    """Why a record produced no coordinate."""

    MISSING_DATA = "missing_data"
    OUT_OF_RANGE = "out_of_range"


class Outcome(NamedTuple):
    """Result of validating one coerced pair.

    ``latitude``/``longitude`` are post-swap values; ``reason`` is
    ``None`` when the pair was accepted.
    """

    latitude: float
    longitude: float
    reason: RejectionReason | None = None
    swapped: bool = False

    @property
    def accepted(self) -> bool:
        return self.reason is None


def looks_swapped(lat: float, lon: float) -> bool:
    """A latitude beyond ±90 paired with a longitude within ±90 is an axis mix-up.

    Common with Australian data, where longitudes of 140-150 land in
    the latitude field.  Pairs where both values sit within ±90 cannot
    be told apart and are left alone.
    """
    return abs(lat) > MAX_LATITUDE and abs(lon) <= MAX_LATITUDE


def in_bounds(lat: float, lon: float) -> bool:
    """Inclusive WGS 84 range check."""
    return MIN_LATITUDE <= lat <= MAX_LATITUDE and MIN_LONGITUDE <= lon <= MAX_LONGITUDE


def validate_pair(lat: float, lon: float) -> Outcome:
    """Run missing-data check, one-shot swap, then the final range guard."""
    if math.isnan(lat) or math.isnan(lon):
        return Outcome(lat, lon, RejectionReason.MISSING_DATA)

    swapped = False
    if looks_swapped(lat, lon):
        logger.debug(
            "Detected swapped coordinates, fixing: lat=%s -> %s, lon=%s -> %s",
            lat,
            lon,
            lon,
            lat,
        )
        lat, lon = lon, lat
        swapped = True

    if not in_bounds(lat, lon):
        return Outcome(lat, lon, RejectionReason.OUT_OF_RANGE, swapped)

    return Outcome(lat, lon, None, swapped)
