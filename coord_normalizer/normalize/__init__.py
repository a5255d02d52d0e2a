"""Coordinate normalization pipeline.

Turns an arbitrarily-shaped location record into a canonical
``Coordinate`` or a rejection.  The pipeline is split into focused
stages:
- **_extraction**: find raw latitude/longitude candidates by convention
- **_coercion**: raw value → finite float or NaN (comma decimals tolerated)
- **_validation**: missing-data check, axis-swap repair, range guard

Malformed input never raises.  Rejection is reported as ``None``
(``normalize``), ``False`` (``is_valid``) or by omission
(``extract_batch``); ``evaluate`` exposes the reason for diagnostics.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from coord_normalizer.models.coordinate import Coordinate
from coord_normalizer.normalize._coercion import parse_float_prefix, to_number
from coord_normalizer.normalize._extraction import (
    RawCandidate,
    extract_candidate,
    first_present,
    resolve_path,
)
from coord_normalizer.normalize._validation import (
    Outcome,
    RejectionReason,
    in_bounds,
    looks_swapped,
    validate_pair,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger("coord_normalizer.normalize")

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "Outcome",
    "RawCandidate",
    "RejectionReason",
    "evaluate",
    "extract_batch",
    "extract_candidate",
    "first_present",
    "has_valid_coords",
    "in_bounds",
    "is_valid",
    "looks_swapped",
    "normalize",
    "parse_float_prefix",
    "resolve_path",
    "to_number",
    "validate_pair",
]


def evaluate(record: object) -> Outcome:
    """Run extract → coerce → validate on one record without building a Coordinate.

    A ``Coordinate`` is accepted as input and read back through its
    ``{latitude, longitude}`` shape.
    """
    if isinstance(record, Coordinate):
        record = record.to_dict()
    candidate = extract_candidate(record)
    return validate_pair(to_number(candidate.raw_lat), to_number(candidate.raw_lon))


def normalize(record: object) -> Coordinate | None:
    """Return the canonical coordinate for *record*, or ``None`` if rejected."""
    outcome = evaluate(record)
    if not outcome.accepted:
        return None
    return Coordinate(latitude=outcome.latitude, longitude=outcome.longitude)


def is_valid(record: object) -> bool:
    """Whether *record* would normalize to a coordinate."""
    return evaluate(record).accepted


has_valid_coords = is_valid


def extract_batch(records: Iterable[object]) -> list[Coordinate]:
    """Normalize every record, keeping accepted coordinates in input order.

    Rejected records are dropped; the drop count is only logged.
    """
    coords: list[Coordinate] = []
    dropped = 0
    for record in records:
        coord = normalize(record)
        if coord is None:
            dropped += 1
        else:
            coords.append(coord)

    if dropped:
        logger.debug("Dropped %d record(s) without valid coordinates", dropped)
    return coords
