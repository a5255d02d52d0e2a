"""Raw latitude/longitude candidate extraction.

Responsibilities:
- Walk the ordered key-path conventions for each axis independently
- Return the first present (non-``None``) raw value per axis, untouched
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import NamedTuple

from coord_normalizer.core.constants import LATITUDE_PATHS, LONGITUDE_PATHS


class RawCandidate(NamedTuple):
    """Uncoerced axis values pulled out of a record (``None`` = absent)."""

    raw_lat: object
    raw_lon: object


def resolve_path(record: object, path: tuple[str | int, ...]) -> object:
    """Follow *path* into *record*, returning ``None`` as soon as a step is missing.

    ``str`` steps look up mapping keys; ``int`` steps index into a
    list or tuple.  A step applied to the wrong container type counts
    as missing rather than raising.
    """
    node = record
    for step in path:
        if isinstance(step, int):
            if not isinstance(node, list | tuple) or len(node) <= step:
                return None
            node = node[step]
        else:
            if not isinstance(node, Mapping):
                return None
            node = node.get(step)
        if node is None:
            return None
    return node


def first_present(record: object, paths: tuple[tuple[str | int, ...], ...]) -> object:
    """Return the value at the first path in *paths* that resolves, else ``None``."""
    for path in paths:
        value = resolve_path(record, path)
        if value is not None:
            return value
    return None


def extract_candidate(record: object) -> RawCandidate:
    """Pick the most plausible raw latitude/longitude out of *record*.

    Each axis follows its own priority list, so latitude and longitude
    may legitimately come from different conventions in a mixed record.
    Anything that is not a mapping yields ``RawCandidate(None, None)``.
    """
    if not isinstance(record, Mapping):
        return RawCandidate(None, None)
    return RawCandidate(
        raw_lat=first_present(record, LATITUDE_PATHS),
        raw_lon=first_present(record, LONGITUDE_PATHS),
    )
