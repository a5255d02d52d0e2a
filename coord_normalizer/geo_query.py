"""Geographic query box helpers for the organisation search backend.

The backend answers 500 for oversized or fractional windows, so every
box sent to it is clamped to integer degrees within a bounded size.
Boxes can be built from presets or fitted around the coordinates the
normalizer accepted.  ``(0, 0, 0, 0)`` is the worldwide sentinel
and is never clamped.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from coord_normalizer.core.constants import QUERY_BOX_MAX_X, QUERY_BOX_MAX_Y
from coord_normalizer.core.exceptions import QueryBoxError
from coord_normalizer.models.query_box import QueryBox
from coord_normalizer.normalize import extract_batch

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from coord_normalizer.core.config import NormalizerConfig
    from coord_normalizer.models.coordinate import Coordinate

logger = logging.getLogger("coord_normalizer.geo_query")

# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------

WORLDWIDE_QUERY_BOX = QueryBox(0, 0, 0, 0)
"""All organisations, no geographic filter."""

VIC_QUERY_BOX = QueryBox(location_x=141, location_y=-39, len_x=6, len_y=6)
"""Victoria: Melbourne plus regional VIC (141..147 E, -39..-33 S)."""

MELBOURNE_QUERY_BOX = QueryBox(location_x=144, location_y=-38, len_x=2, len_y=2)

DEFAULT_QUERY_BOX = WORLDWIDE_QUERY_BOX


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _round_half_up(value: float) -> int:
    # round() is banker's rounding; the backend expects 0.5 to go up.
    return math.floor(value + 0.5)


def _resolve_deltas(
    min_delta: float | None,
    max_delta: float | None,
    config: NormalizerConfig | None,
) -> tuple[float, float]:
    """Fill unset delta limits from *config*, loading it from the environment if needed."""
    if min_delta is not None and max_delta is not None:
        return min_delta, max_delta
    if config is None:
        from coord_normalizer.core.config import NormalizerConfig

        config = NormalizerConfig.from_env()
    return (
        config.query_box_min_delta if min_delta is None else min_delta,
        config.query_box_max_delta if max_delta is None else max_delta,
    )


def clamp_query_box(
    box: QueryBox,
    *,
    min_delta: float | None = None,
    max_delta: float | None = None,
    config: NormalizerConfig | None = None,
) -> QueryBox:
    """Clamp *box* to safe backend limits, rounded to integer degrees.

    Args:
        box: Requested window.
        min_delta: Smallest allowed side length in degrees.
        max_delta: Largest allowed side length in degrees.
        config: Source of the delta limits not given explicitly; loaded
            from the environment when omitted.

    Returns:
        The worldwide sentinel unchanged, otherwise a clamped integer box.

    Raises:
        QueryBoxError: If ``min_delta`` exceeds ``max_delta``.
    """
    min_delta, max_delta = _resolve_deltas(min_delta, max_delta, config)
    if min_delta > max_delta:
        msg = f"min_delta {min_delta} exceeds max_delta {max_delta}"
        raise QueryBoxError(msg)

    if box.is_worldwide:
        return WORLDWIDE_QUERY_BOX

    return QueryBox(
        location_x=_round_half_up(_clamp(box.location_x, -QUERY_BOX_MAX_X, QUERY_BOX_MAX_X)),
        location_y=_round_half_up(_clamp(box.location_y, -QUERY_BOX_MAX_Y, QUERY_BOX_MAX_Y)),
        len_x=_round_half_up(_clamp(box.len_x, min_delta, max_delta)),
        len_y=_round_half_up(_clamp(box.len_y, min_delta, max_delta)),
    )


def bbox_from_coordinates(
    coords: Sequence[Coordinate],
    *,
    min_delta: float | None = None,
    max_delta: float | None = None,
    config: NormalizerConfig | None = None,
) -> QueryBox:
    """Fit a clamped query box around *coords*.

    Returns ``DEFAULT_QUERY_BOX`` when there is nothing to fit.
    """
    if not coords:
        return DEFAULT_QUERY_BOX

    from shapely.geometry import MultiPoint

    min_lon, min_lat, max_lon, max_lat = MultiPoint([c.lon_lat for c in coords]).bounds
    box = clamp_query_box(
        QueryBox(
            location_x=math.floor(min_lon),
            location_y=math.floor(min_lat),
            len_x=math.ceil(max_lon - min_lon),
            len_y=math.ceil(max_lat - min_lat),
        ),
        min_delta=min_delta,
        max_delta=max_delta,
        config=config,
    )
    logger.debug(
        "Query box fitted | points=%d | bounds=[%.4f, %.4f, %.4f, %.4f] | box=%s",
        len(coords),
        min_lon,
        min_lat,
        max_lon,
        max_lat,
        box.to_dict(),
    )
    return box


def bbox_from_records(
    records: Iterable[object],
    *,
    min_delta: float | None = None,
    max_delta: float | None = None,
    config: NormalizerConfig | None = None,
) -> QueryBox:
    """Normalize *records* and fit a query box around the accepted ones."""
    return bbox_from_coordinates(
        extract_batch(records), min_delta=min_delta, max_delta=max_delta, config=config
    )
