"""Development-time coordinate diagnostics.

Tallies how a batch of records fares in the normalization pipeline:
how many carry any coordinate-shaped field, how many normalize, how
many are rejected as out of range, and how many needed the axis-swap
repair.  Purely observational; nothing here changes what
``normalize`` returns.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from coord_normalizer.core.constants import (
    COORDINATE_ARRAY_PATHS,
    DEFAULT_DIAGNOSTIC_SAMPLE_SIZE,
    LATITUDE_PATHS,
    LONGITUDE_PATHS,
    RECORD_NAME_KEY,
)
from coord_normalizer.normalize import RejectionReason, evaluate
from coord_normalizer.normalize._extraction import extract_candidate, resolve_path

if TYPE_CHECKING:
    from collections.abc import Iterable

    from coord_normalizer.core.config import NormalizerConfig

logger = logging.getLogger("coord_normalizer.diagnostics")

# Scalar field paths (no array indexing) that count as "has coordinates".
_SCALAR_PATHS = tuple(
    path for path in (*LATITUDE_PATHS, *LONGITUDE_PATHS) if not isinstance(path[-1], int)
)


@dataclass(frozen=True, slots=True)
class RecordSample:
    """A problem record as it arrived, before coercion."""

    name: object
    lat: object
    lon: object


@dataclass(frozen=True, slots=True)
class DiagnosticReport:
    """Pipeline tallies for one batch of records.

    Attributes:
        total: Number of records inspected.
        with_any_coords: Records with at least one coordinate-shaped field.
        valid: Records that normalize to a Coordinate.
        out_of_range: Records rejected because they fall outside WGS 84 bounds.
        swapped: Records the axis-swap heuristic fired on.
        out_of_range_samples: First few out-of-range records.
        swapped_samples: First few swapped records.
    """

    total: int = 0
    with_any_coords: int = 0
    valid: int = 0
    out_of_range: int = 0
    swapped: int = 0
    out_of_range_samples: list[RecordSample] = field(default_factory=list)
    swapped_samples: list[RecordSample] = field(default_factory=list)

    @property
    def missing(self) -> int:
        """Records rejected for missing or unparseable data."""
        return self.total - self.valid - self.out_of_range


def has_any_coords(record: object) -> bool:
    """Whether *record* carries any field that looks like coordinate data."""
    if any(resolve_path(record, path) is not None for path in _SCALAR_PATHS):
        return True
    return any(resolve_path(record, path) is not None for path in COORDINATE_ARRAY_PATHS)


def _sample(record: object) -> RecordSample:
    candidate = extract_candidate(record)
    name = record.get(RECORD_NAME_KEY) if isinstance(record, Mapping) else None
    return RecordSample(name=name, lat=candidate.raw_lat, lon=candidate.raw_lon)


def summarize(
    records: Iterable[object],
    *,
    sample_size: int = DEFAULT_DIAGNOSTIC_SAMPLE_SIZE,
) -> DiagnosticReport:
    """Run every record through the pipeline and tally the outcomes."""
    total = with_any = valid = out_of_range = swapped = 0
    out_of_range_samples: list[RecordSample] = []
    swapped_samples: list[RecordSample] = []

    for record in records:
        total += 1
        if has_any_coords(record):
            with_any += 1

        outcome = evaluate(record)
        if outcome.accepted:
            valid += 1
        elif outcome.reason is RejectionReason.OUT_OF_RANGE:
            out_of_range += 1
            if len(out_of_range_samples) < sample_size:
                out_of_range_samples.append(_sample(record))

        if outcome.swapped:
            swapped += 1
            if len(swapped_samples) < sample_size:
                swapped_samples.append(_sample(record))

    return DiagnosticReport(
        total=total,
        with_any_coords=with_any,
        valid=valid,
        out_of_range=out_of_range,
        swapped=swapped,
        out_of_range_samples=out_of_range_samples,
        swapped_samples=swapped_samples,
    )


def report(
    records: Iterable[object],
    label: str = "Records",
    *,
    config: NormalizerConfig | None = None,
) -> None:
    """Log a diagnostic summary of *records* when diagnostics are enabled.

    Args:
        records: Raw location records, as fetched.
        label: Name of the batch in the log output.
        config: Engine configuration; loaded from the environment when omitted.
    """
    if config is None:
        from coord_normalizer.core.config import NormalizerConfig

        config = NormalizerConfig.from_env()
    if not config.diagnostics_enabled:
        return

    summary = summarize(records, sample_size=config.diagnostic_sample_size)
    logger.info(
        "Coordinate diagnostic | label=%s | total=%d | with_any_coords=%d | "
        "valid=%d | out_of_range=%d | swapped=%d",
        label,
        summary.total,
        summary.with_any_coords,
        summary.valid,
        summary.out_of_range,
        summary.swapped,
    )
    if summary.out_of_range_samples:
        logger.info("Sample out-of-range | label=%s | %s", label, summary.out_of_range_samples)
    if summary.swapped_samples:
        logger.info("Sample swapped | label=%s | %s", label, summary.swapped_samples)
