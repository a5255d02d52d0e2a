"""Engine configuration loaded from environment variables.

The engine itself is pure; configuration only controls the optional
diagnostics sink (the "development build" switch) and the query-box
delta limits used when building backend search windows.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any numeric
    value is out of its valid range.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from coord_normalizer.core.constants import (
    DEFAULT_DIAGNOSTIC_SAMPLE_SIZE,
    QUERY_BOX_MAX_DELTA,
    QUERY_BOX_MIN_DELTA,
)
from coord_normalizer.core.exceptions import CoordinateError

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class ConfigValidationError(CoordinateError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class NormalizerConfig:
    """Immutable engine configuration.

    Attributes:
        diagnostics_enabled: Whether ``diagnostics.report`` logs anything.
            Off by default; switch on in development builds.
        diagnostic_sample_size: How many problem records to sample per category.
        query_box_min_delta: Smallest query-box side in degrees.
        query_box_max_delta: Largest query-box side in degrees.
    """

    diagnostics_enabled: bool = False
    diagnostic_sample_size: int = DEFAULT_DIAGNOSTIC_SAMPLE_SIZE
    query_box_min_delta: int = QUERY_BOX_MIN_DELTA
    query_box_max_delta: int = QUERY_BOX_MAX_DELTA

    @classmethod
    def from_env(cls) -> NormalizerConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a numeric value is out of range.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``QUERY_BOX_MAX_DELTA=abc``).
        """
        config = cls(
            diagnostics_enabled=os.getenv("COORDS_DIAGNOSTICS", "").strip().lower() in _TRUTHY,
            diagnostic_sample_size=int(
                os.getenv("COORDS_DIAGNOSTIC_SAMPLE_SIZE", str(DEFAULT_DIAGNOSTIC_SAMPLE_SIZE))
            ),
            query_box_min_delta=int(os.getenv("QUERY_BOX_MIN_DELTA", str(QUERY_BOX_MIN_DELTA))),
            query_box_max_delta=int(os.getenv("QUERY_BOX_MAX_DELTA", str(QUERY_BOX_MAX_DELTA))),
        )
        _validate(config)
        return config


def _validate(config: NormalizerConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if config.diagnostic_sample_size < 0:
        raise ConfigValidationError(
            "COORDS_DIAGNOSTIC_SAMPLE_SIZE",
            config.diagnostic_sample_size,
            "must be >= 0",
        )

    if config.query_box_min_delta <= 0:
        raise ConfigValidationError(
            "QUERY_BOX_MIN_DELTA",
            config.query_box_min_delta,
            "must be > 0 (degrees)",
        )

    if config.query_box_max_delta < config.query_box_min_delta:
        raise ConfigValidationError(
            "QUERY_BOX_MAX_DELTA",
            config.query_box_max_delta,
            f"must be >= QUERY_BOX_MIN_DELTA ({config.query_box_min_delta})",
        )
