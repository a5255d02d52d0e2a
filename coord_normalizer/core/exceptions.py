"""Exception taxonomy for the coordinate engine.

Malformed location records are never an exception: ``normalize`` and
friends signal rejection by returning ``None`` / ``False`` / dropping
the record.  The exceptions here cover programming and configuration
mistakes only, e.g. constructing a ``Coordinate`` by hand with an
out-of-range latitude, or loading an inverted query-box delta range.

Taxonomy categories
-------------------
- ``ValidationError``: a value violates a model invariant or contract.
- ``ConfigValidationError``: environment configuration out of range
  (defined in ``core.config``).

Every exception exposes ``to_error_dict()`` for a stable structured
payload suitable for logging.
"""

from __future__ import annotations


class CoordinateError(Exception):
    """Base exception for all coordinate-engine errors.

    Attributes:
        message: Human-readable error description.
        stage: Component where the error occurred
            (e.g. ``"coordinate"``, ``"geo_query"``, ``"config"``).
        code: Machine-readable error code (e.g. ``"COORDINATE_OUT_OF_RANGE"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(self, message: str = "", *, stage: str = "", code: str = "") -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        return "configuration"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


class ValidationError(CoordinateError):
    """A value violates a model invariant or call contract."""


class InvalidCoordinateError(ValidationError):
    """Raised when a Coordinate is constructed outside WGS 84 bounds."""

    default_stage = "coordinate"
    default_code = "COORDINATE_OUT_OF_RANGE"


class QueryBoxError(ValidationError):
    """Raised when query-box clamping is given an unusable delta range."""

    default_stage = "geo_query"
    default_code = "QUERY_BOX_INVALID"
