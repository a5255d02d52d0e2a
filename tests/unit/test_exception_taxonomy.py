"""Tests for the coordinate-engine exception taxonomy.

Validates:
- CoordinateError base attributes and ``to_error_dict()`` keys
- Category classification (validation, configuration)
- Every custom exception is a CoordinateError with a stage and code
"""

from __future__ import annotations

from typing import ClassVar

from coord_normalizer.core.config import ConfigValidationError
from coord_normalizer.core.exceptions import (
    CoordinateError,
    InvalidCoordinateError,
    QueryBoxError,
    ValidationError,
)


class TestCoordinateErrorBase:
    """CoordinateError base class behavior."""

    def test_default_attributes(self) -> None:
        err = CoordinateError("boom")
        assert err.message == "boom"
        assert err.stage == ""
        assert err.code == ""

    def test_custom_attributes(self) -> None:
        err = CoordinateError("fail", stage="geo_query", code="CUSTOM")
        assert err.stage == "geo_query"
        assert err.code == "CUSTOM"

    def test_str_is_message(self) -> None:
        assert str(CoordinateError("human-readable error")) == "human-readable error"

    def test_to_error_dict_keys(self) -> None:
        d = CoordinateError("x", stage="s", code="C").to_error_dict()
        assert d == {"category": "configuration", "code": "C", "stage": "s", "message": "x"}


class TestCategories:
    def test_validation_category(self) -> None:
        assert ValidationError("bad").category == "validation"
        assert InvalidCoordinateError("bad").category == "validation"
        assert QueryBoxError("bad").category == "validation"

    def test_config_category(self) -> None:
        assert ConfigValidationError("K", 1, "nope").category == "configuration"


class TestAllExceptionsAreCoordinateError:
    EXCEPTION_CLASSES: ClassVar[list[type[CoordinateError]]] = [
        ValidationError,
        InvalidCoordinateError,
        QueryBoxError,
        ConfigValidationError,
    ]

    def test_all_subclass_coordinate_error(self) -> None:
        for cls in self.EXCEPTION_CLASSES:
            assert issubclass(cls, CoordinateError), f"{cls.__name__} is not a CoordinateError"


class TestStageAndCode:
    def test_invalid_coordinate_error(self) -> None:
        err = InvalidCoordinateError("lat out of range")
        assert err.stage == "coordinate"
        assert err.code == "COORDINATE_OUT_OF_RANGE"

    def test_query_box_error(self) -> None:
        err = QueryBoxError("inverted deltas")
        assert err.stage == "geo_query"
        assert err.code == "QUERY_BOX_INVALID"

    def test_config_validation_error(self) -> None:
        err = ConfigValidationError("QUERY_BOX_MAX_DELTA", 0, "must be >= 1")
        assert err.stage == "config"
        assert err.code == "CONFIG_VALIDATION_FAILED"
        assert err.key == "QUERY_BOX_MAX_DELTA"
        assert err.value == 0
        assert "QUERY_BOX_MAX_DELTA=0" in err.message
