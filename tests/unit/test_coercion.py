"""Tests for numeric coercion of raw axis values."""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from coord_normalizer.normalize import parse_float_prefix, to_number


class TestNumbers:
    """Numbers pass through unchanged."""

    @pytest.mark.parametrize("value", [0, -37.8136, 144.9631, 90, -180, 1e-9])
    def test_passthrough(self, value: float) -> None:
        assert to_number(value) == value

    def test_result_is_float(self) -> None:
        assert isinstance(to_number(42), float)

    def test_out_of_range_is_not_checked(self) -> None:
        assert to_number(500) == 500.0

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite_becomes_nan(self, value: float) -> None:
        assert math.isnan(to_number(value))

    def test_bool_is_not_a_number(self) -> None:
        assert math.isnan(to_number(True))
        assert math.isnan(to_number(False))

    def test_int_too_large_for_float_becomes_nan(self) -> None:
        assert math.isnan(to_number(10**400))
        assert math.isnan(to_number(-(10**400)))

    def test_fraction_too_large_for_float_becomes_nan(self) -> None:
        assert math.isnan(to_number(Fraction(10**400, 3)))

    def test_fraction(self) -> None:
        assert to_number(Fraction(3, 2)) == 1.5


class TestDecimals:
    """Decimals from database and spreadsheet drivers are numbers."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(Decimal("1.5"), 1.5), (Decimal("-37.8136"), -37.8136), (Decimal("144.9631"), 144.9631)],
    )
    def test_passthrough(self, value: Decimal, expected: float) -> None:
        assert to_number(value) == expected

    @pytest.mark.parametrize("value", [Decimal("NaN"), Decimal("Infinity"), Decimal("1e400")])
    def test_non_finite_becomes_nan(self, value: Decimal) -> None:
        assert math.isnan(to_number(value))


class TestStrings:
    """Strings are parsed after comma → period replacement."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("-37.8136", -37.8136),
            ("-37,8136", -37.8136),
            ("144,9631", 144.9631),
            ("  144.96", 144.96),
            ("+12.5", 12.5),
            (".5", 0.5),
            ("1e2", 100.0),
            ("12.5 deg", 12.5),
            ("1.2.3", 1.2),
        ],
    )
    def test_parses(self, text: str, expected: float) -> None:
        assert to_number(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["", "invalid", "abc12", "-", ".", "Infinity", "NaN"])
    def test_unparseable_becomes_nan(self, text: str) -> None:
        assert math.isnan(to_number(text))

    @pytest.mark.parametrize("text", ["١٢", "۱۲.۵", "１２", "१२"])
    def test_non_ascii_digits_become_nan(self, text: str) -> None:
        assert math.isnan(to_number(text))

    def test_thousands_separator_truncates(self) -> None:
        """``1,234.5`` becomes ``1.234.5`` and parses as ``1.234``."""
        assert to_number("1,234.5") == pytest.approx(1.234)


class TestOtherTypes:
    """Non-numeric, non-string values become NaN."""

    @pytest.mark.parametrize("value", [None, [], [144.96], {}, {"value": 1}, object()])
    def test_becomes_nan(self, value: object) -> None:
        assert math.isnan(to_number(value))


class TestParseFloatPrefix:
    def test_no_match(self) -> None:
        assert math.isnan(parse_float_prefix("x1"))

    def test_exponent_without_digits_ignored(self) -> None:
        assert parse_float_prefix("3e") == 3.0
