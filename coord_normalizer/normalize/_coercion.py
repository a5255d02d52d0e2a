"""Numeric coercion of raw axis values.

Purely syntactic: turns a number or numeric string into a finite
``float`` or ``math.nan``.  No range checking happens here.
"""

from __future__ import annotations

import math
import numbers
import re
from decimal import Decimal

# Leading decimal literal, as a lenient float parser reads it: sign,
# ASCII digits with optional fraction (or a bare fraction), optional exponent.
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_float_prefix(text: str) -> float:
    """Parse the leading float literal of *text*, or return ``nan``.

    Leading whitespace is skipped and trailing characters are ignored,
    so ``"12.5 deg"`` gives ``12.5`` and ``"1.2.3"`` gives ``1.2``.
    """
    match = _FLOAT_PREFIX.match(text.lstrip())
    if match is None:
        return math.nan
    return float(match.group())


def to_number(value: object) -> float:
    """Coerce one raw axis value to a finite float or ``math.nan``.

    Strings have every ``,`` replaced by ``.`` first so locale exports
    such as ``"144,9631"`` parse as ``144.9631``.  ``Decimal`` values
    from database or spreadsheet drivers count as numbers.
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (numbers.Real, Decimal)):
        try:
            number = float(value)
        except (OverflowError, ValueError, TypeError):
            return math.nan
    elif isinstance(value, str):
        number = parse_float_prefix(value.replace(",", "."))
    else:
        return math.nan
    return number if math.isfinite(number) else math.nan
