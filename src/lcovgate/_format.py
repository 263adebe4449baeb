"""Number parsing and formatting shared by the report, thresholds and errors."""

from __future__ import annotations

import math
import re

_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INTEGER_LITERAL = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")
_INFINITY = re.compile(r"[+-]?Infinity")


def to_number(raw: str) -> float:
    """Convert *raw* the way report counts and minimums have always been read.

    Surrounding whitespace is ignored and a blank string is ``0``. Decimal and
    exponent literals, ``0x``/``0o``/``0b`` integers and ``Infinity`` are
    numbers; anything else (``"abc"``, ``"1_0"``, ``"inf"``) is ``nan``.
    """
    text = raw.strip()
    if not text:
        return 0.0
    if _DECIMAL.fullmatch(text):
        return float(text)
    if _INTEGER_LITERAL.fullmatch(text):
        return float(int(text, 0))
    if _INFINITY.fullmatch(text):
        return -math.inf if text.startswith("-") else math.inf
    return math.nan


def format_number(value: float) -> str:
    """Return *value* as printed in reports: ``50`` rather than ``50.0``."""
    if math.isinf(value):
        return "-Infinity" if value < 0 else "Infinity"
    if float(value).is_integer():
        return str(int(value))
    return repr(value)


__all__ = ["format_number", "to_number"]
