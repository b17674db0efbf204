"""Numeric helpers: power-of-two checks, tolerant equality, modulo, formatting, random draws."""

from __future__ import annotations

import math
import random
import sys
from collections.abc import Hashable, Mapping
from numbers import Integral, Real

PI = 3.14159265359
ONE_DEG_IN_RAD = 0.0174532925

IDENTITY3 = (
    1.0, 0.0, 0.0,
    0.0, 1.0, 0.0,
    0.0, 0.0, 1.0,
)

IDENTITY4 = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)

_MEMORY_PREFIXES = " KMGTP"


def _require_integral(x: object) -> int:
    if not isinstance(x, Integral):
        raise TypeError(f"expected an integral value, got {type(x).__name__}")
    return int(x)


def is_power_of_two(x: int) -> bool:
    """Return True when ``x`` is a positive power of two."""
    value = _require_integral(x)
    return bool(value) and (value & (value - 1)) == 0


def get_power_of_two(x: int) -> int:
    """Return the index of the highest set bit of ``x`` (log2 for powers of two)."""
    value = _require_integral(x)
    if value == 0:
        raise ValueError("x is zero")
    if value < 0:
        raise ValueError("x must be positive")
    return value.bit_length() - 1


def compute_power_of_two(x: int) -> int:
    """Return ``2 ** x`` for a non-negative integer exponent."""
    value = _require_integral(x)
    if value < 0:
        raise ValueError("the exponent must not be negative")
    return 1 << value


def flip_map(mapping: Mapping) -> dict:
    """Swap keys and values, ordered by the new keys.

    Keys are visited in sorted order; when several keys share a value,
    the smallest key is kept.
    """
    flipped: dict[Hashable, object] = {}
    for key in sorted(mapping):
        flipped.setdefault(mapping[key], key)
    return dict(sorted(flipped.items()))


def map_to_reverse_pairs(mapping: Mapping) -> list[tuple]:
    """Return ``(value, key)`` pairs in sorted key order."""
    return [(mapping[key], key) for key in sorted(mapping)]


def are_equal(a: Real, b: Real) -> bool:
    """Exact equality for integers, relative-epsilon equality for floats."""
    if isinstance(a, Integral) and isinstance(b, Integral):
        return a == b
    fa, fb = float(a), float(b)
    return abs(fa - fb) <= sys.float_info.epsilon * max(abs(fa), abs(fb))


def modulo(a: Real, b: Real) -> Real:
    """Remainder whose sign follows the dividend (truncated division)."""
    if b == 0:
        raise ZeroDivisionError("modulo by zero")
    if isinstance(a, Integral) and isinstance(b, Integral):
        remainder = abs(int(a)) % abs(int(b))
        return -remainder if a < 0 else remainder
    return math.fmod(a, b)


def to_string_memory(nbytes: int) -> str:
    """Format a byte count with a binary prefix, e.g. ``1.5KB``.

    Counts of 1024**6 bytes or more give an empty string.
    """
    if nbytes < 0:
        raise ValueError("byte count must not be negative")
    scale = 1
    for prefix in _MEMORY_PREFIXES:
        if nbytes < 1024 * scale:
            value = math.floor(100 * nbytes / scale + 0.5) / 100.0
            return f"{value:g}{prefix}B"
        scale *= 1024
    return ""


def randf(lo: float = 0.0, hi: float = 1.0) -> float:
    """Draw a uniform float in ``[lo, hi]``."""
    return random.uniform(lo, hi)


def randi(lo: int, hi: int) -> int:
    """Draw an integer between ``lo`` and ``hi``, truncating toward zero."""
    return math.trunc(lo + random.random() * (hi - lo))