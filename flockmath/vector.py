"""A plain three-component vector of floats."""

from __future__ import annotations

import math
from collections.abc import Iterator
from numbers import Real

EPSILON = 1.1920928955078125e-07  # single-precision machine epsilon


class Vector:
    """A 3D vector with ``x``, ``y`` and ``z``; equality is within ``EPSILON`` per component."""

    __slots__ = ("x", "y", "z")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = x
        self.y = y
        self.z = z

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        inv = 1.0 / scalar
        return Vector(self.x * inv, self.y * inv, self.z * inv)

    def __iadd__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __imul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    def __itruediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        inv = 1.0 / scalar
        self.x *= inv
        self.y *= inv
        self.z *= inv
        return self

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return (
            abs(self.x - other.x) < EPSILON
            and abs(self.y - other.y) < EPSILON
            and abs(self.z - other.z) < EPSILON
        )

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector:
        """Return a unit-length copy."""
        inorm = 1.0 / self.norm()
        return Vector(self.x * inorm, self.y * inorm, self.z * inorm)

    def normalize(self) -> None:
        """Scale this vector to unit length in place."""
        inorm = 1.0 / self.norm()
        self.x *= inorm
        self.y *= inorm
        self.z *= inorm

    def __str__(self) -> str:
        return " ".join(f"{v:g}" for v in self)

    def __repr__(self) -> str:
        return f"Vector({self.x!r}, {self.y!r}, {self.z!r})"


def zeros() -> Vector:
    """Return a new zero vector."""
    return Vector(0.0, 0.0, 0.0)