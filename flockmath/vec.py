"""Fixed-size numeric vectors with element-wise arithmetic."""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Iterable, Iterator
from numbers import Real

from flockmath.numeric import are_equal, modulo


def _format_component(value: Real) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


class Vec:
    """An N-dimensional vector of real numbers.

    Built from components (``Vec(1, 2, 3)``), from an iterable
    (``Vec([1, 2, 3])``) or from another vector (a copy). Equality is
    tolerant for floats; ordering operators return a tuple of booleans,
    one per component.
    """

    __slots__ = ("_data",)
    _dimension: int | None = None
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *args):
        if len(args) == 1 and isinstance(args[0], Iterable) and not isinstance(args[0], (str, bytes)):
            values = list(args[0])
        elif not args and self._dimension is not None:
            values = [0.0] * self._dimension
        else:
            values = list(args)
        if self._dimension is not None and len(values) != self._dimension:
            raise ValueError(
                f"{type(self).__name__} needs {self._dimension} components, got {len(values)}"
            )
        if not values:
            raise ValueError("a vector needs at least one component")
        for value in values:
            if not isinstance(value, Real):
                raise TypeError(f"vector components must be real numbers, got {type(value).__name__}")
        self._data = values

    def _from(self, values: Iterable[Real]) -> Vec:
        return type(self)(list(values))

    def _pairs(self, other: Vec) -> Iterator[tuple[Real, Real]]:
        if len(other) != len(self):
            raise ValueError(f"dimension mismatch: {len(self)} and {len(other)}")
        return zip(self._data, other._data)

    def _binary(self, other, op: Callable[[Real, Real], Real]):
        if isinstance(other, Vec):
            return self._from(op(a, b) for a, b in self._pairs(other))
        if isinstance(other, Real):
            return self._from(op(a, other) for a in self._data)
        return NotImplemented

    def _reflected(self, other, op: Callable[[Real, Real], Real]):
        if isinstance(other, Real):
            return self._from(op(other, a) for a in self._data)
        return NotImplemented

    def _inplace(self, other, op: Callable[[Real, Real], Real]):
        if isinstance(other, Vec):
            self._data = [op(a, b) for a, b in self._pairs(other)]
        elif isinstance(other, Real):
            self._data = [op(a, other) for a in self._data]
        else:
            return NotImplemented
        return self

    def _compare(self, other, op: Callable[[Real, Real], bool], inclusive: bool):
        if not isinstance(other, Vec):
            return NotImplemented
        if inclusive:
            return tuple(are_equal(a, b) or op(a, b) for a, b in self._pairs(other))
        return tuple(op(a, b) and not are_equal(a, b) for a, b in self._pairs(other))

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Real]:
        return iter(self._data)

    def __getitem__(self, index: int) -> Real:
        return self._data[index]

    def __setitem__(self, index: int, value: Real) -> None:
        if not isinstance(value, Real):
            raise TypeError(f"vector components must be real numbers, got {type(value).__name__}")
        self._data[index] = value

    def __add__(self, other):
        return self._binary(other, operator.add)

    def __sub__(self, other):
        return self._binary(other, operator.sub)

    def __mul__(self, other):
        return self._binary(other, operator.mul)

    def __truediv__(self, other):
        return self._binary(other, operator.truediv)

    def __mod__(self, other):
        return self._binary(other, modulo)

    def __radd__(self, other):
        return self._reflected(other, operator.add)

    def __rsub__(self, other):
        return self._reflected(other, operator.sub)

    def __rmul__(self, other):
        return self._reflected(other, operator.mul)

    def __rtruediv__(self, other):
        return self._reflected(other, operator.truediv)

    def __rmod__(self, other):
        return self._reflected(other, modulo)

    def __iadd__(self, other):
        return self._inplace(other, operator.add)

    def __isub__(self, other):
        return self._inplace(other, operator.sub)

    def __imul__(self, other):
        return self._inplace(other, operator.mul)

    def __itruediv__(self, other):
        return self._inplace(other, operator.truediv)

    def __imod__(self, other):
        return self._inplace(other, modulo)

    def __neg__(self):
        return self._from(-a for a in self._data)

    def __or__(self, other):
        if not isinstance(other, Vec):
            return NotImplemented
        return self.dot(other)

    def __eq__(self, other):
        if not isinstance(other, Vec):
            return NotImplemented
        if len(other) != len(self):
            return False
        return all(are_equal(a, b) for a, b in zip(self._data, other._data))

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __le__(self, other):
        return self._compare(other, operator.lt, inclusive=True)

    def __ge__(self, other):
        return self._compare(other, operator.gt, inclusive=True)

    def __lt__(self, other):
        return self._compare(other, operator.lt, inclusive=False)

    def __gt__(self, other):
        return self._compare(other, operator.gt, inclusive=False)

    def __str__(self) -> str:
        return " ".join(_format_component(v) for v in self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(v) for v in self._data)})"

    def dot(self, other: Vec) -> Real:
        """Scalar product with another vector of the same dimension."""
        if not isinstance(other, Vec):
            raise TypeError("dot product needs another vector")
        return sum(a * b for a, b in self._pairs(other))

    def squared_norm(self) -> Real:
        return sum(a * a for a in self._data)

    def norm(self) -> float:
        return math.sqrt(self.squared_norm())

    def normalize(self) -> float:
        """Scale this vector to unit length in place and return its former norm."""
        length = self.norm()
        self._data = [a / length for a in self._data]
        return length

    def normalized(self) -> Vec:
        """Return a unit-length copy."""
        result = self.copy()
        result.normalize()
        return result

    def copy(self) -> Vec:
        return self._from(self._data)


class Vec2(Vec):
    """A two-dimensional vector with ``x`` and ``y`` accessors."""

    __slots__ = ()
    _dimension = 2

    @property
    def x(self) -> Real:
        return self._data[0]

    @x.setter
    def x(self, value: Real) -> None:
        self[0] = value

    @property
    def y(self) -> Real:
        return self._data[1]

    @y.setter
    def y(self, value: Real) -> None:
        self[1] = value

    def set_value(self, x: Real, y: Real) -> None:
        self.x = x
        self.y = y


class Vec3(Vec):
    """A three-dimensional vector with ``x``, ``y``, ``z`` and a cross product (``^``)."""

    __slots__ = ()
    _dimension = 3

    @property
    def x(self) -> Real:
        return self._data[0]

    @x.setter
    def x(self, value: Real) -> None:
        self[0] = value

    @property
    def y(self) -> Real:
        return self._data[1]

    @y.setter
    def y(self, value: Real) -> None:
        self[1] = value

    @property
    def z(self) -> Real:
        return self._data[2]

    @z.setter
    def z(self, value: Real) -> None:
        self[2] = value

    def set_value(self, x: Real, y: Real, z: Real) -> None:
        self.x = x
        self.y = y
        self.z = z

    def cross(self, other: Vec) -> Vec3:
        """Cross product with another three-dimensional vector."""
        if not isinstance(other, Vec) or len(other) != 3:
            raise ValueError("cross product needs a three-dimensional vector")
        ax, ay, az = self._data
        bx, by, bz = other
        return Vec3(ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx)

    def orthogonal_vec(self) -> Vec3:
        """Return a vector orthogonal to this one."""
        x, y, z = self._data
        return Vec3(z, z, -x - y)

    def __xor__(self, other):
        if not isinstance(other, Vec):
            return NotImplemented
        return self.cross(other)

    def __ixor__(self, other):
        if not isinstance(other, Vec):
            return NotImplemented
        self._data = list(self.cross(other))
        return self