"""Fixed-size boolean vectors with bitwise operators.

Bit 0 is the least significant bit of the integer view.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from numbers import Integral

MAX_BITS = 64


class VecBool:
    """A vector of ``size`` booleans that can also be read as an unsigned integer."""

    __slots__ = ("_bits",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, size: int, value: int = 0):
        if not isinstance(size, Integral) or isinstance(size, bool):
            raise TypeError("size must be an integer")
        if not 1 <= size <= MAX_BITS:
            raise ValueError(f"size must be between 1 and {MAX_BITS}, got {size}")
        self._bits = [False] * int(size)
        self.set_value(value)

    @classmethod
    def from_bools(cls, bools: Iterable[object]) -> VecBool:
        """Build a vector whose element ``i`` is ``bool(bools[i])``."""
        flags = [bool(b) for b in bools]
        vec = cls(len(flags))
        vec._bits = flags
        return vec

    @property
    def size(self) -> int:
        return len(self._bits)

    @property
    def _mask(self) -> int:
        return (1 << len(self._bits)) - 1

    def _spawn(self, value: int) -> VecBool:
        return type(self)(len(self._bits), value)

    def set_value(self, value: int) -> None:
        """Load the low ``size`` bits of ``value`` into the vector."""
        if not isinstance(value, Integral):
            raise TypeError("value must be an integer")
        value = int(value)
        self._bits = [bool((value >> i) & 1) for i in range(len(self._bits))]

    def to_int(self) -> int:
        return sum(1 << i for i, bit in enumerate(self._bits) if bit)

    def __int__(self) -> int:
        return self.to_int()

    def any(self) -> bool:
        return any(self._bits)

    def none(self) -> bool:
        return not any(self._bits)

    def all(self) -> bool:
        return all(self._bits)

    def complement(self) -> VecBool:
        """Flip every bit in place and return this vector."""
        self._bits = [not bit for bit in self._bits]
        return self

    def _other_int(self, other) -> int:
        if not isinstance(other, VecBool):
            raise TypeError("operand must be a VecBool")
        if len(other) != len(self):
            raise ValueError(f"size mismatch: {len(self)} and {len(other)}")
        return other.to_int()

    @staticmethod
    def _shift_amount(k) -> int:
        if not isinstance(k, Integral) or isinstance(k, bool):
            raise TypeError("shift amount must be an integer")
        if k < 0:
            raise ValueError("shift amount must not be negative")
        return int(k)

    def __len__(self) -> int:
        return len(self._bits)

    def __iter__(self) -> Iterator[bool]:
        return iter(self._bits)

    def __getitem__(self, index: int) -> bool:
        return self._bits[index]

    def __setitem__(self, index: int, value: object) -> None:
        self._bits[index] = bool(value)

    def __invert__(self) -> VecBool:
        return self._spawn(~self.to_int() & self._mask)

    def __and__(self, other):
        if not isinstance(other, VecBool):
            return NotImplemented
        return self._spawn(self.to_int() & self._other_int(other))

    def __or__(self, other):
        if not isinstance(other, VecBool):
            return NotImplemented
        return self._spawn(self.to_int() | self._other_int(other))

    def __xor__(self, other):
        if not isinstance(other, VecBool):
            return NotImplemented
        return self._spawn(self.to_int() ^ self._other_int(other))

    def __lshift__(self, k):
        return self._spawn((self.to_int() << self._shift_amount(k)) & self._mask)

    def __rshift__(self, k):
        return self._spawn(self.to_int() >> self._shift_amount(k))

    def __iand__(self, other):
        self.set_value(self.to_int() & self._other_int(other))
        return self

    def __ior__(self, other):
        self.set_value(self.to_int() | self._other_int(other))
        return self

    def __ixor__(self, other):
        self.set_value(self.to_int() ^ self._other_int(other))
        return self

    def __ilshift__(self, k):
        self.set_value((self.to_int() << self._shift_amount(k)) & self._mask)
        return self

    def __irshift__(self, k):
        self.set_value(self.to_int() >> self._shift_amount(k))
        return self

    def __eq__(self, other):
        if not isinstance(other, VecBool):
            return NotImplemented
        return self._bits == other._bits

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __str__(self) -> str:
        return " ".join("1" if bit else "0" for bit in self._bits)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._bits)}, {self.to_int():#x})"