"""Row-major 3x3 and 4x4 matrix helpers on flat sequences of floats."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from numbers import Real

_DET_TOLERANCE = 1e-12


class SingularMatrixError(ValueError):
    """Raised when a matrix cannot be inverted."""


def _flat(m: Iterable[float], size: int) -> list[float]:
    values = [float(v) for v in m]
    if len(values) != size:
        raise ValueError(f"expected {size} matrix entries, got {len(values)}")
    return values


def _triple(x, y, z, *, uniform: bool) -> tuple[float, float, float]:
    if y is None and z is None:
        if isinstance(x, Real):
            if not uniform:
                raise ValueError("three components are needed")
            return (float(x),) * 3
        components = tuple(float(v) for v in x)
        if len(components) != 3:
            raise ValueError("a three-component vector is needed")
        return components  # type: ignore[return-value]
    if y is None or z is None:
        raise ValueError("give one vector or three components")
    return float(x), float(y), float(z)


def mult_mat4(m1: Sequence[float], m2: Sequence[float]) -> list[float]:
    """Return the product ``m1 @ m2`` of two 4x4 matrices."""
    a = _flat(m1, 16)
    b = _flat(m2, 16)
    return [
        sum(a[4 * i + k] * b[4 * k + j] for k in range(4))
        for i in range(4)
        for j in range(4)
    ]


def scale_mat4(m: Sequence[float], alpha, beta=None, gamma=None) -> list[float]:
    """Scale the diagonal of a 4x4 matrix by one factor, three factors or a 3-vector."""
    result = _flat(m, 16)
    sx, sy, sz = _triple(alpha, beta, gamma, uniform=True)
    result[0] *= sx
    result[5] *= sy
    result[10] *= sz
    return result


def translate_mat4(m: Sequence[float], x, y=None, z=None) -> list[float]:
    """Add an offset to the translation column of a 4x4 matrix."""
    result = _flat(m, 16)
    dx, dy, dz = _triple(x, y, z, uniform=False)
    result[3] += dx
    result[7] += dy
    result[11] += dz
    return result


def set_offset_mat4(m: Sequence[float], x, y=None, z=None) -> list[float]:
    """Replace the translation column of a 4x4 matrix."""
    result = _flat(m, 16)
    result[3], result[7], result[11] = _triple(x, y, z, uniform=False)
    return result


def transpose(m: Sequence[float], dim: int = 4) -> list[float]:
    """Return the transpose of a square ``dim`` x ``dim`` matrix."""
    values = _flat(m, dim * dim)
    return [values[j * dim + i] for i in range(dim) for j in range(dim)]


def inverse_mat3(m: Sequence[float]) -> list[float]:
    """Invert a 3x3 matrix; raise SingularMatrixError when its determinant is zero."""
    M = _flat(m, 9)
    det = (
        M[0] * (M[4] * M[8] - M[7] * M[5])
        - M[1] * (M[3] * M[8] - M[5] * M[6])
        + M[2] * (M[3] * M[7] - M[4] * M[6])
    )
    if abs(det) < _DET_TOLERANCE:
        raise SingularMatrixError("inverse_mat3: determinant is zero")
    invdet = 1.0 / det
    return [
        (M[4] * M[8] - M[7] * M[5]) * invdet,
        (M[2] * M[7] - M[1] * M[8]) * invdet,
        (M[1] * M[5] - M[2] * M[4]) * invdet,
        (M[5] * M[6] - M[3] * M[8]) * invdet,
        (M[0] * M[8] - M[2] * M[6]) * invdet,
        (M[3] * M[2] - M[0] * M[5]) * invdet,
        (M[3] * M[7] - M[6] * M[4]) * invdet,
        (M[6] * M[1] - M[0] * M[7]) * invdet,
        (M[0] * M[4] - M[3] * M[1]) * invdet,
    ]


def inverse_mat4(m: Sequence[float]) -> list[float]:
    """Invert a 4x4 matrix; raise SingularMatrixError when its determinant is zero."""
    M = _flat(m, 16)
    s0 = M[0] * M[5] - M[4] * M[1]
    s1 = M[0] * M[6] - M[4] * M[2]
    s2 = M[0] * M[7] - M[4] * M[3]
    s3 = M[1] * M[6] - M[5] * M[2]
    s4 = M[1] * M[7] - M[5] * M[3]
    s5 = M[2] * M[7] - M[6] * M[3]
    c5 = M[10] * M[15] - M[14] * M[11]
    c4 = M[9] * M[15] - M[13] * M[11]
    c3 = M[9] * M[14] - M[13] * M[10]
    c2 = M[8] * M[15] - M[12] * M[11]
    c1 = M[8] * M[14] - M[12] * M[10]
    c0 = M[8] * M[13] - M[12] * M[9]

    det = s0 * c5 - s1 * c4 + s2 * c3 + s3 * c2 - s4 * c1 + s5 * c0
    if abs(det) < _DET_TOLERANCE:
        raise SingularMatrixError("inverse_mat4: determinant is zero")
    invdet = 1.0 / det

    return [
        (M[5] * c5 - M[6] * c4 + M[7] * c3) * invdet,
        (-M[1] * c5 + M[2] * c4 - M[3] * c3) * invdet,
        (M[13] * s5 - M[14] * s4 + M[15] * s3) * invdet,
        (-M[9] * s5 + M[10] * s4 - M[11] * s3) * invdet,
        (-M[4] * c5 + M[6] * c2 - M[7] * c1) * invdet,
        (M[0] * c5 - M[2] * c2 + M[3] * c1) * invdet,
        (-M[12] * s5 + M[14] * s2 - M[15] * s1) * invdet,
        (M[8] * s5 - M[10] * s2 + M[11] * s1) * invdet,
        (M[4] * c4 - M[5] * c2 + M[7] * c0) * invdet,
        (-M[0] * c4 + M[1] * c2 - M[3] * c0) * invdet,
        (M[12] * s4 - M[13] * s2 + M[15] * s0) * invdet,
        (-M[8] * s4 + M[9] * s2 - M[11] * s0) * invdet,
        (-M[4] * c3 + M[5] * c1 - M[6] * c0) * invdet,
        (M[0] * c3 - M[1] * c1 + M[2] * c0) * invdet,
        (-M[12] * s3 + M[13] * s1 - M[14] * s0) * invdet,
        (M[8] * s3 - M[9] * s1 + M[10] * s0) * invdet,
    ]


def mat3(m: Sequence[float]) -> list[float]:
    """Return the upper-left 3x3 block of a 4x4 matrix."""
    M = _flat(m, 16)
    return [M[4 * i + j] for i in range(3) for j in range(3)]


def get_column(m: Sequence[float], dim: int, col: int) -> list[float]:
    """Return column ``col`` of a row-major ``dim`` x ``dim`` matrix."""
    M = _flat(m, dim * dim)
    if not 0 <= col < dim:
        raise IndexError(f"column {col} out of range for dimension {dim}")
    return [M[i * dim + col] for i in range(dim)]