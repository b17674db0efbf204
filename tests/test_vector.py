import math

import pytest

from flockmath.vector import EPSILON, Vector, zeros


def test_default_is_zero():
    assert Vector() == zeros()


def test_zeros_returns_independent_vectors():
    a = zeros()
    a.x = 5.0
    assert zeros() == Vector()


def test_add_sub_round_trip():
    a = Vector(1.5, -2.0, 3.25)
    b = Vector(0.5, 4.0, -1.0)
    assert (a + b) - b == a


def test_scalar_multiplication_commutes():
    a = Vector(1.0, 2.0, 3.0)
    assert 2.0 * a == a * 2.0
    assert a * 2.0 == a + a


def test_division_inverts_multiplication():
    a = Vector(1.0, 2.0, 3.0)
    assert (a * 4.0) / 4.0 == a


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector(1.0, 1.0, 1.0) / 0


def test_negation():
    a = Vector(1.0, -2.0, 3.0)
    assert a + (-a) == zeros()


def test_inplace_operators_mutate():
    a = Vector(1.0, 2.0, 3.0)
    original = a
    a += Vector(1.0, 1.0, 1.0)
    a *= 2.0
    a -= Vector(2.0, 2.0, 2.0)
    a /= 2.0
    assert a is original
    assert a == Vector(1.0, 2.0, 3.0)


def test_equality_within_epsilon():
    a = Vector(1.0, 2.0, 3.0)
    assert a == Vector(1.0 + EPSILON / 2, 2.0, 3.0)
    assert a != Vector(1.0 + 2 * EPSILON, 2.0, 3.0)


def test_norm_of_axis_vector():
    assert Vector(0.0, 0.0, 7.0).norm() == 7.0


def test_normalized_has_unit_length_and_same_direction():
    a = Vector(3.0, -1.0, 2.0)
    unit = a.normalized()
    assert math.isclose(unit.norm(), 1.0)
    assert unit * a.norm() == a


def test_normalize_in_place():
    a = Vector(2.0, 2.0, 1.0)
    expected = a.normalized()
    assert a.normalize() is None
    assert a == expected


def test_str_format():
    assert str(Vector(1, 2, 3)) == "1 2 3"


def test_unpacking():
    x, y, z = Vector(1.0, 2.0, 3.0)
    assert (x, y, z) == (1.0, 2.0, 3.0)