import pytest

from flockmath.vec import Vec, Vec2, Vec3


@pytest.fixture
def vectors():
    return Vec3(), Vec3(1.0, 2.0, 3.0), Vec3(3.0, 2.0, 1.0)


def test_default_vector_is_zero(vectors):
    v0, _, _ = vectors
    assert tuple(v0) == (0.0, 0.0, 0.0)
    assert str(v0) == "0 0 0"


def test_sum_equals_scaling(vectors):
    v0, v1, _ = vectors
    assert v0 + v0 == 2.0 * v0
    assert v1 + v1 == v1 * 2.0


def test_sum_equals_scalar_offset(vectors):
    v0, v1, v2 = vectors
    assert v1 + v2 == v0 + 4.0
    assert v2 + v1 == 4.0 + v0


def test_addition_commutes(vectors):
    v0, v1, v2 = vectors
    assert v0 + v1 + v2 == v2 + v1 + v0


def test_stream_format(vectors):
    _, v1, _ = vectors
    assert str(v1) == "1 2 3"
    assert (v1.x, v1.y, v1.z) == (1.0, 2.0, 3.0)


def test_component_assignment_and_swap(vectors):
    _, v1, _ = vectors
    v1.x = 10.0
    v1.y = 20.0
    v1.z = 30.0
    assert (v1.x, v1.y, v1.z) == (10.0, 20.0, 30.0)
    v1.x, v1.z = v1.z, v1.x
    assert (v1.x, v1.y, v1.z) == (30.0, 20.0, 10.0)


def test_copies_are_independent():
    v1 = Vec3(1.0, 1.0, 1.0)
    v2 = Vec3(v1)
    v3 = Vec(v1)
    v2.x = 2.0
    v2.y = 2.0
    v2.z = 2.0
    v3[0] = 3.0
    v3[1] = 3.0
    v3[2] = 3.0
    assert str(v1) == "1 1 1"
    assert str(v2) == "2 2 2"
    assert str(v3) == "3 3 3"


def test_copy_method_is_independent():
    original = Vec3(1.0, 2.0, 3.0)
    duplicate = original.copy()
    duplicate[0] = 9.0
    assert original[0] == 1.0
    assert isinstance(duplicate, Vec3)


def test_norm_and_squared_norm():
    v = Vec3(3.0, 4.0, 0.0)
    assert v.squared_norm() == 25.0
    assert v.norm() == 5.0


def test_normalize_returns_previous_norm():
    v = Vec3(3.0, 4.0, 0.0)
    assert v.normalize() == 5.0
    assert v == Vec3(0.6, 0.8, 0.0)


def test_normalized_leaves_original():
    v = Vec3(0.0, 0.0, 2.0)
    unit = v.normalized()
    assert unit == Vec3(0.0, 0.0, 1.0)
    assert v == Vec3(0.0, 0.0, 2.0)


def test_dot_product_operator_and_method():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(3.0, 2.0, 1.0)
    assert (a | b) == 10.0
    assert a.dot(b) == 10.0


def test_cross_product_of_axes():
    ex, ey, ez = Vec3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0), Vec3(0.0, 0.0, 1.0)
    assert ex ^ ey == ez
    assert ey.cross(ez) == ex
    assert ez ^ ex == ey


def test_in_place_cross():
    a = Vec3(1.0, 0.0, 0.0)
    ref = a
    a ^= Vec3(0.0, 1.0, 0.0)
    assert a is ref
    assert tuple(a) == (0.0, 0.0, 1.0)


def test_orthogonal_vector_is_orthogonal():
    for v in (Vec3(1.0, 2.0, 3.0), Vec3(-4.0, 0.5, 7.0), Vec3(0.0, 1.0, 0.0)):
        assert v.dot(v.orthogonal_vec()) == 0.0


def test_modulo_elementwise():
    assert tuple(Vec3(-7.0, 7.0, 5.5) % 3.0) == (-1.0, 1.0, 2.5)
    assert tuple(Vec3(7, 8, 9) % Vec3(2, 3, 4)) == (1, 2, 1)


def test_division():
    assert 6.0 / Vec3(1.0, 2.0, 3.0) == Vec3(6.0, 3.0, 2.0)
    assert Vec3(2.0, 4.0, 6.0) / 2.0 == Vec3(1.0, 2.0, 3.0)
    assert Vec3(2.0, 4.0, 6.0) / Vec3(2.0, 2.0, 3.0) == Vec3(1.0, 2.0, 2.0)


def test_subtraction_and_negation():
    a = Vec3(1.0, 2.0, 3.0)
    assert 1.0 - a == Vec3(0.0, -1.0, -2.0)
    assert -a == Vec3(-1.0, -2.0, -3.0)
    assert a - a == Vec3()


def test_in_place_scalar_keeps_identity():
    v = Vec3(1.0, 2.0, 3.0)
    ref = v
    v += 1.0
    v *= 2.0
    assert v is ref
    assert tuple(v) == (4.0, 6.0, 8.0)


def test_in_place_vector_ops():
    v = Vec3(4.0, 6.0, 8.0)
    v -= Vec3(1.0, 1.0, 1.0)
    v /= Vec3(3.0, 5.0, 7.0)
    assert v == Vec3(1.0, 1.0, 1.0)


def test_operations_preserve_subclass():
    shifted = Vec3(1.0, 2.0, 3.0) + 1.0
    assert isinstance(shifted, Vec3)
    assert (shifted.x, shifted.y, shifted.z) == (2.0, 3.0, 4.0)
    scaled = 2.0 * Vec2(1.0, 2.0)
    assert isinstance(scaled, Vec2)
    assert (scaled.x, scaled.y) == (2.0, 4.0)


def test_tolerant_equality():
    assert Vec3(0.1 + 0.2, 0.0, 0.0) == Vec3(0.3, 0.0, 0.0)
    assert Vec3(1.0, 0.0, 0.0) != Vec3(1.0001, 0.0, 0.0)


def test_componentwise_ordering():
    a = Vec3(1, 2, 3)
    b = Vec3(1, 3, 2)
    assert (a <= b) == (True, True, False)
    assert (a < b) == (False, True, False)
    assert (a >= b) == (True, False, True)
    assert (a > b) == (False, False, True)


def test_vec2_set_value():
    v = Vec2()
    v.set_value(5.0, -1.0)
    assert (v.x, v.y) == (5.0, -1.0)


def test_vec3_set_value():
    v = Vec3()
    v.set_value(1.0, 2.0, 3.0)
    assert v == Vec3(1.0, 2.0, 3.0)


def test_generic_vector_dimension():
    v = Vec(1.0, 2.0, 3.0, 4.0)
    assert len(v) == 4
    assert v.squared_norm() == 30.0


def test_wrong_component_count_raises():
    with pytest.raises(ValueError):
        Vec3(1.0, 2.0)
    with pytest.raises(ValueError):
        Vec2([1.0, 2.0, 3.0])


def test_empty_generic_vector_raises():
    with pytest.raises(ValueError):
        Vec()


def test_dimension_mismatch_raises():
    with pytest.raises(ValueError):
        Vec2(1.0, 2.0) + Vec3(1.0, 2.0, 3.0)
    with pytest.raises(ValueError):
        Vec2(1.0, 2.0).dot(Vec3())


def test_non_numeric_operand_raises():
    with pytest.raises(TypeError):
        Vec3() + "a"
    with pytest.raises(TypeError):
        Vec3("a", "b", "c")


def test_vectors_are_unhashable():
    with pytest.raises(TypeError):
        hash(Vec3())