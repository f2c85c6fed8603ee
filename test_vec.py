# -*- coding: utf-8 -*-
import numpy as np
import pytest

from gmath import PI
from gmath.vec3 import Vec3
from gmath.vec4 import Vec4
from gmath.mat2 import Mat2
from gmath.mat3 import Mat3
from gmath.mat4 import Mat4
from gmath.vector import (
    add_inplace, dot, cross, normalize, lerp, lerp_clamped, format_vec
)


SAMPLES = [
    (Vec3(1, 2, 3), Vec3(4, -1, 0)),
    (Vec3(0.5, -2.25, 7.0), Vec3(-3.0, 0.125, 1.5)),
    (Vec3(-1e3, 4e-3, 12.0), Vec3(2.0, 2.0, -2.0)),
]


# -----------------------------------------------------------------
# Vec3: произведения, длина, нормализация
# -----------------------------------------------------------------
def test_dot_and_cross_values():
    a, b = SAMPLES[0]
    assert dot(a, b) == 2.0
    assert cross(a, b) == Vec3(3, 12, -9)

@pytest.mark.parametrize("a, b", SAMPLES)
def test_dot_is_symmetric(a, b):
    assert dot(a, b) == dot(b, a)

@pytest.mark.parametrize("a, b", SAMPLES)
def test_cross_is_antisymmetric(a, b):
    assert cross(a, b) == -cross(b, a)

def test_cross_is_right_handed():
    assert cross(Vec3(1, 0, 0), Vec3(0, 1, 0)) == Vec3(0, 0, 1)
    assert cross(Vec3(0, 1, 0), Vec3(0, 0, 1)) == Vec3(1, 0, 0)

def test_length():
    assert Vec3(3, 4, 0).length() == pytest.approx(5.0)
    assert Vec4(1, 1, 1, 1).length() == pytest.approx(2.0)

@pytest.mark.parametrize("a, b", SAMPLES)
def test_normalized_has_unit_length(a, b):
    assert normalize(a).length() == pytest.approx(1.0, abs=1e-6)
    assert normalize(b).length() == pytest.approx(1.0, abs=1e-6)

def test_vec4_normalized_has_unit_length():
    v = normalize(Vec4(1, -2, 3, 0.5))
    assert v.length() == pytest.approx(1.0, abs=1e-6)
    assert normalize(Vec4(0, 0, 0, 4)) == Vec4(0, 0, 0, 1)

@pytest.mark.parametrize("cls", [Vec3, Vec4])
def test_normalize_zero_vector_is_nan(cls):
    assert np.isnan(normalize(cls()).as_np()).all()

@pytest.mark.parametrize("cls", [Vec3, Vec4])
def test_divide_by_zero_is_silent(cls):
    v = cls(1, -1, 0) / 0
    assert v.x == np.inf
    assert v.y == -np.inf
    assert np.isnan(v.z)

@pytest.mark.parametrize("cls", [Vec3, Vec4])
def test_divide_by_scalar(cls):
    assert cls(2, 4, 6) / 2 == cls(1, 2, 3)

def test_add_inplace_mutates_first_operand():
    a = Vec3(1, 2, 3)
    res = add_inplace(a, Vec3(1, 1, 1))
    assert res is a
    assert a == Vec3(2, 3, 4)

def test_iadd():
    a = Vec4(1, 2, 3, 4)
    a += Vec4(1, 1, 1, 1)
    assert a == Vec4(2, 3, 4, 5)

def test_unsupported_operands():
    with pytest.raises(TypeError):
        Vec3(1, 2, 3) + Vec4(1, 2, 3, 4)
    with pytest.raises(TypeError):
        Vec3(1, 2, 3) * Vec3(1, 2, 3)


# -----------------------------------------------------------------
# интерполяция
# -----------------------------------------------------------------
@pytest.mark.parametrize("cls", [Vec3, Vec4])
def test_lerp_endpoints_are_exact(cls):
    a = cls(0.1, 2.7, -3.3)
    b = cls(5.5, -1.25, 9.0)
    assert lerp(a, b, 0) == a
    assert lerp(a, b, 1) == b
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == b

def test_lerp_midpoint():
    assert lerp(Vec3(0, 0, 0), Vec3(2, 4, 6), 0.5) == Vec3(1, 2, 3)
    assert lerp(Vec4(0, 0, 0, 0), Vec4(2, 4, 6, 8), 0.5) == Vec4(1, 2, 3, 4)

def test_strict_lerp_rejects_out_of_range():
    with pytest.raises(AssertionError):
        lerp(Vec3(), Vec3(1, 1, 1), 1.5)
    with pytest.raises(AssertionError):
        lerp(Vec4(), Vec4(1, 1, 1, 1), -0.1)

@pytest.mark.parametrize("cls", [Vec3, Vec4])
def test_clamped_lerp_degrades_gracefully(cls):
    a = cls(1, 1, 1)
    b = cls(3, 3, 3)
    assert lerp_clamped(a, b, 2.0) == b
    assert lerp_clamped(a, b, -1.0) == a
    assert lerp_clamped(a, b, 0.5) == cls(2, 2, 2)


# -----------------------------------------------------------------
# преобразование матрицами
# -----------------------------------------------------------------
def test_multiply_mat3_is_column_vector():
    M = Mat3([1, 2, 3,
              4, 5, 6,
              7, 8, 9])
    v = Vec3(1, 0, -1)
    res = v.multiply(M)
    assert res is v
    assert v == Vec3(-2, -2, -2)

def test_multiply_mat3_rotation():
    v = Vec3(1, 0, 0).multiply(Mat3.rotation_z(PI / 2))
    assert v.almost_equal(Vec3(0, 1, 0), 1e-5)

def test_multiply_mat4_translates_point():
    v = Vec3(0, 0, 0).multiply(Mat4.translation(Vec3(1, 2, 3)))
    assert v == Vec3(1, 2, 3)

def test_matmul_does_not_mutate():
    v = Vec3(1, 0, 0)
    r = Mat4.rotation_z(PI / 2) @ v
    assert v == Vec3(1, 0, 0)
    assert r.almost_equal(Vec3(0, 1, 0), 1e-5)
    assert (Mat4.translation(Vec3(1, 2, 3)) * Vec3()) == Vec3(1, 2, 3)

def test_multiply_mat4_skips_perspective_divide():
    P = Mat4.perspective(PI / 2, 1.0, 1.0, 10.0)
    p = Vec3(1, 1, -2)
    clip = Vec3(*p.as_np()).multiply(P)
    # w = 2 отброшен – координаты не поделены
    assert clip.almost_equal(Vec3(1, 1, 2.0 / 9.0), 1e-5)

    h = P.transform_point_h(p)
    assert h.w == pytest.approx(2.0)
    assert h.homogenized().almost_equal(Vec3(0.5, 0.5, 1.0 / 9.0), 1e-5)

def test_multiply_wrong_matrix_size():
    with pytest.raises(TypeError):
        Vec3(1, 2, 3).multiply(Mat2.identity())
    with pytest.raises(TypeError):
        Vec4(1, 2, 3, 1).multiply(Mat3.identity())

def test_vec4_keeps_w_and_ignores_translation_for_directions():
    T = Mat4.translation(Vec3(1, 2, 3))
    d = Vec4(1, 0, 0, 0).multiply(T)
    assert d == Vec4(1, 0, 0, 0)
    p = T @ Vec4.from_vec3(Vec3(1, 1, 1))
    assert p == Vec4(2, 3, 4, 1)
    assert p.xyz() == Vec3(2, 3, 4)

def test_homogenized_divides_by_w():
    assert Vec4(2, 4, 6, 2).homogenized() == Vec3(1, 2, 3)


# -----------------------------------------------------------------
# проекция
# -----------------------------------------------------------------
def test_project_viewport_center():
    p = Vec3(0, 0, 1).project_viewport(800, 600)
    assert p.x == pytest.approx(400)
    assert p.y == pytest.approx(300)

def test_project_viewport_flips_y_and_keeps_depth():
    p = Vec3(1, 1, 2).project_viewport(800, 600)
    assert p == Vec3(600, 150, 2)

def test_project_viewport_zero_depth_uses_epsilon():
    v = Vec3(1e-5, 0, 0)
    p = v.project_viewport(800, 600)
    assert p.x == pytest.approx(800, abs=1e-3)
    assert p.y == pytest.approx(300)
    assert p.z == 0.0
    assert v == Vec3(1e-5, 0, 0)

def test_perspective_divide_in_place():
    v = Vec3(4, 6, 2)
    assert v.perspective_divide() is v
    assert v == Vec3(2, 3, 2)

def test_perspective_divide_zero_depth_is_noop():
    v = Vec3(4, 6, 0)
    v.perspective_divide()
    assert v == Vec3(4, 6, 0)


# -----------------------------------------------------------------
# представление
# -----------------------------------------------------------------
def test_format_vec():
    assert format_vec(Vec3(1, 2.5, -3)) == "1 2.5 -3"
    assert str(Vec4(0, 1, 2, 1)) == "0 1 2 1"
    assert repr(Vec3(1, 2, 3)) == "Vec3(1.000, 2.000, 3.000)"

def test_to_tuple():
    assert Vec3(1, 2.5, -3).to_tuple() == (1.0, 2.5, -3.0)
    assert Vec4(1, 2.5, -3, 1).to_tuple() == (1.0, 2.5, -3.0, 1.0)

def test_component_setters():
    v = Vec4()
    v.x, v.y, v.z, v.w = 1, 2, 3, 4
    assert list(v) == [1.0, 2.0, 3.0, 4.0]
