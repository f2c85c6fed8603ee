# gmath/mat3.py
"""
3×3 матрица: линейные (не аффинные) 3‑D преобразования.
Вектор – столбец: v' = M · v.
"""
import numpy as np
from math import sin, cos

from gmath.matrix import SquareMatrix
from gmath.vec3 import Vec3


class Mat3(SquareMatrix):
    __slots__ = ()

    size = 3

    @staticmethod
    def rotation_x(theta: float) -> "Mat3":
        c, s = cos(theta), sin(theta)
        m = np.identity(3, dtype=np.float32)
        m[1, 1] = c
        m[1, 2] = -s
        m[2, 1] = s
        m[2, 2] = c
        return Mat3(m)

    @staticmethod
    def rotation_y(theta: float) -> "Mat3":
        c, s = cos(theta), sin(theta)
        m = np.identity(3, dtype=np.float32)
        m[0, 0] = c
        m[0, 2] = s
        m[2, 0] = -s
        m[2, 2] = c
        return Mat3(m)

    @staticmethod
    def rotation_z(theta: float) -> "Mat3":
        c, s = cos(theta), sin(theta)
        m = np.identity(3, dtype=np.float32)
        m[0, 0] = c
        m[0, 1] = -s
        m[1, 0] = s
        m[1, 1] = c
        return Mat3(m)

    @staticmethod
    def from_mat4(mat: SquareMatrix) -> "Mat3":
        """Левый верхний 3×3 блок (вращение/масштаб) матрицы Mat4."""
        return Mat3(mat.m[:3, :3])

    def __matmul__(self, other):
        if isinstance(other, Vec3):
            return Vec3(*other.as_np()).multiply(self)
        return super().__matmul__(other)

    def __mul__(self, other):
        if isinstance(other, Vec3):
            return self @ other
        return super().__mul__(other)
