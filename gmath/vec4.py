# gmath/vec4.py
"""
4‑мерный вектор (float32) – однородная координата.
w – результат четвёртой строки Mat4 и сам по себе не нормируется;
для деления на w есть homogenized().
"""

import numbers
import numpy as np
from typing import Tuple

from gmath.matrix import SquareMatrix
from gmath.scalar import clamp
from gmath.vector import format_vec
from gmath.vec3 import Vec3


class Vec4:
    """Короткий и быстрый вектор‑4 (float32)."""

    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0,
                 z: float = 0.0, w: float = 0.0):
        self._v = np.array([x, y, z, w], dtype=np.float32)

    @staticmethod
    def from_vec3(v: Vec3, w: float = 1.0) -> "Vec4":
        return Vec4(v.x, v.y, v.z, w)

    # -----------------------------------------------------------------
    # свойства (c‑сеттерами)
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float) -> None:
        self._v[0] = float(value)

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float) -> None:
        self._v[1] = float(value)

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float) -> None:
        self._v[2] = float(value)

    @property
    def w(self) -> float:
        return float(self._v[3])

    @w.setter
    def w(self, value: float) -> None:
        self._v[3] = float(value)

    # -----------------------------------------------------------------
    # арифметика (операторы возвращают новый объект)
    # -----------------------------------------------------------------
    def __add__(self, other: "Vec4") -> "Vec4":
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(*(self._v + other._v))

    def __sub__(self, other: "Vec4") -> "Vec4":
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(*(self._v - other._v))

    def __neg__(self) -> "Vec4":
        return Vec4(*(-self._v))

    def __mul__(self, scalar: float) -> "Vec4":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vec4(*(self._v * scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vec4":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        with np.errstate(divide="ignore", invalid="ignore"):
            return Vec4(*(self._v / scalar))

    def __iadd__(self, other: "Vec4") -> "Vec4":
        if not isinstance(other, Vec4):
            return NotImplemented
        self._v += other._v
        return self

    def __eq__(self, other):
        if not isinstance(other, Vec4):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None

    # -----------------------------------------------------------------
    # вспомогательные методы
    # -----------------------------------------------------------------
    def dot(self, other: "Vec4") -> float:
        """Скалярное произведение."""
        return float(np.dot(self._v, other._v))

    def length(self) -> float:
        """Евклидова длина по всем четырём компонентам."""
        return float(np.linalg.norm(self._v))

    def normalized(self) -> "Vec4":
        """Нормализованный вектор (NaN для нулевого)."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return Vec4(*(self._v / np.float32(self.length())))

    def lerp(self, end: "Vec4", t: float) -> "Vec4":
        assert 0.0 <= t <= 1.0, f"lerp parameter out of [0, 1]: {t}"
        return Vec4(*(self._v * (1.0 - t) + end._v * t))

    def lerp_clamped(self, end: "Vec4", t: float) -> "Vec4":
        t = clamp(t, 0.0, 1.0)
        return Vec4(*(self._v * (1.0 - t) + end._v * t))

    def almost_equal(self, other, eps: float = 1e-5) -> bool:
        return bool(np.allclose(self._v, other._v, rtol=0.0, atol=eps))

    def multiply(self, matrix: SquareMatrix) -> "Vec4":
        """v = M · v на месте (все четыре строки, w сохраняется)."""
        if not (isinstance(matrix, SquareMatrix) and matrix.size == 4):
            raise TypeError(f"Vec4 cannot be multiplied by {type(matrix).__name__}")
        self._v[:] = np.dot(matrix.m, self._v)
        return self

    def xyz(self) -> Vec3:
        return Vec3(*self._v[:3])

    def homogenized(self) -> Vec3:
        """(x/w, y/w, z/w). При w == 0 – inf/nan без исключения."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return Vec3(*(self._v[:3] / self._v[3]))

    def as_np(self) -> np.ndarray:
        """Копия 4‑компонентного ndarray (float32)."""
        return self._v.copy()

    # -----------------------------------------------------------------
    # представление
    # -----------------------------------------------------------------
    def __iter__(self):
        return (float(c) for c in self._v)

    def __str__(self) -> str:
        return format_vec(self)

    def __repr__(self) -> str:
        return f"Vec4({self.x:.3f}, {self.y:.3f}, {self.z:.3f}, {self.w:.3f})"

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return tuple(self._v.tolist())
