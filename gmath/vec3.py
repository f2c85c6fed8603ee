# -*- coding: utf-8 -*-
"""
Трёхмерный вектор на базе NumPy (float32).

Кроме арифметики умеет умножаться на Mat3/Mat4 и проецироваться:
    * project_viewport() – в пиксели окна (z == 0 заменяется на epsilon),
    * perspective_divide() – деление x, y на z на месте (z == 0 – no‑op).
"""
import numbers
import numpy as np

from gmath.matrix import SquareMatrix
from gmath.scalar import clamp, PROJECT_EPS
from gmath.vector import format_vec
from gmath.utils.logger import logger


class Vec3:
    __slots__ = ("_v",)

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self._v = np.array([x, y, z], dtype=np.float32)

    # -------------------------------------------------
    # свойства с сеттерами
    # -------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float):
        self._v[0] = float(value)

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float):
        self._v[1] = float(value)

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float):
        self._v[2] = float(value)

    # -------------------------------------------------
    # арифметика (не меняет исходный объект)
    # -------------------------------------------------
    def __add__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(*(self._v + other._v))

    def __sub__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(*(self._v - other._v))

    def __neg__(self):
        return Vec3(*(-self._v))

    def __mul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vec3(*(self._v * scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        # деление на ноль даёт inf/nan, исключения нет
        with np.errstate(divide="ignore", invalid="ignore"):
            return Vec3(*(self._v / scalar))

    def __iadd__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        self._v += other._v
        return self

    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None

    # -------------------------------------------------
    # вспомогательные методы
    # -------------------------------------------------
    def dot(self, other) -> float:
        return float(np.dot(self._v, other._v))

    def cross(self, other) -> "Vec3":
        """Правая тройка: (ay*bz - az*by, az*bx - ax*bz, ax*by - ay*bx)."""
        a, b = self._v, other._v
        return Vec3(
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        )

    def length(self) -> float:
        return float(np.linalg.norm(self._v))

    def normalized(self) -> "Vec3":
        """Нулевой вектор даёт NaN – это принятое вырожденное поведение."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return Vec3(*(self._v / np.float32(self.length())))

    def lerp(self, end: "Vec3", t: float) -> "Vec3":
        assert 0.0 <= t <= 1.0, f"lerp parameter out of [0, 1]: {t}"
        return Vec3(*(self._v * (1.0 - t) + end._v * t))

    def lerp_clamped(self, end: "Vec3", t: float) -> "Vec3":
        t = clamp(t, 0.0, 1.0)
        return Vec3(*(self._v * (1.0 - t) + end._v * t))

    def almost_equal(self, other, eps: float = 1e-5) -> bool:
        return bool(np.allclose(self._v, other._v, rtol=0.0, atol=eps))

    # -------------------------------------------------
    # преобразование матрицей (на месте)
    # -------------------------------------------------
    def multiply(self, matrix: SquareMatrix) -> "Vec3":
        """
        Mat3: v = M · v (вектор‑столбец).
        Mat4: точка с неявным w = 1; результирующий w отбрасывается,
        перспективное деление НЕ выполняется – после перспективной
        матрицы получаем ненормированную точку clip‑space.
        """
        if isinstance(matrix, SquareMatrix) and matrix.size == 3:
            self._v[:] = np.dot(matrix.m, self._v)
        elif isinstance(matrix, SquareMatrix) and matrix.size == 4:
            h = np.append(self._v, np.float32(1.0))
            self._v[:] = np.dot(matrix.m, h)[:3]
        else:
            raise TypeError(f"Vec3 cannot be multiplied by {type(matrix).__name__}")
        return self

    # -------------------------------------------------
    # проекция
    # -------------------------------------------------
    def project_viewport(self, width: float, height: float,
                         eps: float = PROJECT_EPS) -> "Vec3":
        """
        Камера -> пиксели: clip = (x/z, y/z), затем
        px = (clip_x + 1)/2 * width, py = (-clip_y + 1)/2 * height
        (ось Y вниз, начало в левом верхнем углу).
        z == 0 заменяется на eps (1e-5).
        Возвращает новый Vec3(px, py, исходный z).
        """
        z = self.z
        if z == 0.0:
            z = eps
            logger.debug(f"[Vec3] project_viewport: z == 0 replaced by {z}")
        clip_x = self.x / z
        clip_y = self.y / z
        return Vec3(
            (clip_x + 1.0) / 2.0 * width,
            (-clip_y + 1.0) / 2.0 * height,
            self.z,
        )

    def perspective_divide(self) -> "Vec3":
        """x /= z, y /= z на месте; при z == 0 ничего не делает."""
        z = self._v[2]
        if z == 0.0:
            return self
        self._v[0] /= z
        self._v[1] /= z
        return self

    # -------------------------------------------------
    # представление
    # -------------------------------------------------
    def __iter__(self):
        return (float(c) for c in self._v)

    def as_np(self) -> np.ndarray:
        """Возврат копии 3‑элементного массива float32."""
        return self._v.copy()

    def to_tuple(self):
        return tuple(self._v.tolist())

    def __str__(self):
        return format_vec(self)

    def __repr__(self):
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"
