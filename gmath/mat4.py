# gmath/mat4.py
import logging
import numpy as np
from math import tan, sin, cos

from gmath.matrix import SquareMatrix
from gmath.vec3 import Vec3
from gmath.vec4 import Vec4
from gmath.utils.logger import logger


class Mat4(SquareMatrix):
    """
    4×4 однородная матрица преобразования, row‑major.
    Трансляция – в правом столбце, преобразование применяется как M · p.
    Все углы – в радианах, вращения правосторонние.
    """
    __slots__ = ()

    size = 4

    @staticmethod
    def translation(v: Vec3) -> "Mat4":
        m = np.identity(4, dtype=np.float32)
        m[0, 3] = v.x
        m[1, 3] = v.y
        m[2, 3] = v.z
        return Mat4(m)

    @staticmethod
    def scale(sx: float, sy: float, sz: float) -> "Mat4":
        m = np.identity(4, dtype=np.float32)
        m[0, 0] = sx
        m[1, 1] = sy
        m[2, 2] = sz
        return Mat4(m)

    @staticmethod
    def rotation_x(theta: float) -> "Mat4":
        c, s = cos(theta), sin(theta)
        m = np.identity(4, dtype=np.float32)
        m[1, 1] = c
        m[1, 2] = -s
        m[2, 1] = s
        m[2, 2] = c
        return Mat4(m)

    @staticmethod
    def rotation_y(theta: float) -> "Mat4":
        c, s = cos(theta), sin(theta)
        m = np.identity(4, dtype=np.float32)
        m[0, 0] = c
        m[0, 2] = s
        m[2, 0] = -s
        m[2, 2] = c
        return Mat4(m)

    @staticmethod
    def rotation_z(theta: float) -> "Mat4":
        c, s = cos(theta), sin(theta)
        m = np.identity(4, dtype=np.float32)
        m[0, 0] = c
        m[0, 1] = -s
        m[1, 0] = s
        m[1, 1] = c
        return Mat4(m)

    @staticmethod
    def get_model(pos: Vec3, angles: Vec3) -> "Mat4":
        """
        Модельная матрица: T(pos) · (Rx · Ry · Rz).
        Порядок вращений фиксирован – перестановка меняет ориентацию.
        """
        rot = Mat4.rotation_x(angles.x)
        rot.multiply(Mat4.rotation_y(angles.y))
        rot.multiply(Mat4.rotation_z(angles.z))
        model = Mat4.translation(pos).multiply(rot)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"[Mat4] model matrix:\n{model.to_str()}")
        return model

    @staticmethod
    def inverse(mat: "Mat4") -> "Mat4":
        """
        Обратная матрица ТОЛЬКО для жёстких преобразований
        (вращение + перенос). Блок 3×3 транспонируется (он ортогонален),
        перенос пересчитывается как -R^T · t.
        Для матрицы с масштабом/сдвигом результат молча неверен.
        """
        rt = mat.m[:3, :3].T
        t = mat.m[:3, 3]
        m = np.identity(4, dtype=np.float32)
        m[:3, :3] = rt
        m[:3, 3] = -np.dot(rt, t)
        return Mat4(m)

    @staticmethod
    def perspective(fov: float, aspect: float,
                    z_near: float, z_far: float) -> "Mat4":
        """Перспектива в стиле OpenGL, fov по вертикали в радианах."""
        f = 1.0 / tan(fov / 2.0)
        m = np.zeros((4, 4), dtype=np.float32)
        m[0, 0] = f / aspect
        m[1, 1] = f
        m[2, 2] = (z_far + z_near) / (z_near - z_far)
        m[2, 3] = (2.0 * z_far * z_near) / (z_near - z_far)
        m[3, 2] = -1.0
        return Mat4(m)

    # -----------------------------------------------------------------
    # применение к векторам
    # -----------------------------------------------------------------
    def transform_point_h(self, v: Vec3) -> Vec4:
        """M · (x, y, z, 1) с сохранением w – для явного деления на w."""
        return Vec4.from_vec3(v, 1.0).multiply(self)

    def __matmul__(self, other):
        if isinstance(other, Vec3):
            return Vec3(*other.as_np()).multiply(self)
        if isinstance(other, Vec4):
            return Vec4(*other.as_np()).multiply(self)
        return super().__matmul__(other)

    def __mul__(self, other):
        if isinstance(other, (Vec3, Vec4)):
            return self @ other
        return super().__mul__(other)

    def to_gl(self) -> np.ndarray:
        """Транспонируем для передачи в OpenGL (столбцы‑массив)."""
        return self.m.T.copy()
