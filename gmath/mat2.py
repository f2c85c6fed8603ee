# gmath/mat2.py
import numpy as np
from math import sin, cos

from gmath.matrix import SquareMatrix


class Mat2(SquareMatrix):
    """2×2 матрица для линейных 2‑D преобразований."""
    __slots__ = ()

    size = 2

    @staticmethod
    def rotation(theta: float) -> "Mat2":
        """Поворот против часовой стрелки на theta радиан."""
        c, s = cos(theta), sin(theta)
        return Mat2(np.array([[c, -s],
                              [s, c]], dtype=np.float32))
