"""
gmath – небольшая библиотека линейной алгебры для 3‑D рендера:
векторы Vec3/Vec4, матрицы Mat2/Mat3/Mat4, преобразования и проекция.
Хранение – NumPy float32, матрицы row‑major.
"""

from gmath.utils import logger, Config
from gmath.scalar import (
    PI, clamp, in_range, float_eq, lerp_clamped, lerp_unchecked, lerpf
)
from gmath.vector import (
    add_inplace, dot, cross, normalize, lerp, format_vec
)
from gmath.vec3 import Vec3
from gmath.vec4 import Vec4
from gmath.matrix import SquareMatrix
from gmath.mat2 import Mat2
from gmath.mat3 import Mat3
from gmath.mat4 import Mat4

__version__ = "1.0.0"

__all__ = [
    "logger",
    "Config",
    "PI",
    "clamp",
    "in_range",
    "float_eq",
    "lerp_clamped",
    "lerp_unchecked",
    "lerpf",
    "add_inplace",
    "dot",
    "cross",
    "normalize",
    "lerp",
    "format_vec",
    "Vec3",
    "Vec4",
    "SquareMatrix",
    "Mat2",
    "Mat3",
    "Mat4",
]
