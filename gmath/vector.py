# gmath/vector.py
"""
Свободные функции над векторами (Vec3 и Vec4).
Делегируют методам класса, так что работают для обоих типов.
"""


def format_vec(v) -> str:
    """Компоненты через пробел: Vec3(1, 2.5, 3) -> "1 2.5 3"."""
    return " ".join(f"{float(c):g}" for c in v)


def add_inplace(a, b):
    """a += b на месте, возвращает a."""
    a += b
    return a


def dot(a, b) -> float:
    return a.dot(b)


def cross(a, b):
    return a.cross(b)


def normalize(v):
    """v / |v|. Для нулевого вектора – NaN‑компоненты (не проверяется)."""
    return v.normalized()


def lerp(start, end, t: float):
    """Строгий вариант: t обязан лежать в [0, 1] (assert)."""
    return start.lerp(end, t)


def lerp_clamped(start, end, t: float):
    return start.lerp_clamped(end, t)
