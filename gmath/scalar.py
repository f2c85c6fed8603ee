# gmath/scalar.py
"""
Скалярные утилиты: константа PI, clamp, сравнение float с допуском,
линейная интерполяция.

Политика интерполяции одна: lerpf() молча клэмпит t в [0, 1]
(lerp_clamped). Для экстраполяции есть lerp_unchecked().
"""

import math
from gmath.utils.logger import logger

PI = math.pi

# допуски по‑умолчанию (значения из файла – только явно через Config)
FLOAT_EQ_EPS = 1e-7
PROJECT_EPS = 1e-5


def clamp(t: float, low: float, high: float) -> float:
    """Ограничить t отрезком [low, high]. При low > high – ответственность вызывающего."""
    if t < low:
        return low
    if t > high:
        return high
    return t


def in_range(t: float, low: float, high: float) -> bool:
    return low <= t <= high


def float_eq(a: float, b: float, eps: float = FLOAT_EQ_EPS) -> bool:
    """True, если |b - a| < eps."""
    return abs(b - a) < eps


def lerp_unchecked(start: float, end: float, t: float) -> float:
    """start*(1-t) + end*t без проверки t (экстраполирует вне [0, 1])."""
    return start * (1.0 - t) + end * t


def lerp_clamped(start: float, end: float, t: float) -> float:
    """Как lerp_unchecked, но t молча приводится к [0, 1]."""
    ct = clamp(t, 0.0, 1.0)
    if ct != t:
        logger.debug(f"[Scalar] lerp parameter {t} clamped to {ct}")
    return lerp_unchecked(start, end, ct)


lerpf = lerp_clamped
