# gmath/matrix.py
"""
Общая часть квадратных матриц Mat2 / Mat3 / Mat4.

Хранение – ndarray float32 формы (size, size), построчно (row‑major):
плоский индекс элемента = col + row * size (см. свойство `data`).
Размер – константа класса, матрицы разных размеров не смешиваются.
"""

import numbers
import numpy as np


class SquareMatrix:
    __slots__ = ("m",)

    size = 0

    def __init__(self, array=None):
        n = self.size
        if array is None:
            self.m = np.identity(n, dtype=np.float32)
        else:
            arr = np.array(array, dtype=np.float32, order="C")
            if arr.size != n * n:
                raise ValueError(
                    f"{type(self).__name__} expects {n * n} elements, got {arr.size}"
                )
            self.m = arr.reshape((n, n))

    # -----------------------------------------------------------------
    # фабрики
    # -----------------------------------------------------------------
    @classmethod
    def identity(cls):
        return cls(np.identity(cls.size, dtype=np.float32))

    @classmethod
    def zeros(cls):
        return cls(np.zeros((cls.size, cls.size), dtype=np.float32))

    # -----------------------------------------------------------------
    # доступ к элементам
    # -----------------------------------------------------------------
    @property
    def data(self) -> np.ndarray:
        """Плоское row‑major представление (view, запись меняет матрицу)."""
        return self.m.reshape(-1)

    def get(self, row: int, col: int) -> float:
        return float(self.m[row, col])

    def set(self, row: int, col: int, value: float) -> None:
        self.m[row, col] = value

    # -----------------------------------------------------------------
    # изменение на месте
    # -----------------------------------------------------------------
    def multiply(self, other):
        """
        this = this * other (матрица того же размера) или поэлементно
        на скаляр. Произведение сначала считается во временный буфер,
        потом копируется в this – иначе строки портились бы по ходу
        накопления. Возвращает self.
        """
        if isinstance(other, SquareMatrix):
            if other.size != self.size:
                raise TypeError(
                    f"cannot multiply {type(self).__name__} by {type(other).__name__}"
                )
            tmp = np.dot(self.m, other.m)
            self.m[...] = tmp
            return self
        if isinstance(other, numbers.Real):
            self.m *= np.float32(other)
            return self
        raise TypeError(f"unsupported operand for multiply: {type(other).__name__}")

    def zero(self):
        self.m.fill(0.0)
        return self

    # -----------------------------------------------------------------
    # операторы (возвращают новый объект)
    # -----------------------------------------------------------------
    def copy(self):
        return type(self)(self.m)

    def __matmul__(self, other):
        if isinstance(other, SquareMatrix) and other.size == self.size:
            return type(self)(np.dot(self.m, other.m))
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, (SquareMatrix, numbers.Real)):
            if isinstance(other, SquareMatrix) and other.size != self.size:
                return NotImplemented
            return self.copy().multiply(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self.copy().multiply(other)
        return NotImplemented

    def __eq__(self, other):
        if isinstance(other, SquareMatrix) and other.size == self.size:
            return bool(np.array_equal(self.m, other.m))
        return NotImplemented

    __hash__ = None

    def almost_equal(self, other, eps: float = 1e-5) -> bool:
        return bool(np.allclose(self.m, other.m, rtol=0.0, atol=eps))

    def transposed(self):
        return type(self)(self.m.T)

    # -----------------------------------------------------------------
    # представление
    # -----------------------------------------------------------------
    def to_str(self) -> str:
        """Отладочный дамп: строка матрицы на строку, элементы через пробел."""
        return "\n".join(" ".join(f"{float(v):g}" for v in row) for row in self.m)

    def to_np(self) -> np.ndarray:
        return self.m.copy()

    def __repr__(self):
        return f"{type(self).__name__}({self.m})"
