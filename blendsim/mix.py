"""Вектор состава смеси (Mix).

Mix — неизменяемый вектор фиксированной длины W (число исходных вин):
по одному значению на каждое вино, объём, который это вино вносит.

Соглашения:
- все операции (add/subtract/scale/normal/lerp) возвращают новый Mix;
- смеси разной длины не складываются и не вычитаются (ValueError);
- компоненты могут быть отрицательными (результат subtract), "неотрицательность"
  — свойство смесей в баках, а не самого типа.
"""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np
from numpy.typing import NDArray

from blendsim.core.tolerances import MAX_DISTANCE, ZERO_TOL, almost_zero
from blendsim.core.validation import ensure_same_length


Vec = NDArray[np.float64]


class Mix:
    __slots__ = ("_values", "_sum", "_length")

    def __init__(self, values: Iterable[float]) -> None:
        if not isinstance(values, np.ndarray):
            values = list(values)
        arr = np.array(values, dtype=np.float64)
        if arr.ndim != 1:
            raise ValueError(f"Mix values must be one-dimensional; got shape {arr.shape}")
        if not np.all(np.isfinite(arr)):
            raise ValueError(f"Mix values must be finite; got {arr.tolist()}")
        arr.setflags(write=False)
        self._values: Vec = arr
        self._sum = float(arr.sum())
        self._length = float(np.sqrt(np.dot(arr, arr)))

    # ------------------------------------------------------------------
    # constructors

    @classmethod
    def of(cls, *values: float) -> "Mix":
        return cls(values)

    @classmethod
    def zeros(cls, num_wines: int) -> "Mix":
        return cls(np.zeros(int(num_wines), dtype=np.float64))

    @classmethod
    def from_index(cls, index: int, num_wines: int) -> "Mix":
        """Чистое вино `index` (one-hot вектор длины num_wines)."""

        if not (0 <= index < num_wines):
            raise ValueError(f"index must be in [0, {num_wines}), got {index}")
        tmp = np.zeros(int(num_wines), dtype=np.float64)
        tmp[index] = 1.0
        return cls(tmp)

    # ------------------------------------------------------------------
    # derived values

    @property
    def values(self) -> Vec:
        return self._values

    @property
    def count(self) -> int:
        return int(self._values.shape[0])

    @property
    def sum(self) -> float:
        return self._sum

    @property
    def length(self) -> float:
        return self._length

    def __len__(self) -> int:
        return self.count

    def __iter__(self):
        return iter(self._values.tolist())

    def __getitem__(self, i: int) -> float:
        return float(self._values[i])

    # ------------------------------------------------------------------
    # algebra

    def _check_compatible(self, other: "Mix") -> None:
        if not isinstance(other, Mix):
            raise TypeError(f"expected Mix, got {type(other).__name__}")
        ensure_same_length(self._values, other._values, "Mix")

    def add(self, other: "Mix") -> "Mix":
        self._check_compatible(other)
        return Mix(self._values + other._values)

    def subtract(self, other: "Mix") -> "Mix":
        self._check_compatible(other)
        return Mix(self._values - other._values)

    def scale(self, x: float) -> "Mix":
        return Mix(self._values * float(x))

    def __add__(self, other: "Mix") -> "Mix":
        return self.add(other)

    def __sub__(self, other: "Mix") -> "Mix":
        return self.subtract(other)

    def __mul__(self, x: float) -> "Mix":
        return self.scale(x)

    __rmul__ = __mul__

    def __truediv__(self, x: float) -> "Mix":
        return self.scale(1.0 / float(x))

    @property
    def normal(self) -> "Mix":
        # Около нуля не делим: возвращаем как есть.
        if almost_zero(self._length, ZERO_TOL):
            return self
        return self / self._length

    def distance(self, other: Optional["Mix"]) -> float:
        """Евклидово расстояние; отсутствующая смесь всегда "дальше всех"."""

        if other is None:
            return MAX_DISTANCE
        return (other - self).length

    def distance_of_normals(self, other: Optional["Mix"]) -> float:
        """Расстояние между направлениями составов (без учёта объёма)."""

        return self.normal.distance(None if other is None else other.normal)

    def lerp(self, other: "Mix", amount: float = 0.5) -> "Mix":
        """self * (1 - t) + other * t; t=0 -> self, t=1 -> other."""

        self._check_compatible(other)
        t = float(amount)
        return Mix(self._values * (1.0 - t) + other._values * t)

    def count_used_wines(self) -> int:
        return int(np.count_nonzero(self._values > 0.0))

    # ------------------------------------------------------------------
    # value semantics

    def isclose(self, other: "Mix", tol: float = 1e-9) -> bool:
        if not isinstance(other, Mix) or other.count != self.count:
            return False
        return bool(np.allclose(self._values, other._values, rtol=0.0, atol=tol))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mix):
            return NotImplemented
        return self.count == other.count and bool(np.array_equal(self._values, other._values))

    def __hash__(self) -> int:
        # +0.0 сводит -0.0 к 0.0, иначе равные смеси дали бы разный хеш.
        return hash((self._values + 0.0).tobytes())

    def __str__(self) -> str:
        return "(" + ", ".join(f"{x:.3f}".rstrip("0").rstrip(".") for x in self._values.tolist()) + ")"

    def __repr__(self) -> str:
        return f"Mix({self._values.tolist()})"
