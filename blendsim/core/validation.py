"""blendsim.core.validation

Базовые проверки, чтобы ловить невозможные значения как можно раньше.

Таксономия ошибок:
- некорректный ввод (конфиг, группа баков, длины смесей) -> ValueError;
- нарушение закона сохранения в State -> InvariantViolation;
- попытка применить невалидный перенос -> InvalidTransferError.
"""

from __future__ import annotations

from numbers import Integral
from typing import Sequence


class InvariantViolation(RuntimeError):
    """State нарушает закон сохранения (сумма вина / объём бака)."""


class InvalidTransferError(ValueError):
    """Перенос не соответствует текущей занятости баков."""


def ensure_non_negative(value: float, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")


def ensure_positive(value: float, name: str) -> None:
    if value <= 0:
        raise ValueError(f"{name} must be > 0, got {value}")


def ensure_in_range(value: float, min_value: float, max_value: float, name: str) -> None:
    if not (min_value <= value <= max_value):
        raise ValueError(f"{name} must be in [{min_value}, {max_value}], got {value}")


def ensure_integer(value: object, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ValueError(f"{name} must be an integer, got {value!r}")


def ensure_strictly_increasing(values: Sequence[int], name: str) -> None:
    for prev, cur in zip(values, values[1:]):
        if cur <= prev:
            raise ValueError(f"{name} must be strictly increasing, got {list(values)}")


def ensure_same_length(a: Sequence[float], b: Sequence[float], name: str) -> None:
    if len(a) != len(b):
        raise ValueError(f"{name}: length mismatch {len(a)} != {len(b)}")
