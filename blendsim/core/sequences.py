"""Restartable lazy sequences.

A plain generator can be consumed only once. Search drivers iterate the same
expansion more than once (count first, then walk), so the public
enumeration API returns a `Restartable`: every `iter()` call builds a fresh
generator from the stored factory.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


class Restartable(Generic[T]):
    def __init__(self, factory: Callable[[], Iterator[T]]) -> None:
        self._factory = factory

    def __iter__(self) -> Iterator[T]:
        return self._factory()

    def to_list(self) -> list[T]:
        return list(self)
