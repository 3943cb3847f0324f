"""Группы баков (TankGroup) и их перечисление.

TankGroup — упорядоченный набор индексов баков, строго возрастающий.
Используется как один конец переноса (источник или назначение).

Перечисление:
- `occupied_groups(state)` — одиночные группы {i} для каждого занятого бака;
- `unoccupied_groups(state, size)` — все сочетания из `size` свободных баков
  в возрастающем порядке (курсор по массиву индексов, без рекурсии).

Важно: размер группы одновременно является её "объёмом" в единицах баков.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import comb
from typing import TYPE_CHECKING, Iterator, Sequence, Tuple

from blendsim.core.sequences import Restartable
from blendsim.core.validation import ensure_integer, ensure_non_negative, ensure_strictly_increasing

if TYPE_CHECKING:
    from blendsim.state import State


def is_valid_sequence(tanks: Sequence[int]) -> bool:
    """True, если индексы строго возрастают (пустая последовательность валидна)."""

    return all(cur > prev for prev, cur in zip(tanks, tanks[1:]))


@dataclass(frozen=True)
class TankGroup:
    tanks: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        for t in self.tanks:
            ensure_integer(t, "tank index")
            ensure_non_negative(t, "tank index")
        tanks = tuple(int(t) for t in self.tanks)
        ensure_strictly_increasing(tanks, "TankGroup")
        object.__setattr__(self, "tanks", tanks)

    @classmethod
    def of(cls, *tanks: int) -> "TankGroup":
        return cls(tuple(tanks))

    @property
    def size(self) -> int:
        return len(self.tanks)

    @property
    def volume(self) -> int:
        return self.size

    @property
    def last(self) -> int:
        return self.tanks[-1] if self.tanks else -1

    def has_tank(self, n: int) -> bool:
        return n in self.tanks

    def is_valid(self) -> bool:
        return is_valid_sequence(self.tanks)

    def __len__(self) -> int:
        return len(self.tanks)

    def __iter__(self) -> Iterator[int]:
        return iter(self.tanks)

    def __getitem__(self, i: int) -> int:
        return self.tanks[i]

    def __contains__(self, n: object) -> bool:
        return n in self.tanks

    def __str__(self) -> str:
        return "{" + ", ".join(str(t) for t in self.tanks) + "}"


class GroupCombinations:
    """Все сочетания по `size` из `pool` (pool уже отсортирован по возрастанию).

    Ленивый и перезапускаемый: каждый `iter()` начинает заново, в памяти
    одновременно живёт только текущий массив индексов.
    """

    def __init__(self, pool: Sequence[int], size: int) -> None:
        ensure_non_negative(size, "size")
        self._pool: Tuple[int, ...] = tuple(pool)
        self._size = int(size)

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        n, k = len(self._pool), self._size
        return comb(n, k) if k <= n else 0

    def __iter__(self) -> Iterator[TankGroup]:
        pool, k = self._pool, self._size
        n = len(pool)
        if k > n:
            return

        idx = list(range(k))
        while True:
            yield TankGroup(tuple(pool[i] for i in idx))

            # Самая правая позиция, которую ещё можно сдвинуть вправо.
            j = k - 1
            while j >= 0 and idx[j] == n - k + j:
                j -= 1
            if j < 0:
                return

            idx[j] += 1
            for m in range(j + 1, k):
                idx[m] = idx[m - 1] + 1


def occupied_groups(state: "State") -> Restartable[TankGroup]:
    def _gen() -> Iterator[TankGroup]:
        for i in range(state.num_tanks):
            if state.is_occupied(i):
                yield TankGroup((i,))

    return Restartable(_gen)


def unoccupied_groups(state: "State", size: int) -> GroupCombinations:
    pool = [i for i in range(state.num_tanks) if not state.is_occupied(i)]
    return GroupCombinations(pool, size)
