"""Конфигурация банка баков (data-only).

Этот модуль намеренно является "мёртвым" конфигом:
- число баков (единственный обязательный параметр);
- правило смежности для переносов (locality);
- допуск для проверки закона сохранения.

Соглашение об объёмах:
- все баки одинаковые, ёмкость бака = 1 / num_tanks;
- полная ёмкость системы нормирована к 1.0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Literal, Mapping, Tuple, Union

from blendsim.core.tolerances import TOTAL_CAPACITY, VOLUME_TOL
from blendsim.core.validation import ensure_integer, ensure_positive


AdjacencyMode = Literal["neighbor", "any", "explicit"]

ADJACENCY_MODES: Tuple[str, ...] = ("neighbor", "any", "explicit")

LinkTable = Tuple[Tuple[int, Tuple[int, ...]], ...]


def _freeze_links(
    links: Union[Mapping[int, Iterable[int]], LinkTable],
    num_tanks: int,
) -> LinkTable:
    items = links.items() if isinstance(links, Mapping) else links
    out: Dict[int, Tuple[int, ...]] = {}
    for src, dests in items:
        src_i = int(src)
        dest_t = tuple(sorted({int(d) for d in dests}))
        for t in (src_i, *dest_t):
            if not (0 <= t < num_tanks):
                raise ValueError(f"links: tank {t} out of range [0, {num_tanks})")
        out[src_i] = dest_t
    return tuple(sorted(out.items()))


@dataclass(frozen=True)
class TankConfig:
    """Конфиг банка баков.

    adjacency:
        "neighbor" — бак назначения не дальше max_gap позиций от бака-источника;
        "any" — без ограничения;
        "explicit" — разрешённые направления заданы в links.

    links:
        Только для "explicit": {бак: баки, в которые из него можно переливать}.
        Хранится нормализованным кортежем, чтобы конфиг оставался хешируемым.
    """

    num_tanks: int
    adjacency: AdjacencyMode = "neighbor"
    max_gap: int = 1
    links: Union[Mapping[int, Iterable[int]], LinkTable, None] = None
    volume_tol: float = VOLUME_TOL

    def __post_init__(self) -> None:
        ensure_integer(self.num_tanks, "num_tanks")
        ensure_positive(self.num_tanks, "num_tanks")
        ensure_positive(self.volume_tol, "volume_tol")
        if self.adjacency not in ADJACENCY_MODES:
            raise ValueError(f"adjacency must be one of {ADJACENCY_MODES}, got {self.adjacency!r}")
        if self.adjacency == "neighbor":
            ensure_positive(self.max_gap, "max_gap")
        if self.adjacency == "explicit" and self.links is None:
            raise ValueError("adjacency='explicit' requires links")
        if self.links is not None:
            object.__setattr__(self, "links", _freeze_links(self.links, self.num_tanks))

    @property
    def tank_size(self) -> float:
        """Ёмкость одного бака (нормированная)."""

        return TOTAL_CAPACITY / float(self.num_tanks)

    @property
    def total_capacity(self) -> float:
        return float(self.num_tanks) * self.tank_size

    def linked(self, tank: int) -> Tuple[int, ...]:
        """Баки, в которые разрешён перелив из `tank` (режим "explicit")."""

        if not self.links:
            return ()
        return dict(self.links).get(int(tank), ())


# Базовая конфигурация: 4 бака, перелив только в соседний бак.
DEFAULT_TANK_CONFIG = TankConfig(num_tanks=4)
