"""Состояние банка баков (State) и функция перехода.

State — неизменяемый снимок:
- contents: по одному слоту на бак, в слоте либо None, либо Mix;
- depth: число шагов от начального состояния (+1 на каждый apply).

Переход:
- `compute_transfers()` — кандидаты (занятая одиночная группа -> свободная
  группа того же размера, прошедшие правило смежности);
- `is_transfer_valid()` — контроль занятости перед применением;
- `apply()` — новый State (источники очищены, назначения заполнены);
- `next_states()` — одношаговое раскрытие для внешнего поиска.

Важно:
- State никогда не мутируется после создания; любое изменение идёт через apply.
- Проверки закона сохранения — явные вызовы (check_*), нарушение ->
  InvariantViolation, это ошибка программиста, а не штатный поток.
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from functools import cached_property
from typing import Iterator, Optional, Sequence, Tuple

from blendsim.config.tanks import TankConfig
from blendsim.core.sequences import Restartable
from blendsim.core.tolerances import almost_equal
from blendsim.core.validation import (
    InvalidTransferError,
    InvariantViolation,
    ensure_non_negative,
)
from blendsim.mix import Mix
from blendsim.tanks.adjacency import is_adjacent
from blendsim.tanks.group import GroupCombinations, TankGroup, occupied_groups, unoccupied_groups
from blendsim.tanks.transfer import Transfer

logger = logging.getLogger(__name__)

Contents = Tuple[Optional[Mix], ...]


@dataclass(frozen=True)
class State:
    config: TankConfig
    contents: Contents
    depth: int = 0

    def __post_init__(self) -> None:
        contents = tuple(self.contents)
        if len(contents) != self.config.num_tanks:
            raise ValueError(
                f"contents must have {self.config.num_tanks} slots; got {len(contents)}"
            )

        widths = set()
        for i, m in enumerate(contents):
            if m is None:
                continue
            if not isinstance(m, Mix):
                raise ValueError(f"tank {i}: expected Mix or None, got {type(m).__name__}")
            if (m.values < 0.0).any():
                raise ValueError(f"tank {i}: mix components must be >= 0, got {m}")
            widths.add(m.count)
        if len(widths) > 1:
            raise ValueError(f"all mixes in a state must have the same length; got {sorted(widths)}")

        ensure_non_negative(self.depth, "depth")
        object.__setattr__(self, "contents", contents)

    # ------------------------------------------------------------------
    # constructors

    @classmethod
    def create(cls, config: TankConfig) -> "State":
        """Начальное состояние: все баки пусты, depth=0."""

        return cls(config, (None,) * config.num_tanks)

    @classmethod
    def from_mixes(cls, config: TankConfig, mixes: Sequence[Mix]) -> "State":
        """Начальное состояние: смеси разложены по первым бакам по порядку."""

        if len(mixes) > config.num_tanks:
            raise ValueError(f"{len(mixes)} mixes do not fit into {config.num_tanks} tanks")
        contents = list(mixes) + [None] * (config.num_tanks - len(mixes))
        return cls(config, tuple(contents))

    # ------------------------------------------------------------------
    # read contract

    @property
    def num_tanks(self) -> int:
        return self.config.num_tanks

    @property
    def mixes(self) -> Tuple[Mix, ...]:
        return tuple(m for m in self.contents if m is not None)

    @property
    def volume(self) -> float:
        return float(self.num_tanks) * self.tank_size(0)

    @cached_property
    def used_tanks(self) -> int:
        return sum(1 for m in self.contents if m is not None)

    @cached_property
    def total_wine(self) -> float:
        return float(sum(m.sum for m in self.contents if m is not None))

    @cached_property
    def state_id(self) -> str:
        """Детерминированный идентификатор по содержимому баков (без depth)."""

        h = hashlib.sha1()
        for m in self.contents:
            if m is None:
                h.update(b"\x00")
            else:
                h.update(b"\x01")
                h.update((m.values + 0.0).tobytes())
        return h.hexdigest()[:16]

    def _check_index(self, i: int) -> int:
        if not (0 <= i < self.num_tanks):
            raise IndexError(f"tank index {i} out of range [0, {self.num_tanks})")
        return i

    def __getitem__(self, i: int) -> Optional[Mix]:
        return self.contents[self._check_index(i)]

    def is_occupied(self, i: int) -> bool:
        return self.contents[self._check_index(i)] is not None

    def tank_size(self, i: int) -> float:
        # Все баки одинаковые.
        self._check_index(i)
        return self.config.tank_size

    @staticmethod
    def target_distance(mix: Mix) -> float:
        return abs(mix.sum - 1.0)

    # ------------------------------------------------------------------
    # enumeration

    def occupied_groups(self) -> Restartable[TankGroup]:
        return occupied_groups(self)

    def unoccupied_groups(self, size: int) -> GroupCombinations:
        return unoccupied_groups(self, size)

    def compute_transfers(self) -> Tuple[Transfer, ...]:
        transfers = []
        for source in self.occupied_groups():
            for dest in self.unoccupied_groups(source.volume):
                if is_adjacent(source, dest, self.config):
                    transfers.append(Transfer(source, dest))

        logger.debug("state %s: %d candidate transfers", self.state_id, len(transfers))
        return tuple(transfers)

    @property
    def transfers(self) -> Tuple[Transfer, ...]:
        return self.compute_transfers()

    # ------------------------------------------------------------------
    # validation

    def _in_range(self, group: TankGroup) -> bool:
        return all(0 <= i < self.num_tanks for i in group)

    def is_group_occupied(self, group: TankGroup) -> bool:
        return self._in_range(group) and all(self.contents[i] is not None for i in group)

    def is_group_unoccupied(self, group: TankGroup) -> bool:
        return self._in_range(group) and all(self.contents[i] is None for i in group)

    def is_transfer_valid(self, transfer: Transfer) -> bool:
        return self.is_group_occupied(transfer.source) and self.is_group_unoccupied(transfer.dest)

    def check_total_wine_is_valid(self) -> None:
        expected = self.config.total_capacity
        if not almost_equal(self.total_wine, expected, self.config.volume_tol):
            raise InvariantViolation(
                f"total wine {self.total_wine} does not match configured capacity {expected}"
            )

    def check_tank_amounts_are_valid(self) -> None:
        for i, m in enumerate(self.contents):
            if m is None:
                continue
            size = self.tank_size(i)
            if not almost_equal(m.sum, size, self.config.volume_tol):
                raise InvariantViolation(
                    f"tank {i} holds {m.sum}, expected tank size {size}"
                )

    # ------------------------------------------------------------------
    # transition

    def combined_mix(self, group: TankGroup) -> Mix:
        """Сумма смесей группы (без масштабирования: объём сохраняется)."""

        if not group.tanks:
            raise ValueError("cannot combine an empty tank group")
        if not self.is_group_occupied(group):
            raise ValueError(f"tank group {group} is not fully occupied")

        mixes = [self.contents[i] for i in group]
        out = mixes[0]
        for m in mixes[1:]:
            out = out + m
        return out

    def apply(self, transfer: Transfer) -> "State":
        if not self.is_transfer_valid(transfer):
            raise InvalidTransferError(
                f"transfer {transfer} does not match tank occupancy of state {self.state_id}"
            )

        combined = self.combined_mix(transfer.source)
        # Несколько баков назначения делят объём поровну: total_wine сохраняется.
        share = combined if transfer.dest.size == 1 else combined / transfer.dest.size

        new_contents = list(self.contents)
        for i in transfer.source:
            new_contents[i] = None
        for i in transfer.dest:
            new_contents[i] = share

        logger.debug("apply %s at depth %d", transfer, self.depth)
        return State(self.config, tuple(new_contents), self.depth + 1)

    def next_states(self) -> Restartable["State"]:
        def _gen() -> Iterator[State]:
            for transfer in self.compute_transfers():
                if self.is_transfer_valid(transfer):
                    yield self.apply(transfer)

        return Restartable(_gen)

    def best_mix(self) -> Optional[Mix]:
        """Смесь, чей объём ближе всего к "полному" (1.0); первая при равенстве."""

        best: Optional[Mix] = None
        lowest = float("inf")
        for m in self.mixes:
            d = self.target_distance(m)
            if d < lowest:
                best = m
                lowest = d
        return best
