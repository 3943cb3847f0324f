"""Перенос (Transfer): пара групп баков (источник, назначение) одного размера."""

from __future__ import annotations

from dataclasses import dataclass

from blendsim.tanks.group import TankGroup


@dataclass(frozen=True)
class Transfer:
    source: TankGroup
    dest: TankGroup

    def __post_init__(self) -> None:
        if self.source.size != self.dest.size:
            raise ValueError(
                f"Transfer groups must have equal size; got {self.source.size} -> {self.dest.size}"
            )

    @classmethod
    def between(cls, source: int, dest: int) -> "Transfer":
        """Перенос из одного бака в один бак."""

        return cls(TankGroup((source,)), TankGroup((dest,)))

    @property
    def size(self) -> int:
        return self.source.size

    def __str__(self) -> str:
        return f"{self.source} -> {self.dest}"
