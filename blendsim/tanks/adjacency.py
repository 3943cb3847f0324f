from __future__ import annotations

from blendsim.config.tanks import TankConfig
from blendsim.tanks.group import TankGroup


def is_adjacent_neighbor(source: TankGroup, dest: TankGroup, max_gap: int = 1) -> bool:
    """Index-locality rule.

    Every destination tank must lie within `max_gap` index positions of at
    least one source tank. Empty groups are never adjacent.
    """

    if not source.tanks or not dest.tanks:
        return False
    return all(min(abs(d - s) for s in source.tanks) <= max_gap for d in dest.tanks)


def is_adjacent_any(source: TankGroup, dest: TankGroup) -> bool:
    """No locality restriction (only non-empty groups qualify)."""

    return bool(source.tanks) and bool(dest.tanks)


def is_adjacent_explicit(source: TankGroup, dest: TankGroup, cfg: TankConfig) -> bool:
    """Piping table rule: each destination tank must be linked from some source tank."""

    if not source.tanks or not dest.tanks:
        return False
    reachable = set()
    for s in source.tanks:
        reachable.update(cfg.linked(s))
    return all(d in reachable for d in dest.tanks)


def is_adjacent(source: TankGroup, dest: TankGroup, cfg: TankConfig) -> bool:
    if cfg.adjacency == "any":
        return is_adjacent_any(source, dest)
    if cfg.adjacency == "explicit":
        return is_adjacent_explicit(source, dest, cfg)
    return is_adjacent_neighbor(source, dest, cfg.max_gap)
