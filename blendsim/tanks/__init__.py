"""Группы баков, правила смежности и переносы."""

from blendsim.tanks.adjacency import is_adjacent
from blendsim.tanks.group import GroupCombinations, TankGroup, occupied_groups, unoccupied_groups
from blendsim.tanks.transfer import Transfer

__all__ = [
    "TankGroup",
    "GroupCombinations",
    "Transfer",
    "is_adjacent",
    "occupied_groups",
    "unoccupied_groups",
]
