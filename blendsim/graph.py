"""Арена состояний: граф достижимых State, узлы адресуются целочисленным id.

Арена не выбирает, какой узел раскрывать, и не останавливает поиск:
это дело внешнего драйвера (BFS/best-first). Она только хранит состояния,
убирает дубликаты по `State.state_id` и запоминает рёбра parent -> child.

Узлы не ссылаются друг на друга напрямую, только через id, поэтому
раскрытие одного узла не трогает остальные.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from blendsim.state import State

logger = logging.getLogger(__name__)


class StateArena:
    def __init__(self, root: State) -> None:
        self._states: List[State] = []
        self._index: Dict[str, int] = {}
        self._children: Dict[int, Tuple[int, ...]] = {}
        self._parents: Dict[int, List[int]] = {}
        self.add(root)

    @property
    def root_id(self) -> int:
        return 0

    def add(self, state: State) -> int:
        """Вернуть id состояния; новое содержимое получает новый id."""

        sid = self._index.get(state.state_id)
        if sid is not None:
            return sid

        sid = len(self._states)
        self._states.append(state)
        self._index[state.state_id] = sid
        self._parents[sid] = []
        return sid

    def expand(self, node_id: int) -> Tuple[int, ...]:
        """Раскрыть узел один раз; повторный вызов отдаёт кэш."""

        cached = self._children.get(node_id)
        if cached is not None:
            return cached

        state = self[node_id]
        child_ids: List[int] = []
        for child in state.next_states():
            cid = self.add(child)
            if cid not in child_ids:
                child_ids.append(cid)
                self._parents[cid].append(node_id)

        out = tuple(child_ids)
        self._children[node_id] = out
        logger.debug("expanded node %d: %d children, arena size %d", node_id, len(out), len(self))
        return out

    def is_expanded(self, node_id: int) -> bool:
        return node_id in self._children

    def children(self, node_id: int) -> Tuple[int, ...]:
        self._ensure_node(node_id)
        return self._children.get(node_id, ())

    def parents(self, node_id: int) -> Tuple[int, ...]:
        self._ensure_node(node_id)
        return tuple(self._parents[node_id])

    def id_of(self, state: State) -> int:
        try:
            return self._index[state.state_id]
        except KeyError as e:
            raise KeyError(f"state {state.state_id} is not in the arena") from e

    def edges(self) -> List[Tuple[int, int]]:
        return [(p, c) for p, cs in sorted(self._children.items()) for c in cs]

    def _ensure_node(self, node_id: int) -> None:
        if not (0 <= node_id < len(self._states)):
            raise IndexError(f"node id {node_id} out of range [0, {len(self._states)})")

    def __getitem__(self, node_id: int) -> State:
        self._ensure_node(node_id)
        return self._states[node_id]

    def __len__(self) -> int:
        return len(self._states)

    def __contains__(self, state: object) -> bool:
        return isinstance(state, State) and state.state_id in self._index
