"""Текстовый отчёт по состоянию (для консоли/логов)."""

from __future__ import annotations

from typing import List

from blendsim.state import State


def format_state(state: State, contents: bool = True) -> str:
    lines: List[str] = [
        f"State ID: {state.state_id}",
        f"Depth: {state.depth}",
        f"Volume: {state.volume:g}",
        f"Used Tanks: {state.used_tanks}",
        f"Total Wine: {state.total_wine:g}",
    ]

    if contents:
        lines.append("Tank Contents:")
        for i, mix in enumerate(state.contents):
            # Баки нумеруются с 1, как на площадке.
            if mix is None:
                lines.append(f"Tank {i + 1}: 0 -")
            else:
                lines.append(f"Tank {i + 1}: {mix.sum:g} {mix}")

    return "\n".join(lines)
