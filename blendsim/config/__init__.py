"""Конфиги банка баков."""

from __future__ import annotations

from .tanks import (  # noqa: F401
    ADJACENCY_MODES,
    DEFAULT_TANK_CONFIG,
    AdjacencyMode,
    TankConfig,
)

__all__ = [
    "TankConfig",
    "AdjacencyMode",
    "ADJACENCY_MODES",
    "DEFAULT_TANK_CONFIG",
]
