"""Core utilities: tolerances, validation, lazy sequences."""

from __future__ import annotations

__all__ = [
    "tolerances",
    "validation",
    "sequences",
]
