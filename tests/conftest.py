"""Pytest configuration.

Goal: make `import blendsim` work reliably when running tests without installing
package (editable install).

This repo uses a flat layout (blendsim/ at repo root). Some environments run
pytest with a working directory where repo root isn't on sys.path, leading to
`ModuleNotFoundError: blendsim`.

This conftest ensures repo root is on sys.path and provides shared fixtures.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from blendsim.config import TankConfig  # noqa: E402
from blendsim.mix import Mix  # noqa: E402
from blendsim.state import State  # noqa: E402


@pytest.fixture()
def cfg4() -> TankConfig:
    return TankConfig(num_tanks=4)


@pytest.fixture()
def full_state(cfg4: TankConfig) -> State:
    # Две пары чистых вин, каждый бак заполнен ровно на свою ёмкость.
    return State(
        cfg4,
        (
            Mix.of(0.25, 0.0),
            Mix.of(0.0, 0.25),
            None,
            None,
        ),
    )
