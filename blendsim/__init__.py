"""blendsim package.

Важно: пакет не должен иметь побочных эффектов при импорте.
Поэтому здесь нет eager-import'ов (состояние/загрузчик/арена).

Импортируй нужное напрямую:
- from blendsim.mix import Mix
- from blendsim.state import State
- from blendsim.config import TankConfig
"""

from __future__ import annotations

__all__: list[str] = []
