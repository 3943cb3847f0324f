"""blendsim.core.tolerances

Числовые допуски для сравнения объёмов и векторов смеси.

Принцип: нигде не сравниваем float на точное равенство, если речь о сумме
объёмов или длине вектора; используем явный допуск (например, VOLUME_TOL).
"""

from __future__ import annotations

import math
import sys

# Длина вектора, которую считаем нулевой (нормализация не делит на неё).
ZERO_TOL: float = 1e-12

# Допуск для сравнения объёмов (сумма вина, ёмкость бака).
VOLUME_TOL: float = 1e-9

# "Нет смеси" всегда дальше любой реальной смеси.
MAX_DISTANCE: float = sys.float_info.max

# Полная ёмкость системы в нормированных единицах.
TOTAL_CAPACITY: float = 1.0


def almost_equal(a: float, b: float, tol: float = VOLUME_TOL) -> bool:
    return math.isclose(float(a), float(b), rel_tol=0.0, abs_tol=tol)


def almost_zero(x: float, tol: float = ZERO_TOL) -> bool:
    return abs(float(x)) <= tol
