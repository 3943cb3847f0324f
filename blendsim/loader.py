"""Загрузка исходного состава смеси из текстового файла.

Формат: одно число на строку (доля/объём очередного вина).
Пустые строки пропускаются, пробелы по краям игнорируются.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Iterable

from blendsim.mix import Mix

logger = logging.getLogger(__name__)


def parse_mix_lines(lines: Iterable[str]) -> Mix:
    values = []
    for lineno, line in enumerate(lines, start=1):
        text = line.strip()
        if not text:
            continue
        try:
            values.append(float(text))
        except ValueError as e:
            raise ValueError(f"line {lineno}: cannot parse {text!r} as a number") from e
        if not math.isfinite(values[-1]):
            raise ValueError(f"line {lineno}: {text!r} is not a finite number")

    if not values:
        raise ValueError("composition is empty")
    return Mix(values)


def load_mix(path: str | Path) -> Mix:
    p = Path(path)
    mix = parse_mix_lines(p.read_text(encoding="utf-8").splitlines())
    logger.info("Loaded mix with %d components from %s", mix.count, p)
    return mix
