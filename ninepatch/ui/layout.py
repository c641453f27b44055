"""Раскладка демонстрационных кнопок по холсту (без зависимостей от Tk)."""
from __future__ import annotations

from typing import List, Sequence, Tuple

Slot = Tuple[int, int, int, int]  # x, y, width, height

WIDTH_FRACTIONS: Tuple[float, ...] = (1.0, 0.7, 0.4)
HEIGHT_FRACTIONS: Tuple[float, ...] = (0.14, 0.22, 0.34)


def compute_button_slots(
    canvas_w: int,
    canvas_h: int,
    count: int = 3,
    padding: int = 16,
    width_fractions: Sequence[float] = WIDTH_FRACTIONS,
    height_fractions: Sequence[float] = HEIGHT_FRACTIONS,
) -> List[Slot]:
    """Кнопки идут столбиком; ширина и высота каждой пропорциональны холсту.

    Доли берутся по кругу, если кнопок больше, чем задано долей. Размеры не
    бывают меньше 1 px, чтобы рендер всегда получал валидный запрос.
    """
    if count <= 0:
        return []
    usable_w = max(1, canvas_w - 2 * padding)
    usable_h = max(1, canvas_h - (count + 1) * padding)

    slots: List[Slot] = []
    y = padding
    for i in range(count):
        w = max(1, int(usable_w * width_fractions[i % len(width_fractions)]))
        h = max(1, int(usable_h * height_fractions[i % len(height_fractions)]))
        slots.append((padding, y, w, h))
        y += h + padding
    return slots
