"""Построение таблиц соответствия координат «результат -> исходник» для одной оси."""
from __future__ import annotations

from typing import Sequence

import numpy as np

from ninepatch.errors import DegenerateStretch


def build_mapping(diff: int, target_dim: int, patches: Sequence[int], axis: str = "x") -> np.ndarray:
    """Возвращает для каждой координаты результата координату внутреннего изображения.

    Каждый патч повторяется ``diff // k + 1`` раз, первые ``diff % k`` патчей
    (в порядке списка, не по значению) получают ещё один повтор. Остальные
    координаты выводятся ровно один раз, поэтому результат не убывает и его длина
    равна ``target_dim``.

    Args:
        diff: Сколько пикселей нужно добавить по оси (``>= 0``).
        target_dim: Итоговый размер по оси.
        patches: Растягиваемые индексы внутреннего изображения.
        axis: Имя оси для сообщения об ошибке.

    Raises:
        ValueError: при отрицательных размерах или некорректных индексах патчей.
        DegenerateStretch: если ``diff > 0``, а патчей нет.
    """
    source_dim = target_dim - diff
    if diff < 0 or source_dim < 0:
        raise ValueError(f"Некорректные размеры оси {axis}: diff={diff}, target={target_dim}")

    patch_arr = np.asarray(patches, dtype=np.intp).reshape(-1)
    if patch_arr.size and (patch_arr.min() < 0 or patch_arr.max() >= source_dim):
        raise ValueError(f"Патчи оси {axis} вне диапазона [0, {source_dim}): {list(patches)}")
    if np.unique(patch_arr).size != patch_arr.size:
        raise ValueError(f"Патчи оси {axis} повторяются: {list(patches)}")

    if diff == 0:
        return np.arange(source_dim, dtype=np.intp)
    k = patch_arr.size
    if k == 0:
        raise DegenerateStretch(axis, diff)

    repeats = np.ones(source_dim, dtype=np.intp)
    repeats[patch_arr] = diff // k + 1
    # остаток достаётся первым по списку патчам
    repeats[patch_arr[: diff % k]] += 1
    return np.repeat(np.arange(source_dim, dtype=np.intp), repeats)
