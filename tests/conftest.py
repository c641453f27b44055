from __future__ import annotations

from typing import Iterable

import numpy as np
import pytest

BLACK = (0, 0, 0, 255)


def make_nine_patch(
    interior: np.ndarray,
    top: Iterable[int] = (),
    left: Iterable[int] = (),
    bottom: Iterable[int] = (),
    right: Iterable[int] = (),
) -> np.ndarray:
    """Оборачивает внутреннее изображение прозрачной рамкой с маркерами в заданных индексах."""
    h, w = interior.shape[:2]
    pixels = np.zeros((h + 2, w + 2, 4), dtype=np.uint8)
    pixels[1:-1, 1:-1] = interior
    for i in top:
        pixels[0, i + 1] = BLACK
    for i in left:
        pixels[i + 1, 0] = BLACK
    for i in bottom:
        pixels[-1, i + 1] = BLACK
    for i in right:
        pixels[i + 1, -1] = BLACK
    return pixels


def numbered_interior(width: int, height: int) -> np.ndarray:
    """Внутреннее изображение, где каждый пиксель кодирует свои координаты (R=x, G=y)."""
    interior = np.zeros((height, width, 4), dtype=np.uint8)
    interior[..., 0] = np.arange(width, dtype=np.uint8)[None, :]
    interior[..., 1] = np.arange(height, dtype=np.uint8)[:, None]
    interior[..., 2] = 128
    interior[..., 3] = 255
    return interior


@pytest.fixture
def small_nine_patch() -> np.ndarray:
    """5×5 исходник (3×3 содержимое) с маркерами на колонке 1 и строке 1."""
    return make_nine_patch(numbered_interior(3, 3), top=[1], left=[1])
