"""Модели данных для изображений.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np
from PIL import Image


@dataclass(frozen=True)
class ImageData:
    """Неизменяемая модель загруженного nine-patch файла и его метаданные.

    Fields:
        path: Путь к исходному файлу (``None`` для встроенного образца).
        pil_image: Изображение PIL в режиме RGBA, вместе с рамкой.
        pixels: Тот же растр как массив ``(H, W, 4)`` uint8.
        size_bytes: Размер файла, если доступен.
    """
    path: Optional[Path]
    pil_image: Image.Image
    pixels: np.ndarray
    size_bytes: Optional[int]

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def mode(self) -> str:
        return self.pil_image.mode

    @property
    def interior_size(self) -> tuple[int, int]:
        """Размер содержимого без служебной рамки (ширина, высота)."""
        return max(0, self.width - 2), max(0, self.height - 2)
