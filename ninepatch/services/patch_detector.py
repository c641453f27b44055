"""Поиск растягиваемых областей по однопиксельной рамке nine-patch изображения.

Принципы:
- SRP: сервис только читает рамку, ничего не рендерит и не хранит.
- Чистая функция от пикселей: одинаковый вход всегда даёт одинаковую разметку.
"""
from __future__ import annotations

import logging
from typing import Tuple

import numpy as np

from ninepatch.errors import InvalidImage
from ninepatch.models.patch_model import PatchRegions

logger = logging.getLogger(__name__)

BYTES_PER_PIXEL = 4
MARKER_ALPHA = 255


def validate_pixels(pixels: np.ndarray) -> None:
    """Проверяет, что массив похож на RGBA-растр с рамкой.

    Raises:
        InvalidImage: если форма не ``(H, W, 4)``, тип не uint8 или размер меньше 2×2.
    """
    if not isinstance(pixels, np.ndarray):
        raise InvalidImage(f"Ожидался numpy.ndarray, получено {type(pixels).__name__}")
    if pixels.ndim != 3 or pixels.shape[2] != BYTES_PER_PIXEL:
        raise InvalidImage(f"Ожидалась форма (H, W, 4), получено {pixels.shape}")
    if pixels.dtype != np.uint8:
        raise InvalidImage(f"Ожидался тип uint8, получено {pixels.dtype}")
    height, width = pixels.shape[:2]
    if width < 2 or height < 2:
        raise InvalidImage(f"Изображение {width}×{height} слишком мало для рамки")


class PatchDetector:
    def detect(self, pixels: np.ndarray) -> PatchRegions:
        """Находит маркеры на всех четырёх сторонах рамки.

        Маркер: непрозрачный чёрный пиксель (цветовые каналы 0, альфа 255), точное
        совпадение. Проверяются только пиксели напротив внутренней области, углы
        рамки игнорируются. Индексы возвращаются относительно внутреннего
        изображения, по возрастанию.

        Args:
            pixels: Массив ``(H, W, 4)`` uint8 вместе с рамкой.

        Returns:
            `PatchRegions` с разметкой верх/лево/низ/право.

        Raises:
            InvalidImage: см. `validate_pixels`.
        """
        validate_pixels(pixels)
        regions = PatchRegions(
            top=self._markers(pixels[0, 1:-1]),
            left=self._markers(pixels[1:-1, 0]),
            bottom=self._markers(pixels[-1, 1:-1]),
            right=self._markers(pixels[1:-1, -1]),
        )
        logger.debug("Разметка %dx%d: %s", pixels.shape[1], pixels.shape[0], regions.describe())
        return regions

    # ---- Helpers ----
    def _markers(self, line: np.ndarray) -> Tuple[int, ...]:
        """Индексы маркеров в линии рамки ``(N, 4)``; индекс уже сдвинут на 1."""
        if line.shape[0] == 0:
            return ()
        is_black = np.all(line[:, :3] == 0, axis=1)
        is_opaque = line[:, 3] == MARKER_ALPHA
        return tuple(int(i) for i in np.flatnonzero(is_black & is_opaque))
