"""Растягивание nine-patch изображения до произвольного размера.

Принципы:
- SRP: класс владеет исходником, разметкой и кешем; разметку делает `PatchDetector`,
  таблицы координат строит `build_mapping`.
- Кеш принадлежит экземпляру и очищается только явным `clear_cache()`.
- Возвращаемые массивы доступны только для чтения: их разделяют кеш и вызывающий код.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

import numpy as np

from ninepatch.errors import OutOfMemory
from ninepatch.models.patch_model import PatchRegions
from ninepatch.services.index_mapping import build_mapping
from ninepatch.services.patch_detector import PatchDetector

logger = logging.getLogger(__name__)

SizeKey = Tuple[int, int]


def _read_only(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


class NinePatch:
    """Nine-patch изображение, которое можно запросить в любом размере.

    Пример::

        nine_patch = NinePatch(pixels)          # pixels: (H, W, 4) uint8 с рамкой
        button_bg = nine_patch.size_of(500, 48)

    Растягиваются только колонки, отмеченные на верхней стороне рамки, и строки,
    отмеченные на левой. Нижняя и правая разметка читаются, но на результат не влияют.
    """

    def __init__(self, pixels: np.ndarray, detector: Optional[PatchDetector] = None) -> None:
        self._detector = detector or PatchDetector()
        self._patches: PatchRegions = self._detector.detect(pixels)
        self._source = _read_only(np.array(pixels, dtype=np.uint8, copy=True))
        self._interior = _read_only(self._source[1:-1, 1:-1].copy())
        self._cache: Dict[SizeKey, np.ndarray] = {}

    # ---- Public API ----
    @property
    def patches(self) -> PatchRegions:
        return self._patches

    @property
    def top_patches(self) -> Tuple[int, ...]:
        return self._patches.top

    @property
    def left_patches(self) -> Tuple[int, ...]:
        return self._patches.left

    @property
    def bottom_patches(self) -> Tuple[int, ...]:
        return self._patches.bottom

    @property
    def right_patches(self) -> Tuple[int, ...]:
        return self._patches.right

    @property
    def interior_size(self) -> SizeKey:
        """Размер изображения без рамки (ширина, высота)."""
        return int(self._interior.shape[1]), int(self._interior.shape[0])

    @property
    def original_image(self) -> np.ndarray:
        """Изображение без рамки; каждый раз новая изменяемая копия."""
        return self._interior.copy()

    @property
    def cached_sizes(self) -> List[SizeKey]:
        return list(self._cache)

    def __len__(self) -> int:
        return len(self._cache)

    def clear_cache(self) -> None:
        """Сбрасывает все сохранённые результаты. Разметка не пересчитывается."""
        if self._cache:
            logger.debug("Очистка кеша: %d размер(ов)", len(self._cache))
        self._cache.clear()

    def size_of(self, width: int, height: int) -> np.ndarray:
        """Возвращает изображение, растянутое до ``width × height``.

        Запросы меньше внутреннего изображения поднимаются до его размера. Если
        итоговый размер совпадает с внутренним, возвращается само внутреннее
        изображение без записи в кеш. Остальные результаты кешируются по
        исходно запрошенной паре ``(width, height)``.

        Returns:
            Массив ``(H, W, 4)`` uint8 только для чтения.

        Raises:
            DegenerateStretch: растяжение по оси без патчей.
            OutOfMemory: не удалось выделить буфер результата.
        """
        key = (int(width), int(height))
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Кеш: %dx%d", *key)
            return cached

        source_width, source_height = self.interior_size
        target_width = max(source_width, key[0])
        target_height = max(source_height, key[1])
        if target_width == source_width and target_height == source_height:
            return self._interior

        try:
            x_mapping = build_mapping(target_width - source_width, target_width, self._patches.top, axis="x")
            y_mapping = build_mapping(target_height - source_height, target_height, self._patches.left, axis="y")
            rendered = self._interior[np.ix_(y_mapping, x_mapping)]
        except MemoryError as exc:
            raise OutOfMemory(f"Нет памяти под {target_width}×{target_height} px") from exc

        self._cache[key] = _read_only(rendered)
        logger.debug("Рендер %dx%d (запрошено %dx%d)", target_width, target_height, *key)
        return rendered
