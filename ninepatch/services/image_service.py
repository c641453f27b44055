"""Загрузка nine-patch изображений с диска, сохранение результатов и конвертация в массивы.

Принципы:
- SRP: класс отвечает только за ввод/вывод и мост PIL <-> numpy.
- OCP: новые источники (стрим, URL) можно добавить отдельными методами.
- Ядро (`NinePatch`) работает с уже декодированными массивами и о файлах не знает.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import numpy as np
from PIL import Image, UnidentifiedImageError

from ninepatch.models.image_model import ImageData


class ImageService:
    def load_image(self, file_path: str | Path) -> ImageData:
        """Загружает nine-patch изображение с диска и возвращает его вместе с метаданными.

        Args:
            file_path: Путь до файла изображения (обычно ``*.9.png``).

        Returns:
            `ImageData` c `PIL.Image.Image` (в режиме RGBA), массивом пикселей и размером файла.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            ValueError: если файл не распознан как изображение.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Файл не найден: {path}")

        try:
            with Image.open(path) as opened:
                pil_image = opened.convert("RGBA")
        except UnidentifiedImageError as exc:
            raise ValueError(f"Файл не является изображением: {path}") from exc

        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        return ImageData(
            path=path,
            pil_image=pil_image,
            pixels=self.to_pixels(pil_image),
            size_bytes=size_bytes,
        )

    def to_pixels(self, image: Image.Image) -> np.ndarray:
        """PIL-изображение -> массив ``(H, W, 4)`` uint8 (RGBA)."""
        rgba = image if image.mode == "RGBA" else image.convert("RGBA")
        return np.array(rgba, dtype=np.uint8)

    def to_pil(self, pixels: np.ndarray) -> Image.Image:
        """Массив ``(H, W, 4)`` uint8 -> PIL-изображение RGBA (с копированием данных)."""
        return Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))

    def save_image(self, pixels: np.ndarray, file_path: str | Path) -> Path:
        """Сохраняет массив пикселей в файл; формат определяется по расширению."""
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.to_pil(pixels).save(path)
        return path

    def make_sample(self, size: int = 24, corner: int = 6) -> ImageData:
        """Строит встроенный образец кнопки с рамкой, чтобы демо работало без файла.

        Внутреннее изображение: скруглённая рамка с заливкой; растягиваются
        одна колонка и одна строка посередине, углы остаются фиксированными.
        """
        if size < 2 * corner + 1:
            raise ValueError(f"Размер {size} мал для углов {corner}")

        interior = np.zeros((size, size, 4), dtype=np.uint8)
        ys, xs = np.mgrid[0:size, 0:size]
        # расстояние до ближайшего угла «скругления»
        cx = np.clip(xs, corner, size - 1 - corner)
        cy = np.clip(ys, corner, size - 1 - corner)
        dist = np.hypot(xs - cx, ys - cy)
        inside = dist <= corner
        edge = inside & (dist > corner - 2)

        # вертикальный градиент заливки
        shade = np.linspace(235, 190, size, dtype=np.float32)[:, None].repeat(size, axis=1)
        interior[inside, 0] = shade[inside].astype(np.uint8)
        interior[inside, 1] = (shade[inside] * 0.95).astype(np.uint8)
        interior[inside, 2] = 255
        interior[inside, 3] = 255
        interior[edge] = (40, 70, 140, 255)

        pixels = np.zeros((size + 2, size + 2, 4), dtype=np.uint8)
        pixels[1:-1, 1:-1] = interior
        middle = size // 2 + 1
        pixels[0, middle] = (0, 0, 0, 255)
        pixels[middle, 0] = (0, 0, 0, 255)

        return ImageData(
            path=None,
            pil_image=self.to_pil(pixels),
            pixels=pixels,
            size_bytes=None,
        )
