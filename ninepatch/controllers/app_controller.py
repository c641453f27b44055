"""Контроллер приложения: оркестрация UI и nine-patch рендера.

SOLID:
- SRP: класс управляет связями между UI и сервисами (без логики растяжения).
- DIP: зависит от сервисов как от ролей; конкретные реализации инкапсулированы.
Clean Code:
- Обработчики компактны; ошибки рендера не роняют окно, а заменяются запасным фоном.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from tkinter import filedialog, TclError
from typing import Dict, List, Optional

import customtkinter as ctk
from PIL import Image

from ninepatch.config import AppConfig
from ninepatch.errors import NinePatchError
from ninepatch.models.image_model import ImageData
from ninepatch.services.image_service import ImageService
from ninepatch.services.nine_patch import NinePatch
from ninepatch.ui.button_panel import ButtonPanel
from ninepatch.ui.layout import Slot
from ninepatch.ui.sidebar import Sidebar
from ninepatch.ui.status_bar import StatusBar

logger = logging.getLogger(__name__)


@dataclass
class AppController:
    """Связывает элементы UI с nine-patch рендером.

    Ответственности:
    - Инициализация и бинд событий (UI -> контроллер).
    - Загрузка nine-patch через `ImageService`, построение `NinePatch`.
    - На каждое изменение размера: сброс кеша и рендер фонов кнопок.
    - Если размер не рендерится, кнопка получает прошлый удачный фон или оригинал.
    """
    panel: ButtonPanel
    sidebar: Sidebar
    status: StatusBar
    window: ctk.CTk
    config: AppConfig = AppConfig()

    _image_service: ImageService = ImageService()
    _nine_patch: Optional[NinePatch] = None
    _last_good: Dict[int, Image.Image] = field(default_factory=dict)

    def bind_events(self) -> None:
        """Регистрирует обработчики событий между UI-компонентами."""
        self.sidebar.on_open_file = self._handle_open_file
        self.sidebar.on_load_sample = self._handle_load_sample
        self.panel.on_resize = self._handle_panel_resize
        self.panel.on_button_click = self._handle_button_click

    def load_initial(self) -> None:
        """Загружает изображение из конфигурации, а при ошибке — встроенный образец."""
        if self.config.image_path is not None:
            try:
                self.set_source(self._image_service.load_image(self.config.image_path))
                return
            except (FileNotFoundError, ValueError) as exc:
                logger.warning("Не удалось открыть %s: %s", self.config.image_path, exc)
                self.status.set_message(str(exc), error=True)
        self.set_source(self._image_service.make_sample())

    def set_source(self, image_data: ImageData) -> bool:
        """Делает изображение текущим источником фонов. Возвращает ``False``, если оно не nine-patch."""
        try:
            nine_patch = NinePatch(image_data.pixels)
        except NinePatchError as exc:
            logger.warning("Изображение отклонено: %s", exc)
            self.status.set_message(f"Не nine-patch: {exc}", error=True)
            return False

        self._nine_patch = nine_patch
        self._last_good.clear()
        self.sidebar.set_image_info(image_data)
        self.sidebar.set_patches(nine_patch.patches)
        self.render_buttons(self.panel.get_slots())
        return True

    def render_buttons(self, slots: List[Slot]) -> None:
        """Сбрасывает кеш и заново рендерит фон каждой кнопки под её слот."""
        if self._nine_patch is None:
            return
        self._nine_patch.clear_cache()

        images: List[Optional[Image.Image]] = []
        failures: List[str] = []
        for index, (_x, _y, w, h) in enumerate(slots):
            try:
                rendered = self._nine_patch.size_of(w, h)
            except NinePatchError as exc:
                logger.warning("Кнопка %d: %dx%d не рендерится: %s", index + 1, w, h, exc)
                failures.append(f"{index + 1}: {exc}")
                images.append(self._fallback_image(index))
                continue
            image = self._image_service.to_pil(rendered)
            self._last_good[index] = image
            images.append(image)

        self.panel.set_button_images(images)
        self.status.set_cache_count(len(self._nine_patch))
        if failures:
            self.status.set_message("Запасной фон для кнопок " + "; ".join(failures), error=True)
        else:
            sizes = ", ".join(f"{w}×{h}" for _x, _y, w, h in slots)
            self.status.set_message(f"Отрисовано: {sizes}")

    # ---- Handlers ----
    def _handle_open_file(self) -> None:
        try:
            file_path = filedialog.askopenfilename(
                title="Выберите nine-patch изображение",
                filetypes=(
                    ("Nine-patch", "*.9.png"),
                    ("Images", "*.png *.bmp *.gif *.tiff *.webp"),
                    ("All files", "*.*"),
                ),
            )
        except TclError:
            # Silent fail if dialog cannot open
            return

        if not file_path:
            return

        try:
            image_data = self._image_service.load_image(file_path)
        except (FileNotFoundError, ValueError) as exc:
            self.status.set_message(str(exc), error=True)
            return
        self.set_source(image_data)

    def _handle_load_sample(self) -> None:
        self.set_source(self._image_service.make_sample())

    def _handle_panel_resize(self, slots: List[Slot]) -> None:
        self.render_buttons(slots)

    def _handle_button_click(self, index: int) -> None:
        captions = self.config.button_captions
        caption = captions[index] if index < len(captions) else str(index + 1)
        self.status.set_message(f"Нажата: {caption}")

    # ---- Helpers ----
    def _fallback_image(self, index: int) -> Optional[Image.Image]:
        previous = self._last_good.get(index)
        if previous is not None:
            return previous
        if self._nine_patch is None:
            return None
        return self._image_service.to_pil(self._nine_patch.original_image)
