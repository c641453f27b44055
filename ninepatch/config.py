"""Настройки демо-приложения.

Значения по умолчанию покрывают запуск без аргументов; CLI переопределяет
отдельные поля через `dataclasses.replace`.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple


@dataclass(frozen=True)
class AppConfig:
    """Неизменяемые параметры окна и источника nine-patch.

    Fields:
        title: Заголовок окна.
        min_size: Минимальный размер окна (ширина, высота).
        appearance_mode: Режим оформления customtkinter ("system" | "light" | "dark").
        color_theme: Цветовая тема customtkinter.
        button_captions: Подписи демонстрационных кнопок.
        image_path: Nine-patch файл; ``None`` — встроенный образец.
    """
    title: str = "Nine-Patch Demo"
    min_size: Tuple[int, int] = (640, 420)
    appearance_mode: str = "system"
    color_theme: str = "blue"
    button_captions: Tuple[str, ...] = ("Кнопка 1", "Кнопка 2", "Кнопка 3")
    image_path: Optional[Path] = None
