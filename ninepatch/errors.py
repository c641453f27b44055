"""Иерархия ошибок работы с nine-patch изображениями.

Принципы:
- Все ошибки ядра наследуют `NinePatchError`, чтобы UI мог перехватывать их одним `except`.
- Ошибки совместимы со встроенными (`ValueError`, `MemoryError`) там, где это естественно.
"""
from __future__ import annotations


class NinePatchError(Exception):
    """Базовая ошибка ядра nine-patch."""


class InvalidImage(NinePatchError, ValueError):
    """Исходный массив не является RGBA-изображением с рамкой (форма, тип или размер < 2×2)."""


class DegenerateStretch(NinePatchError):
    """Требуется растяжение по оси, на которой нет ни одного патча."""

    def __init__(self, axis: str, diff: int) -> None:
        super().__init__(f"Нельзя растянуть ось {axis} на {diff} px: патчи не размечены")
        self.axis = axis
        self.diff = diff


class OutOfMemory(NinePatchError, MemoryError):
    """Не удалось выделить буфер под результат."""
