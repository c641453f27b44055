"""Холст с демонстрационными кнопками, фон которых рисуется из nine-patch.

Принципы:
- SRP: отвечает только за отрисовку кнопок и пересылку событий; рендер делает контроллер.
- Чистый код: публичный API (`set_button_images`, `get_slots`) отделён от обработчиков Tk.
"""
from __future__ import annotations

from typing import Callable, List, Optional, Sequence

import customtkinter as ctk
import tkinter as tk
from PIL import Image, ImageTk

from ninepatch.ui.layout import Slot, compute_button_slots


class ButtonPanel(ctk.CTkFrame):
    """Три «кнопки» на канве; при изменении размера сообщает новые слоты контроллеру."""
    def __init__(self, master: ctk.CTk | tk.Misc, captions: Sequence[str], **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._canvas = tk.Canvas(self, highlightthickness=0, bg=self._get_canvas_bg())
        self._canvas.grid(row=0, column=0, sticky="nsew")

        self._captions: List[str] = list(captions)
        self._slots: List[Slot] = []
        # ссылки на PhotoImage, иначе Tk потеряет изображения после сборки мусора
        self._tk_images: List[ImageTk.PhotoImage] = []
        self._pressed: Optional[int] = None

        self.on_resize: Optional[Callable[[List[Slot]], None]] = None
        self.on_button_click: Optional[Callable[[int], None]] = None

        self._canvas.bind("<Configure>", self._on_canvas_resize)
        self._canvas.bind("<ButtonPress-1>", self._on_press)
        self._canvas.bind("<ButtonRelease-1>", self._on_release)

    # ---- Public API ----
    def get_slots(self) -> List[Slot]:
        """Текущие прямоугольники кнопок (x, y, ширина, высота)."""
        if not self._slots:
            self._slots = self._compute_slots()
        return list(self._slots)

    def set_button_images(self, images: Sequence[Optional[Image.Image]]) -> None:
        """Перерисовывает кнопки с новыми фонами; ``None`` — кнопка без фона."""
        self._canvas.delete("all")
        self._tk_images = []
        for index, (slot, image) in enumerate(zip(self._slots, images)):
            x, y, w, h = slot
            if image is not None:
                photo = ImageTk.PhotoImage(image)
                self._tk_images.append(photo)
                self._canvas.create_image(x, y, image=photo, anchor="nw")
            else:
                self._canvas.create_rectangle(x, y, x + w, y + h, outline="#808080", dash=(3, 3))
            caption = self._captions[index] if index < len(self._captions) else ""
            self._canvas.create_text(x + w // 2, y + h // 2, text=caption, fill=self._get_text_fill())

    # ---- Internals ----
    def _compute_slots(self) -> List[Slot]:
        canvas_w = max(1, int(self._canvas.winfo_width()))
        canvas_h = max(1, int(self._canvas.winfo_height()))
        return compute_button_slots(canvas_w, canvas_h, count=len(self._captions))

    def _on_canvas_resize(self, _event: tk.Event) -> None:
        slots = self._compute_slots()
        if slots == self._slots:
            return
        self._slots = slots
        if self.on_resize:
            self.on_resize(list(slots))

    def _slot_at(self, cx: int, cy: int) -> Optional[int]:
        for index, (x, y, w, h) in enumerate(self._slots):
            if x <= cx < x + w and y <= cy < y + h:
                return index
        return None

    def _on_press(self, event: tk.Event) -> None:
        self._pressed = self._slot_at(event.x, event.y)

    def _on_release(self, event: tk.Event) -> None:
        # клик засчитывается, только если отпустили над той же кнопкой
        index = self._slot_at(event.x, event.y)
        if index is not None and index == self._pressed and self.on_button_click:
            self.on_button_click(index)
        self._pressed = None

    def _get_canvas_bg(self) -> str:
        return "#1f1f1f" if ctk.get_appearance_mode().lower() == "dark" else "#f2f2f2"

    def _get_text_fill(self) -> str:
        return "#f2f2f2" if ctk.get_appearance_mode().lower() == "dark" else "#1f1f1f"
