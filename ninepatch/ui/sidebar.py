"""Боковая панель: открытие файла, информация об изображении и его разметке.

Принципы:
- SRP: управляет только отображением метаданных, не содержит алгоритмов.
- ISP: события наружу через `on_*`, данные внутрь через компактные `set_*`.
"""
from __future__ import annotations

from typing import Callable, Optional, Tuple

import customtkinter as ctk

from ninepatch.models.image_model import ImageData
from ninepatch.models.patch_model import PatchRegions


class Sidebar(ctk.CTkFrame):
    """Панель с блоками: файл, информация, патчи."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, width=280, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_open_file: Optional[Callable[[], None]] = None
        self.on_load_sample: Optional[Callable[[], None]] = None

        # Controls
        self._title = ctk.CTkLabel(self, text="Инструменты", font=ctk.CTkFont(size=16, weight="bold"))
        self._title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._open_btn = ctk.CTkButton(self, text="Открыть nine-patch…", command=self._emit_open_file)
        self._open_btn.grid(row=1, column=0, padx=8, pady=(0, 6), sticky="ew")

        self._sample_btn = ctk.CTkButton(self, text="Встроенный образец", command=self._emit_load_sample)
        self._sample_btn.grid(row=2, column=0, padx=8, pady=(0, 12), sticky="ew")

        # Info section
        self._info_title = ctk.CTkLabel(self, text="Информация", font=ctk.CTkFont(size=16, weight="bold"))
        self._info_title.grid(row=3, column=0, padx=8, pady=(8, 4), sticky="w")

        self._path_val = ctk.StringVar(value="—")
        self._size_val = ctk.StringVar(value="—")
        self._dims_val = ctk.StringVar(value="—")
        self._interior_val = ctk.StringVar(value="—")

        self._info_path = ctk.CTkLabel(self, textvariable=self._path_val, wraplength=250, anchor="w", justify="left")
        self._info_size = ctk.CTkLabel(self, textvariable=self._size_val, anchor="w", justify="left")
        self._info_dims = ctk.CTkLabel(self, textvariable=self._dims_val, anchor="w", justify="left")
        self._info_interior = ctk.CTkLabel(self, textvariable=self._interior_val, anchor="w", justify="left")

        self._info_path.grid(row=4, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_size.grid(row=5, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_dims.grid(row=6, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_interior.grid(row=7, column=0, padx=8, pady=(0, 10), sticky="ew")

        # Patches section
        self._patch_title = ctk.CTkLabel(self, text="Патчи", font=ctk.CTkFont(size=16, weight="bold"))
        self._patch_title.grid(row=8, column=0, padx=8, pady=(8, 4), sticky="w")

        self._patch_vals: Tuple[ctk.StringVar, ...] = tuple(ctk.StringVar(value="—") for _ in range(4))
        for offset, var in enumerate(self._patch_vals):
            label = ctk.CTkLabel(self, textvariable=var, wraplength=250, anchor="w", justify="left")
            label.grid(row=9 + offset, column=0, padx=8, pady=(0, 2), sticky="ew")

        # filler
        self.grid_rowconfigure(99, weight=1)

    # ---- Public API ----
    def set_image_info(self, image_data: ImageData) -> None:
        """Отображает метаданные загруженного изображения."""
        self._path_val.set(str(image_data.path) if image_data.path else "Встроенный образец")
        self._size_val.set(self._format_size(image_data.size_bytes))
        self._dims_val.set(f"С рамкой: {image_data.width} × {image_data.height} px")
        w, h = image_data.interior_size
        self._interior_val.set(f"Содержимое: {w} × {h} px")

    def set_patches(self, patches: Optional[PatchRegions]) -> None:
        """Показывает найденную разметку; ``None`` сбрасывает блок."""
        if patches is None:
            for var in self._patch_vals:
                var.set("—")
            return
        sides = (
            ("Верх", patches.top),
            ("Лево", patches.left),
            ("Низ (не используется)", patches.bottom),
            ("Право (не используется)", patches.right),
        )
        for var, (name, indices) in zip(self._patch_vals, sides):
            shown = ", ".join(str(i) for i in indices) if indices else "—"
            var.set(f"{name}: {shown}")

    # ---- Events ----
    def _emit_open_file(self) -> None:
        if self.on_open_file:
            self.on_open_file()

    def _emit_load_sample(self) -> None:
        if self.on_load_sample:
            self.on_load_sample()

    def _format_size(self, size_bytes: Optional[int]) -> str:
        if size_bytes is None:
            return "—"
        thresholds = [("Б", 1024), ("КБ", 1024**2), ("МБ", 1024**3)]
        for label, limit in thresholds:
            if size_bytes < limit:
                if label == "Б":
                    return f"{size_bytes} {label}"
                value = size_bytes / (limit // 1024)
                return f"{value:.1f} {label}"
        value = size_bytes / (1024**3)
        return f"{value:.1f} ГБ"
