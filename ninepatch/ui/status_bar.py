from __future__ import annotations

import customtkinter as ctk


class StatusBar(ctk.CTkFrame):
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, height=40, **kwargs)

        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)  # message stretches

        self._message = ctk.StringVar(value="Готово")
        self._message_label = ctk.CTkLabel(self, textvariable=self._message, anchor="w")
        self._message_label.grid(row=0, column=0, padx=(10, 6), pady=6, sticky="ew")

        self._cache = ctk.StringVar(value="Кеш: 0")
        self._cache_label = ctk.CTkLabel(self, textvariable=self._cache, width=90, anchor="e")
        self._cache_label.grid(row=0, column=1, padx=(6, 10), pady=6, sticky="e")

    # public API (sync from controller)
    def set_message(self, text: str, error: bool = False) -> None:
        self._message.set(text)
        self._message_label.configure(text_color="#d9534f" if error else ("gray10", "gray90"))

    def set_cache_count(self, count: int) -> None:
        self._cache.set(f"Кеш: {count}")
