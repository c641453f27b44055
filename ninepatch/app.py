import customtkinter as ctk

from ninepatch.config import AppConfig
from ninepatch.controllers.app_controller import AppController
from ninepatch.ui.button_panel import ButtonPanel
from ninepatch.ui.sidebar import Sidebar
from ninepatch.ui.status_bar import StatusBar


class NinePatchDemoApp(ctk.CTk):
    def __init__(self, config: AppConfig = AppConfig()) -> None:
        super().__init__()
        ctk.set_appearance_mode(config.appearance_mode)
        ctk.set_default_color_theme(config.color_theme)

        self.title(config.title)
        self.minsize(*config.min_size)

        # root layout: left buttons, right sidebar
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=0)

        self._panel = ButtonPanel(self, captions=config.button_captions)
        self._panel.grid(row=0, column=0, sticky="nsew", padx=(12, 6), pady=(12, 6))

        self._sidebar = Sidebar(self)
        self._sidebar.grid(row=0, column=1, sticky="ns", padx=(6, 12), pady=(12, 6))

        self._status = StatusBar(self)
        self._status.grid(row=1, column=0, columnspan=2, sticky="ew", padx=12, pady=(0, 12))

        self._controller = AppController(
            panel=self._panel, sidebar=self._sidebar, status=self._status, window=self, config=config
        )
        self._controller.bind_events()
        # первая отрисовка, когда окно уже знает свои размеры
        self.after_idle(self._controller.load_initial)
