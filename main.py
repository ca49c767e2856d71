import logging
import tkinter as tk
from tkinter import Frame, Label, X

import contacts
from core.config.config_service import get_config_service
from core.logging.logic.log_setup import configure_logging

logger = logging.getLogger(__name__)


class MainWindow(tk.Tk):
    def __init__(self, config=None):
        super().__init__()
        self.config_service = config or get_config_service()

        self.title(self.config_service.ui.title)
        self.geometry(self.config_service.ui.geometry)
        self.active_view = None

        # Anzeige-Bereich (Mitte)
        self.display_area = Frame(self)
        self.display_area.pack(fill="both", expand=True)

        # Statusleiste (unten)
        self.status_bar = Label(self, text="", anchor="w", bg="#eeeeee")
        self.status_bar.pack(side="bottom", fill=X)

        self.protocol("WM_DELETE_WINDOW", self.on_close)
        self.load_contacts_view()

    def load_contacts_view(self):
        """Mounts the contacts feature in the display area and loads the list."""
        self.active_view = contacts.create_feature_view(self.display_area, app_context=self)
        self.active_view.pack(fill="both", expand=True)
        self.active_view.on_show()
        self.set_status(f"{contacts.get_feature_name()} @ {self.config_service.api.base_url}")

    def set_status(self, message):
        """Aktualisiert die Statusleiste."""
        self.status_bar.config(text=message)

    def on_close(self):
        if self.active_view is not None:
            self.active_view.dispose()
            self.active_view = None
        self.destroy()


def run():
    cfg = get_config_service()
    configure_logging(cfg.logging.level, cfg.logging.file or None)
    logger.info("Starting %s", cfg.ui.title)
    app = MainWindow(cfg)
    app.mainloop()


if __name__ == "__main__":
    run()
