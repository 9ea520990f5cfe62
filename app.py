import tkinter as tk
from typing import Optional

from logic.case_api import CaseApi
from logic.config import Settings
from logic.logger import configure_logging, get_logger
from ui.database_frame import DatabaseFrame

log = get_logger("app")


class App(tk.Tk):
    def __init__(self, settings: Optional[Settings] = None):
        super().__init__()
        self.title("Case Database")
        self.geometry("1100x720")
        self.minsize(420, 480)

        self.settings = settings or Settings.from_env()
        self.api = CaseApi(self.settings)
        log.info("Using case backend at %s", self.settings.api_url)

        # Main container that hosts the page
        container = tk.Frame(self)
        container.pack(fill="both", expand=True)
        container.grid_rowconfigure(0, weight=1)
        container.grid_columnconfigure(0, weight=1)

        self.update_idletasks()
        self.page = DatabaseFrame(parent=container, controller=self)
        self.page.grid(row=0, column=0, sticky="nsew")

    def destroy(self):
        super().destroy()
        self.api.close()


def main():
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    app = App(settings)
    app.mainloop()


if __name__ == "__main__":
    main()
