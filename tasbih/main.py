"""
Design (main.py)
- Purpose: Program entry point. Configure logging, build the single CounterStore on top of
           file storage and hand it to the window explicitly (no module-level instance).
- Side effects: Opens the Tk window and runs its event loop until closed.
"""

import logging
import tkinter as tk

from .config import get_log_level, get_page_url
from .log import attach_panel, setup_logging
from .repository import CounterStore
from .storage import JsonFileStorage, get_data_path
from .ui import AppUI

logger = logging.getLogger(__name__)


def main() -> int:
    setup_logging(get_log_level())

    path = get_data_path()
    logger.info("Using storage file %s", path)
    store = CounterStore(JsonFileStorage(path))

    root = tk.Tk()
    ui = AppUI(root, store, get_page_url())
    attach_panel(ui.append_log)
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
