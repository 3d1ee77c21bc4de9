"""
Design (log.py)
- Purpose: Configure the logging module once and mirror records into the UI Logs panel.
- Inputs: Level name (from config.get_log_level()); a sink callable taking one formatted line.
- Outputs: None.
- Side effects: Installs handlers on the root logger.
- Thread-safety: logging itself is thread-safe; the sink must marshal to the Tk thread.
"""

import logging
from typing import Callable

from .config import LOG_DATE_FORMAT, LOG_FORMAT


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


class TextPanelHandler(logging.Handler):
    """Forward each formatted record (plus newline) to sink, e.g. AppUI.append_log."""

    def __init__(self, sink: Callable[[str], None], level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.sink = sink
        self.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.sink(self.format(record) + "\n")
        except Exception:
            self.handleError(record)


def attach_panel(sink: Callable[[str], None]) -> TextPanelHandler:
    handler = TextPanelHandler(sink)
    logging.getLogger().addHandler(handler)
    return handler
