"""Logging bridge for the TUI.

Hides the details of how log records from the library reach the log
panel. Uses thread-safe methods so records emitted off the UI thread
are still rendered.
"""

import logging
import threading
from typing import TYPE_CHECKING, Any

from .config import LogLevel

if TYPE_CHECKING:
    from textual.app import App

    from .widgets import DebugPanel


class PanelLogHandler(logging.Handler):
    """logging.Handler that writes records into a DebugPanel."""

    def __init__(self, panel: "DebugPanel", app: "App | None" = None) -> None:
        super().__init__()
        self.panel = panel
        self.app = app

    def _call_thread_safe(self, func: Any, *args: Any) -> None:
        if self.app is not None and self.app._thread_id != threading.get_ident():
            self.app.call_from_thread(func, *args)
        else:
            func(*args)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = record.getMessage()
            if record.exc_info and record.exc_info[1] is not None:
                message = f"{message}: {record.exc_info[1]}"
            component = record.name.rsplit(".", 1)[-1]
            self._call_thread_safe(
                self.panel.log_entry, component, message, LogLevel.clamp(record.levelno)
            )
        except Exception:
            self.handleError(record)
