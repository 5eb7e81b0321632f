"""Terminal UI module for threadcraft.

Provides a Textual-based TUI over the SessionController.

Module structure (each module hides a design decision):
- widgets.py: Custom widgets (style cards, chat bubbles, saved threads, log)
- styles.py: CSS styling (layout decisions)
- screens.py: Modal dialogs (template editor, rename)
- callbacks.py: Logging bridge (how the log panel receives records)
- app.py: Application orchestration (user interaction flow)
"""

from .app import ThreadcraftApp, run_textual_tui
from .callbacks import PanelLogHandler
from .config import LogLevel
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, SavedThreadsPanel, StyleList

__all__ = [
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "LogLevel",
    "PanelLogHandler",
    "SavedThreadsPanel",
    "StyleList",
    "ThreadcraftApp",
    "run_textual_tui",
]
