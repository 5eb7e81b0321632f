"""Main Textual TUI application.

Orchestrates the UI components and forwards every user action to the
SessionController. The app never mutates templates, transcript or saved
threads itself; it re-renders whenever the controller reports a change.
"""

import asyncio
import logging

import pyperclip
from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen, Screen
from textual.widgets import Button, Footer, Header, Static

from ..errors import GenerationInProgressError, ThreadcraftError
from ..llm import GenerationClient
from ..session import SessionController
from ..templates import StyleType
from .callbacks import PanelLogHandler
from .config import GENERATE_PLACEHOLDER, REFINE_PLACEHOLDER, LogLevel
from .screens import RenameScreen, TemplateEditorScreen
from .styles import APP_CSS
from .widgets import (
    ChatHistoryWidget,
    ChatInputBar,
    DebugPanel,
    SavedThreadsPanel,
    StyleCard,
    StyleList,
)

logger = logging.getLogger(__name__)

# Logger whose records are mirrored into the log panel
LIBRARY_LOGGER = "threadcraft"

WORKSPACE_ACTIONS = {
    "add_style",
    "edit_template",
    "rename_style",
    "copy_last_response",
    "save_last_response",
    "toggle_debug",
}


class ThreadcraftApp(App):
    """Textual TUI for generating and refining threads."""

    CSS = APP_CSS
    TITLE = "threadcraft"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+n", "add_style", "New Style", priority=True),
        Binding("ctrl+e", "edit_template", "Edit Prompt", priority=True),
        Binding("ctrl+t", "rename_style", "Rename", priority=True),
        Binding("ctrl+y", "copy_last_response", "Copy", priority=True),
        Binding("ctrl+s", "save_last_response", "Save", priority=True),
        Binding("ctrl+d", "toggle_debug", "Log", priority=True),
    ]

    def __init__(
        self,
        client: GenerationClient,
        style: str = StyleType.NATURAL.value,
        log_level: str | None = None,
    ) -> None:
        super().__init__()
        self._log_level = log_level
        self._log_handler: PanelLogHandler | None = None
        self._previous_log_level = logging.NOTSET
        self.controller = SessionController(
            client,
            clipboard=self._copy_text,
            on_change=self._on_controller_change,
            selected_style=style,
        )

    def _copy_text(self, text: str) -> None:
        """Copy via the system clipboard, falling back to the terminal (OSC 52)."""
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException:
            logger.debug("System clipboard unavailable, copying through the terminal")
            self.copy_to_clipboard(text)

    @property
    def main_screen(self) -> Screen:
        """Screen holding the workspace widgets, also while a dialog is open."""
        return self.screen_stack[0]

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        # Workspace shortcuts are inert while a dialog is open
        if action in WORKSPACE_ACTIONS and isinstance(self.screen, ModalScreen):
            return False
        return True

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)

        with Vertical(id="sidebar"):
            yield StyleList(id="style-list")
            yield SavedThreadsPanel(id="saved-threads")

        with Vertical(id="main-panel"):
            yield ChatHistoryWidget(id="chat-history")
            yield DebugPanel(id="debug-panel")

        with Vertical(id="bottom-bar"):
            yield Static("", id="status")
            yield ChatInputBar(id="chat-input-bar")

        yield Footer()

    async def on_mount(self) -> None:
        """Install the log bridge and render the initial state."""
        log_panel = self.main_screen.query_one("#debug-panel", DebugPanel)
        self._log_handler = PanelLogHandler(log_panel, app=self)
        library_logger = logging.getLogger(LIBRARY_LOGGER)
        library_logger.addHandler(self._log_handler)
        self._previous_log_level = library_logger.level
        library_logger.setLevel(logging.DEBUG)

        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            logger.info("Log panel enabled with level: %s", self._log_level.upper())

        self.sub_title = getattr(self.controller.client, "model", "")
        await self._refresh_view()
        self.main_screen.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def on_unmount(self) -> None:
        if self._log_handler is not None:
            library_logger = logging.getLogger(LIBRARY_LOGGER)
            library_logger.removeHandler(self._log_handler)
            library_logger.setLevel(self._previous_log_level)
            self._log_handler = None

    # -- rendering ---------------------------------------------------------

    def _on_controller_change(self, controller: SessionController) -> None:
        self.call_later(self._refresh_view)

    async def _refresh_view(self) -> None:
        controller = self.controller
        templates = controller.templates

        await self.main_screen.query_one("#style-list", StyleList).show_styles(
            templates.items(), controller.selected_style
        )
        await self.main_screen.query_one("#chat-history", ChatHistoryWidget).show_transcript(
            controller.transcript, generating=controller.in_flight
        )
        await self.main_screen.query_one("#saved-threads", SavedThreadsPanel).show_threads(
            controller.saved.list(), {key: config.name for key, config in templates.items()}
        )

        input_bar = self.main_screen.query_one("#chat-input-bar", ChatInputBar)
        input_bar.set_busy(controller.in_flight, can_refine=controller.has_history)
        input_bar.set_placeholder(REFINE_PLACEHOLDER if controller.has_history else GENERATE_PLACEHOLDER)

        status = f"Style: {controller.selected_template.name}"
        if controller.in_flight:
            status += " | generating..."
        elif controller.last_error:
            status += f" | last error: {controller.last_error}"
        self.main_screen.query_one("#status", Static).update(status)

    # -- user actions ------------------------------------------------------

    def on_style_card_selected(self, event: StyleCard.Selected) -> None:
        self.controller.select_style(event.style_key)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add-style-btn":
            self.action_add_style()
            return

        action, _, target = (event.button.name or "").partition(":")
        if not target:
            return
        try:
            if action == "copy":
                self.controller.copy(target)
                self.notify("Copied to clipboard", timeout=2)
            elif action == "save":
                self.controller.save(target)
                self.notify("Thread saved", timeout=2)
            elif action == "delete":
                self.controller.delete_saved(target)
            elif action == "edit":
                self.controller.select_style(target)
                self.action_edit_template()
            elif action == "rename":
                self._open_rename(target)
        except ThreadcraftError as e:
            self.notify(str(e), severity="error", timeout=4)

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Route submitted text to generate or refine."""
        if not event.value.strip():
            return
        if self.controller.in_flight:
            self.notify("Still generating, please wait", severity="warning", timeout=2)
            return

        mode = event.mode
        if mode == "auto":
            mode = "refine" if self.controller.has_history else "generate"

        if mode == "refine":
            self.main_screen.query_one("#chat-input-bar", ChatInputBar).clear()
            self._run_refine(event.value)
        else:
            self._run_generate(event.value)

    @work(group="generation")
    async def _run_generate(self, text: str) -> None:
        try:
            consumed = await self.controller.generate(text)
        except GenerationInProgressError as e:
            self.notify(str(e), severity="warning", timeout=2)
            return
        except asyncio.CancelledError:
            self.notify("Cancelled", severity="warning", timeout=2)
            raise

        if consumed:
            self.main_screen.query_one("#chat-input-bar", ChatInputBar).clear()
        else:
            self.notify("Generation failed", severity="error", timeout=4)

    @work(group="generation")
    async def _run_refine(self, text: str) -> None:
        try:
            ok = await self.controller.refine(text)
        except GenerationInProgressError as e:
            self.notify(str(e), severity="warning", timeout=2)
            return

        if not ok:
            self.notify(f"Refinement failed: {self.controller.last_error}", severity="error", timeout=5)

    def action_add_style(self) -> None:
        """Add a placeholder style, select it and open its editor."""
        self.controller.add_style()
        self.action_edit_template()

    def action_edit_template(self) -> None:
        key = self.controller.selected_style

        def _on_close(result: tuple[str, str] | None) -> None:
            if result is not None:
                system_prompt, examples = result
                self.controller.edit_template(key, system_prompt, examples)
                self.notify("Template saved", timeout=2)

        self.push_screen(TemplateEditorScreen(self.controller.templates.get(key)), _on_close)

    def action_rename_style(self) -> None:
        self._open_rename(self.controller.selected_style)

    def _open_rename(self, key: str) -> None:
        def _on_close(new_name: str | None) -> None:
            if new_name is not None:
                self.controller.rename_style(key, new_name)

        self.push_screen(RenameScreen(self.controller.templates.get(key).name), _on_close)

    def action_copy_last_response(self) -> None:
        last = self.controller.last_response()
        if last is None:
            self.notify("No response to copy", severity="warning")
            return
        self.controller.copy(last.id)
        self.notify("Response copied")

    def action_save_last_response(self) -> None:
        last = self.controller.last_response()
        if last is None:
            self.notify("No response to save", severity="warning")
            return
        self.controller.save(last.id)
        self.notify("Thread saved")

    def action_toggle_debug(self) -> None:
        log_panel = self.main_screen.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)


async def run_textual_tui(
    client: GenerationClient,
    style: str = StyleType.NATURAL.value,
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        client: Generation client; may be unconfigured, in which case every
            generation shows the error placeholder
        style: Initially selected style key
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = ThreadcraftApp(client=client, style=style, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        await client.close()
