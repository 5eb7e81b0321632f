"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Style card rendering and selection
- Chat bubble rendering with copy/save actions
- Saved thread sidebar
- Log rendering and level filtering

Action buttons carry "<action>:<id>" in their name; the app dispatches
on that prefix.
"""

from datetime import datetime

from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message as TextualMessage
from textual.widgets import Button, RichLog, Static, TextArea

from ..saved import SavedThread
from ..session import Message, Role
from ..templates import TemplateConfig
from .config import (
    LOG_MAX_MESSAGE_LENGTH,
    LOG_TIMESTAMP_FORMAT,
    SAVED_PREVIEW_LENGTH,
    STYLE_DESCRIPTION_MAX,
    LogLevel,
)


def _truncate(text: str, limit: int) -> str:
    return text if len(text) <= limit else text[: limit - 3] + "..."


class StyleCard(Vertical):
    """Card showing one style; clicking it selects the style."""

    class Selected(TextualMessage):
        """Posted when the card is clicked."""

        def __init__(self, style_key: str) -> None:
            super().__init__()
            self.style_key = style_key

    def __init__(self, style_key: str, config: TemplateConfig, active: bool = False) -> None:
        super().__init__(
            Static(config.name, classes="style-name", markup=False),
            Static(
                _truncate(config.description, STYLE_DESCRIPTION_MAX),
                classes="style-description",
                markup=False,
            ),
            Horizontal(
                Button("Prompt", name=f"edit:{style_key}"),
                Button("Rename", name=f"rename:{style_key}"),
                classes="message-actions",
            ),
            classes="-active" if active else "",
        )
        self.style_key = style_key

    def on_click(self, event: Click) -> None:
        self.post_message(self.Selected(self.style_key))


class StyleList(VerticalScroll):
    """Sidebar listing style cards in display order."""

    BORDER_TITLE = "Styles"

    async def show_styles(self, styles: list[tuple[str, TemplateConfig]], selected: str) -> None:
        await self.remove_children()
        await self.mount_all(
            [Button("+ New Style", id="add-style-btn", variant="primary")]
            + [StyleCard(key, config, active=(key == selected)) for key, config in styles]
        )


class ChatHistoryWidget(VerticalScroll):
    """Scrollable transcript of the current session."""

    BORDER_TITLE = "Result & Refinement"
    BORDER_SUBTITLE = "No thread yet"
    ALLOW_MAXIMIZE = True
    ALLOW_SELECT = True

    async def show_transcript(self, messages: tuple[Message, ...], generating: bool = False) -> None:
        """Re-render the whole transcript."""
        await self.remove_children()

        widgets = [self._render_message(msg) for msg in messages]
        if generating:
            widgets.append(Static("Writing...", classes="pending-message"))
        if not widgets:
            widgets.append(Static(
                "Pick a style, dump your thoughts below and press Generate.",
                classes="empty-hint",
            ))
        await self.mount_all(widgets)

        self.set_class(generating, "generating")
        self.border_subtitle = f"{len(messages)} messages" if messages else "No thread yet"
        self.scroll_end(animate=False)

    def _render_message(self, msg: Message) -> Vertical:
        timestamp = msg.timestamp.strftime("%H:%M:%S")
        if msg.role == Role.USER:
            return Vertical(
                Static(f"> You [{timestamp}]", classes="message-header", markup=False),
                Static(msg.content, classes="message-content", markup=False),
                classes="chat-message user-message",
            )

        return Vertical(
            Static(f"< Thread [{timestamp}]", classes="message-header", markup=False),
            Static(msg.content, classes="message-content", markup=False),
            Horizontal(
                Button("Copy", name=f"copy:{msg.id}"),
                Button("Save", name=f"save:{msg.id}"),
                classes="message-actions",
            ),
            classes="chat-message model-message",
        )


class SavedThreadsPanel(VerticalScroll):
    """Sidebar of saved threads, most recent first."""

    BORDER_TITLE = "Saved"

    async def show_threads(self, threads: list[SavedThread], style_names: dict[str, str]) -> None:
        await self.remove_children()
        if not threads:
            await self.mount(Static("No saved threads yet.", classes="empty-hint"))
        else:
            await self.mount_all([
                Vertical(
                    Horizontal(
                        Static(
                            f"{style_names.get(t.style, 'Unknown')} · {t.timestamp:%H:%M}",
                            classes="saved-header",
                            markup=False,
                        ),
                        Button("×", name=f"delete:{t.id}"),
                    ),
                    Static(_truncate(t.content, SAVED_PREVIEW_LENGTH), markup=False),
                    classes="saved-thread",
                )
                for t in threads
            ])
        self.border_subtitle = f"{len(threads)}"


class ChatInputBar(Horizontal):
    """Input area with Generate and Refine buttons."""

    class Submitted(TextualMessage):
        """Posted when the user submits input.

        `mode` is "generate", "refine" or "auto" (ctrl+j).
        """

        def __init__(self, value: str, mode: str) -> None:
            super().__init__()
            self.value = value
            self.mode = mode

    def compose(self):
        text_area = TextArea(id="chat-input", show_line_numbers=False)
        text_area.cursor_blink = False
        yield text_area
        with Vertical(id="input-buttons"):
            yield Button("Generate", id="generate-btn", variant="success").with_tooltip(
                "Start a new thread (Ctrl+J when empty)"
            )
            yield Button("Refine", id="refine-btn", variant="primary").with_tooltip(
                "Ask for changes to the current thread"
            )

    def on_mount(self) -> None:
        self.query_one("#chat-input", TextArea).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "generate-btn":
            event.stop()
            self._submit("generate")
        elif event.button.id == "refine-btn":
            event.stop()
            self._submit("refine")

    def on_key(self, event) -> None:
        """Submit with ctrl+j (terminals do not pass ctrl+enter)."""
        if event.key == "ctrl+j":
            self._submit("auto")
            event.prevent_default()
            event.stop()

    def _submit(self, mode: str) -> None:
        text_area = self.query_one("#chat-input", TextArea)
        self.post_message(self.Submitted(text_area.text, mode))

    def clear(self) -> None:
        self.query_one("#chat-input", TextArea).clear()

    def set_busy(self, busy: bool, can_refine: bool) -> None:
        self.query_one("#generate-btn", Button).disabled = busy
        self.query_one("#refine-btn", Button).disabled = busy or not can_refine

    def set_placeholder(self, placeholder: str) -> None:
        self.query_one("#chat-input", TextArea).placeholder = placeholder

    def focus_input(self) -> None:
        self.query_one("#chat-input", TextArea).focus()


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Hidden by default, shown with --log-level or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    def __init__(self, *args, log_level: int = LogLevel.INFO, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def log_entry(self, component: str, message: str, level: int = LogLevel.DEBUG) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Short logger name (session, gemini, ...)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        from rich.markup import escape

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_colors = {
            LogLevel.DEBUG: "dim white",
            LogLevel.INFO: "cyan",
            LogLevel.WARNING: "yellow",
            LogLevel.ERROR: "red",
        }
        level_color = level_colors.get(level, "white")

        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{LogLevel.name(level):<5}[/] "
            f"[magenta]\\[{escape(component)}][/] {escape(_truncate(message, LOG_MAX_MESSAGE_LENGTH))}"
        )

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
