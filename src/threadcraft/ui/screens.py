"""Modal screens for the TUI.

This module hides the design decisions about:
- How the template editor presents prompt and examples
- How a style rename is collected
- Keyboard shortcuts for dialogs
"""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Static, TextArea

from ..templates import TemplateConfig

DIALOG_CSS = """
{name} {{
    align: center middle;
    background: $background 70%;
}}

.dialog {{
    height: auto;
    max-height: 90%;
    border: tall $accent;
    background: $surface;
    padding: 1 2;
}}

.dialog-title {{
    width: 100%;
    text-align: center;
    text-style: bold;
    color: $accent;
    padding: 0 0 1 0;
    border-bottom: solid $border;
    margin-bottom: 1;
}}

.dialog-hint {{
    color: $text-muted;
}}

.dialog-buttons {{
    width: 100%;
    height: 3;
    align: right middle;
    margin-top: 1;
}}

.dialog-buttons Button {{
    margin: 0 0 0 1;
    min-width: 10;
}}
"""


class TemplateEditorScreen(ModalScreen[tuple[str, str] | None]):
    """Editor for a style's system prompt and few-shot examples.

    Dismisses with (system_prompt, examples) on save, None on cancel.
    Reset restores the fields to the stored template.
    """

    CSS = DIALOG_CSS.format(name="TemplateEditorScreen") + """
    #editor-dialog {
        width: 90;
    }

    #editor-dialog TextArea {
        height: 10;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=False),
        Binding("ctrl+s", "save", "Save", show=False),
    ]

    def __init__(self, config: TemplateConfig) -> None:
        super().__init__()
        self._config = config

    def compose(self) -> ComposeResult:
        with Vertical(id="editor-dialog", classes="dialog"):
            yield Static(f"Edit {self._config.name} Template", classes="dialog-title", markup=False)
            yield Static("System Prompt (The Persona)", markup=False)
            yield Static(
                "Define who the AI is, the tone of voice, and strict formatting rules.",
                classes="dialog-hint",
            )
            yield TextArea(self._config.system_prompt, id="system-prompt")
            yield Static("Few-Shot Examples", markup=False)
            yield Static(
                "Provide Input/Output pairs to guide the AI. This significantly improves quality.",
                classes="dialog-hint",
            )
            yield TextArea(self._config.examples, id="examples")
            with Horizontal(classes="dialog-buttons"):
                yield Button("Cancel", id="btn-cancel")
                yield Button("Reset", id="btn-reset", variant="warning")
                yield Button("Save Changes", id="btn-save", variant="success")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "btn-save":
            self.action_save()
        elif event.button.id == "btn-reset":
            self.action_reset()
        else:
            self.action_cancel()

    def action_save(self) -> None:
        system_prompt = self.query_one("#system-prompt", TextArea).text
        examples = self.query_one("#examples", TextArea).text
        self.dismiss((system_prompt, examples))

    def action_reset(self) -> None:
        self.query_one("#system-prompt", TextArea).load_text(self._config.system_prompt)
        self.query_one("#examples", TextArea).load_text(self._config.examples)

    def action_cancel(self) -> None:
        self.dismiss(None)


class RenameScreen(ModalScreen[str | None]):
    """Single-line prompt for a new style name.

    Dismisses with the entered text (possibly blank) or None on cancel.
    """

    CSS = DIALOG_CSS.format(name="RenameScreen") + """
    #rename-dialog {
        width: 50;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=False),
    ]

    def __init__(self, current_name: str) -> None:
        super().__init__()
        self._current_name = current_name

    def compose(self) -> ComposeResult:
        with Vertical(id="rename-dialog", classes="dialog"):
            yield Static("Rename Style", classes="dialog-title")
            yield Input(value=self._current_name, id="rename-input")
            with Horizontal(classes="dialog-buttons"):
                yield Button("Cancel", id="btn-cancel")
                yield Button("Rename", id="btn-rename", variant="primary")

    def on_mount(self) -> None:
        self.query_one("#rename-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.dismiss(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "btn-rename":
            self.dismiss(self.query_one("#rename-input", Input).value)
        else:
            self.action_cancel()

    def action_cancel(self) -> None:
        self.dismiss(None)
