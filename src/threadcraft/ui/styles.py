"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout - Sidebar + Conversation
   ============================================ */
Screen {
    layout: grid;
    grid-size: 2 2;
    grid-columns: 1fr 3fr;
    grid-rows: 1fr auto;
    background: $background;
}

/* ============================================
   Sidebar - Styles and Saved Threads
   ============================================ */
#sidebar {
    row-span: 2;
    height: 100%;
    padding: 0;
}

#style-list {
    height: 2fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

#saved-threads {
    height: 1fr;
    background: $panel;
    border: round $success 60%;
    border-title-color: $success;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    margin-top: 1;
    scrollbar-gutter: stable;
}

/* ============================================
   Style Cards
   ============================================ */
StyleCard {
    height: auto;
    margin: 0 0 1 0;
    padding: 0 1;
    border: round $border;
    background: $surface;

    &:hover {
        border: round $primary 60%;
    }

    &.-active {
        border: round $primary;
        background: $primary 10%;

        & .style-name {
            color: $primary;
        }
    }

    & .style-name {
        text-style: bold;
    }

    & .style-description {
        color: $text-muted;
    }

    & Button {
        min-width: 10;
        height: 1;
        border: none;
        margin: 0;
    }
}

#add-style-btn {
    width: 100%;
    margin-bottom: 1;
}

/* ============================================
   Saved Thread Entries
   ============================================ */
.saved-thread {
    height: auto;
    margin: 0 0 1 0;
    padding: 0 1;
    border-left: tall $success;

    & .saved-header {
        color: $success;
        text-style: bold;
    }

    & Button {
        min-width: 3;
        height: 1;
        border: none;
    }
}

/* ============================================
   Conversation Area
   ============================================ */
#main-panel {
    height: 100%;
}

#chat-history {
    height: 1fr;
    background: $panel;
    border: round $secondary 60%;
    border-title-color: $secondary;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus {
        border: round $secondary;
    }

    &.generating {
        border: round $warning;
        border-title-color: $warning;
    }
}

#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
    margin-top: 1;
}

/* ============================================
   Bottom Bar - Status + Input
   ============================================ */
#bottom-bar {
    height: auto;
    padding: 0 1;
    background: $panel;
    border-top: solid $border;
}

#status {
    height: 1;
    padding: 0 1;
    color: $text-muted;
}

ChatInputBar {
    height: 6;
    border: round $primary 60%;
    background: $panel;

    &:focus-within {
        border: round $primary;
    }
}

#chat-input {
    width: 1fr;
    height: 100%;
    border: none;
    padding: 0 1;
    background: transparent;
}

#input-buttons {
    width: 12;
    height: 100%;

    & Button {
        width: 100%;
        height: 1fr;
        min-width: 10;
        margin: 0;
    }
}

/* ============================================
   Chat Bubbles
   ============================================ */
.chat-message {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
    padding: 0 2;
    background: transparent;
}

.user-message {
    border-left: tall $success;
    background: $success 8%;

    & .message-header {
        color: $success;
        text-style: bold;
    }
}

.model-message {
    border-left: tall $secondary;
    background: $secondary 8%;

    & .message-header {
        color: $secondary;
        text-style: bold;
    }

    &:hover {
        background: $secondary 12%;
    }
}

.message-content {
    color: $foreground;
}

.message-actions {
    height: 1;
    margin-top: 1;

    & Button {
        min-width: 8;
        height: 1;
        border: none;
        margin: 0 1 0 0;
    }
}

.pending-message {
    color: $warning;
    text-style: italic;
    padding: 0 2;
}

.empty-hint {
    color: $text-muted;
    padding: 1 2;
}
"""
