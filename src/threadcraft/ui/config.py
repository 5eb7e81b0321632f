"""UI configuration constants.

Centralizes magic numbers and configuration values for the UI module.
"""

import logging


class LogLevel:
    """Log level constants with numeric values for comparison.

    Values match the standard logging module, so records can be filtered
    against the panel threshold directly.
    """

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARN",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls._from_string.get(level_str.lower(), cls.DEBUG)

    @classmethod
    def clamp(cls, levelno: int) -> int:
        """Map any logging level number onto one of the four panel levels."""
        for level in (cls.ERROR, cls.WARNING, cls.INFO):
            if levelno >= level:
                return level
        return cls.DEBUG


# Saved-thread sidebar
SAVED_PREVIEW_LENGTH = 120  # Characters shown per saved thread

# Style cards
STYLE_DESCRIPTION_MAX = 80  # Characters before truncating card descriptions

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 500  # Characters before truncating log messages

# Input placeholders
GENERATE_PLACEHOLDER = (
    "Type your messy thoughts here... "
    "(e.g. 'i think remote work is good but lonely sometimes we need better tools')"
)
REFINE_PLACEHOLDER = "Not quite right? Ask for changes (e.g. 'Make it shorter', 'Add more emojis')"
