"""Conversation session module for threadcraft.

Holds the live transcript and the controller that drives generation.
"""

from .controller import SessionController
from .models import GENERATION_ERROR_MESSAGE, Message, Role

__all__ = [
    "GENERATION_ERROR_MESSAGE",
    "Message",
    "Role",
    "SessionController",
]
