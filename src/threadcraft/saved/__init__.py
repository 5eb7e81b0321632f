"""Saved-output module for threadcraft.

Keeps user-curated responses independently of the live session.
"""

from .models import SavedThread
from .store import SavedOutputStore

__all__ = ["SavedOutputStore", "SavedThread"]
