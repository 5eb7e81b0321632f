"""In-memory saved-output store.

Data is kept for the lifetime of the process only.
"""

from collections.abc import Iterator

from .models import SavedThread


class SavedOutputStore:
    """Collection of saved threads, most recent first."""

    def __init__(self) -> None:
        self._threads: list[SavedThread] = []

    def save(self, content: str, style_key: str) -> SavedThread:
        """Save content and return the new record."""
        thread = SavedThread(content=content, style=style_key)
        self._threads.insert(0, thread)
        return thread

    def remove(self, thread_id: str) -> None:
        """Remove a thread by id. Unknown ids are ignored."""
        self._threads = [t for t in self._threads if t.id != thread_id]

    def list(self) -> list[SavedThread]:
        return list(self._threads)

    def __len__(self) -> int:
        return len(self._threads)

    def __iter__(self) -> Iterator[SavedThread]:
        return iter(list(self._threads))
