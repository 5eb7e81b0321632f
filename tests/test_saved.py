"""Unit tests for the saved-output module."""
from threadcraft.saved import SavedOutputStore, SavedThread


class TestSavedOutputStore:
    """Tests for SavedOutputStore."""

    def test_save_returns_record(self, saved):
        thread = saved.save("a thread", "NATURAL")

        assert isinstance(thread, SavedThread)
        assert thread.content == "a thread"
        assert thread.style == "NATURAL"
        assert thread.id

    def test_save_prepends(self, saved):
        """Saving A then B yields [B, A]."""
        a = saved.save("A", "NATURAL")
        b = saved.save("B", "PROFESSIONAL")

        assert saved.list() == [b, a]
        assert len(saved) == 2

    def test_remove_by_id(self, saved):
        a = saved.save("A", "NATURAL")
        b = saved.save("B", "NATURAL")

        saved.remove(a.id)

        assert saved.list() == [b]
        assert a.id not in {t.id for t in saved}

    def test_remove_is_idempotent(self, saved):
        a = saved.save("A", "NATURAL")
        saved.remove(a.id)
        saved.remove(a.id)
        saved.remove("never-existed")
        assert len(saved) == 0

    def test_list_is_a_copy(self):
        store = SavedOutputStore()
        store.save("A", "NATURAL")
        snapshot = store.list()
        snapshot.clear()
        assert len(store) == 1

    def test_timestamp_serializes_to_iso(self, saved):
        thread = saved.save("A", "NATURAL")
        assert thread.model_dump()["timestamp"] == thread.timestamp.isoformat()
