"""Tests for shared/storage.py."""

import json

from fleetconsole.shared.storage import FileStorage, ISessionStorage, MemoryStorage


class TestMemoryStorage:
    def test_missing_key_reads_none(self):
        """Missing keys should read back as None."""
        assert MemoryStorage().get_item("token") is None

    def test_set_get_remove(self):
        """Values should be stored and removed by key."""
        storage = MemoryStorage()
        storage.set_item("token", "abc")
        assert storage.get_item("token") == "abc"
        assert "token" in storage

        storage.remove_item("token")
        assert storage.get_item("token") is None
        assert "token" not in storage

    def test_remove_missing_key_is_noop(self):
        """Removing an absent key should not raise."""
        MemoryStorage().remove_item("nothing")

    def test_initial_items_are_copied(self):
        """Initial data should not be aliased."""
        initial = {"token": "abc"}
        storage = MemoryStorage(initial)
        storage.set_item("token", "xyz")
        assert initial["token"] == "abc"

    def test_implements_interface(self):
        """MemoryStorage should satisfy ISessionStorage."""
        assert isinstance(MemoryStorage(), ISessionStorage)


class TestFileStorage:
    def test_missing_file_reads_none(self, tmp_path):
        """A session file that doesn't exist yet should read as empty."""
        storage = FileStorage(tmp_path / "session.json")
        assert storage.get_item("token") is None

    def test_persists_across_instances(self, tmp_path):
        """Values should survive a new storage instance on the same file."""
        path = tmp_path / "nested" / "session.json"
        FileStorage(path).set_item("token", "abc")

        assert FileStorage(path).get_item("token") == "abc"
        assert json.loads(path.read_text()) == {"token": "abc"}

    def test_remove_item(self, tmp_path):
        """Removed keys should disappear from the file."""
        path = tmp_path / "session.json"
        storage = FileStorage(path)
        storage.set_item("token", "abc")
        storage.set_item("user", "{}")
        storage.remove_item("token")

        assert json.loads(path.read_text()) == {"user": "{}"}

    def test_corrupt_file_reads_empty(self, tmp_path):
        """An unreadable file should be treated as an empty session."""
        path = tmp_path / "session.json"
        path.write_text("{not json")
        storage = FileStorage(path)

        assert storage.get_item("token") is None
        storage.set_item("token", "abc")
        assert storage.get_item("token") == "abc"

    def test_non_object_file_reads_empty(self, tmp_path):
        """A JSON file that isn't an object should read as empty."""
        path = tmp_path / "session.json"
        path.write_text("[1, 2, 3]")
        assert FileStorage(path).get_item("token") is None

    def test_leaves_no_temp_files(self, tmp_path):
        """Atomic writes should not leave temp files behind."""
        storage = FileStorage(tmp_path / "session.json")
        storage.set_item("token", "abc")
        storage.set_item("token", "def")

        assert [p.name for p in tmp_path.iterdir()] == ["session.json"]

    def test_implements_interface(self, tmp_path):
        """FileStorage should satisfy ISessionStorage."""
        assert isinstance(FileStorage(tmp_path / "s.json"), ISessionStorage)
