"""Unit tests for PreferenceStore."""

from pathlib import Path
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from taskboard.preferences import PreferenceStore, PreferenceStoreError


@pytest.fixture
def store():
    """Create an in-memory PreferenceStore."""
    s = PreferenceStore(":memory:")
    yield s
    s.close()


@pytest.mark.unit
class TestGetSet:
    """Tests for get and set."""

    def test_get_missing_key(self, store: PreferenceStore) -> None:
        """Unset keys read as None."""
        assert store.get("groupingOption") is None

    def test_set_then_get(self, store: PreferenceStore) -> None:
        store.set("groupingOption", "priority")

        assert store.get("groupingOption") == "priority"

    def test_set_overwrites(self, store: PreferenceStore) -> None:
        store.set("groupingOption", "priority")
        store.set("groupingOption", "assignee")

        assert store.get("groupingOption") == "assignee"

    def test_keys_independent(self, store: PreferenceStore) -> None:
        store.set("a", "1")
        store.set("b", "2")

        assert store.get("a") == "1"
        assert store.get("b") == "2"


@pytest.mark.unit
class TestDelete:
    """Tests for delete."""

    def test_delete_existing(self, store: PreferenceStore) -> None:
        store.set("groupingOption", "status")

        assert store.delete("groupingOption") is True
        assert store.get("groupingOption") is None

    def test_delete_missing(self, store: PreferenceStore) -> None:
        assert store.delete("groupingOption") is False


@pytest.mark.unit
class TestFileBacked:
    """Tests for a store on disk."""

    def test_value_survives_reopen(self, tmp_path: Path) -> None:
        db_path = str(tmp_path / "nested" / "prefs.db")
        first = PreferenceStore(db_path)
        first.set("groupingOption", "priority")
        first.close()

        second = PreferenceStore(db_path)
        try:
            assert second.get("groupingOption") == "priority"
        finally:
            second.close()


@pytest.mark.unit
class TestErrors:
    """Database failures surface as PreferenceStoreError."""

    def test_read_failure_wrapped(self, store: PreferenceStore) -> None:
        error = OperationalError("SELECT", {}, Exception("disk I/O error"))
        with (
            patch("sqlalchemy.orm.Session.get", side_effect=error),
            pytest.raises(PreferenceStoreError, match="read"),
        ):
            store.get("groupingOption")

    def test_write_failure_wrapped(self, store: PreferenceStore) -> None:
        error = OperationalError("INSERT", {}, Exception("database is locked"))
        with (
            patch("sqlalchemy.orm.Session.commit", side_effect=error),
            pytest.raises(PreferenceStoreError, match="write"),
        ):
            store.set("groupingOption", "status")
