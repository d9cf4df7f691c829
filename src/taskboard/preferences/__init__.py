"""Preference Store - Persisted UI preferences."""

from taskboard.preferences.exceptions import PreferenceStoreError
from taskboard.preferences.store import PreferenceStore

__all__ = [
    "PreferenceStore",
    "PreferenceStoreError",
]
