"""Custom exceptions for the preference store."""


class PreferenceStoreError(Exception):
    """Base exception for preference store errors."""
