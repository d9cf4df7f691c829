"""PreferenceStore - key/value storage for UI preferences."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from taskboard.preferences.database import Database
from taskboard.preferences.exceptions import PreferenceStoreError
from taskboard.preferences.models import Preference

logger = logging.getLogger(__name__)


class PreferenceStore:
    """Persisted string preferences backed by SQLite."""

    def __init__(self, db_path: str = "taskboard.db") -> None:
        """Initialize the store, creating the database if needed.

        Args:
            db_path: Path to SQLite database file
        """
        self._db = Database(db_path)
        try:
            self._db.create_tables()
        except SQLAlchemyError as e:
            raise PreferenceStoreError(f"Cannot open preference store at '{db_path}'") from e

    def close(self) -> None:
        """Close the database connection."""
        self._db.close()

    def get(self, key: str) -> str | None:
        """Get a preference value.

        Args:
            key: Preference key

        Returns:
            The stored value, or None if the key is not set

        Raises:
            PreferenceStoreError: If the database cannot be read
        """
        session = self._db.get_session()
        try:
            preference = session.get(Preference, key)
            return preference.value if preference is not None else None
        except SQLAlchemyError as e:
            raise PreferenceStoreError(f"Failed to read preference '{key}'") from e
        finally:
            session.close()

    def set(self, key: str, value: str) -> None:
        """Create or overwrite a preference value.

        Raises:
            PreferenceStoreError: If the database cannot be written
        """
        session = self._db.get_session()
        try:
            preference = session.get(Preference, key)
            if preference is None:
                session.add(Preference(key=key, value=value))
            else:
                preference.value = value
            session.commit()
            logger.debug("Saved preference %s=%s", key, value)
        except SQLAlchemyError as e:
            session.rollback()
            raise PreferenceStoreError(f"Failed to write preference '{key}'") from e
        finally:
            session.close()

    def delete(self, key: str) -> bool:
        """Remove a preference.

        Returns:
            True if the key existed
        """
        session = self._db.get_session()
        try:
            preference = session.get(Preference, key)
            if preference is None:
                return False
            session.delete(preference)
            session.commit()
            return True
        except SQLAlchemyError as e:
            session.rollback()
            raise PreferenceStoreError(f"Failed to delete preference '{key}'") from e
        finally:
            session.close()
