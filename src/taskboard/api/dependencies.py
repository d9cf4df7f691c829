"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import Generator  # noqa: TC003
from typing import Annotated

from fastapi import Depends

from taskboard.board import BoardController
from taskboard.preferences import PreferenceStore

# Global PreferenceStore instance (initialized on app startup)
_preference_store: PreferenceStore | None = None


def init_preference_store(db_path: str = "taskboard.db") -> PreferenceStore:
    """Initialize the global PreferenceStore instance."""
    global _preference_store  # noqa: PLW0603
    _preference_store = PreferenceStore(db_path)
    return _preference_store


def close_preference_store() -> None:
    """Close the global PreferenceStore instance."""
    global _preference_store  # noqa: PLW0603
    if _preference_store is not None:
        _preference_store.close()
        _preference_store = None


# Global BoardController instance (initialized on app startup)
_controller: BoardController | None = None


def init_controller(controller: BoardController) -> None:
    """Initialize the global BoardController instance."""
    global _controller  # noqa: PLW0603
    _controller = controller


def close_controller() -> None:
    """Drop the global BoardController instance."""
    global _controller  # noqa: PLW0603
    _controller = None


def get_controller() -> Generator[BoardController, None, None]:
    """Dependency that provides the BoardController instance."""
    if _controller is None:
        raise RuntimeError("BoardController not initialized. Call init_controller() first.")
    yield _controller


# Type alias for dependency injection
ControllerDep = Annotated[BoardController, Depends(get_controller)]
