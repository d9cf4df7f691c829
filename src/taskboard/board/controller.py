"""BoardController - Processes board events against the current state."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Protocol

from taskboard.board.models import BoardData, GroupingMode
from taskboard.board.state import build_board, rebuild, reorder

if TYPE_CHECKING:
    from taskboard.board.models import DragEvent, SortingMode
    from taskboard.board.state import BoardState

logger = logging.getLogger(__name__)

# Preference key for the grouping mode
GROUPING_KEY = "groupingOption"


class Preferences(Protocol):
    """Interface for the persisted preference store."""

    def get(self, key: str) -> str | None:
        """Read a preference value."""
        ...

    def set(self, key: str, value: str) -> None:
        """Write a preference value."""
        ...


class BoardController:
    """Holds the displayed board and applies events to it one at a time.

    The grouping mode is read from the preference store once, at
    construction, and written back on every change. The sorting mode always
    starts unset and is never persisted.
    """

    def __init__(
        self,
        preferences: Preferences | None = None,
        data: BoardData | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            preferences: Store for the grouping mode. None disables persistence.
            data: Initial ticket/user snapshot. Defaults to empty collections.
        """
        self._preferences = preferences
        self._lock = threading.Lock()
        grouping = self._load_grouping()
        self._state = build_board(data or BoardData.empty(), grouping)

    def _load_grouping(self) -> GroupingMode:
        if self._preferences is None:
            return GroupingMode.STATUS
        saved = self._preferences.get(GROUPING_KEY)
        if not saved:
            return GroupingMode.STATUS
        try:
            return GroupingMode.parse(saved)
        except ValueError:
            logger.warning("Ignoring unknown saved grouping option %r", saved)
            return GroupingMode.STATUS

    @property
    def state(self) -> BoardState:
        """The board currently displayed."""
        with self._lock:
            return self._state

    def load_data(self, data: BoardData) -> BoardState:
        """Replace the ticket/user snapshot and rebuild the board."""
        with self._lock:
            self._state = rebuild(self._state, data=data)
            logger.info(
                "Loaded %d ticket(s) and %d user(s)", len(data.tickets), len(data.users)
            )
            return self._state

    def set_grouping(self, mode: GroupingMode) -> BoardState:
        """Switch the grouping mode, rebuild, and persist the choice.

        The displayed board only changes once the choice has been saved, so
        a failed write leaves the previous grouping in place.
        """
        with self._lock:
            state = rebuild(self._state, grouping=mode)
            if self._preferences is not None:
                self._preferences.set(GROUPING_KEY, mode.value)
            self._state = state
            logger.info("Grouping set to %s", mode)
            return self._state

    def set_sorting(self, mode: SortingMode | None) -> BoardState:
        """Switch the sorting mode and rebuild. Not persisted."""
        with self._lock:
            self._state = rebuild(self._state, sorting=mode)
            logger.info("Sorting set to %s", mode)
            return self._state

    def move(self, event: DragEvent) -> BoardState:
        """Apply a completed drag gesture."""
        with self._lock:
            self._state = reorder(self._state, event)
            return self._state
