"""Data models for the board engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Status(StrEnum):
    """Ticket status. Declaration order is the status column order."""

    BACKLOG = "Backlog"
    TODO = "Todo"
    IN_PROGRESS = "In progress"
    DONE = "Done"
    CANCELLED = "Cancelled"


# Priority group labels, indexed by the raw ticket priority
PRIORITY_LABELS: tuple[str, ...] = ("No priority", "Urgent", "High", "Medium", "Low")


class GroupingMode(StrEnum):
    """Dimension used to partition tickets into groups."""

    STATUS = "status"
    ASSIGNEE = "assignee"
    PRIORITY = "priority"

    @classmethod
    def parse(cls, value: str) -> GroupingMode:
        """Parse a grouping mode, accepting the legacy 'user' spelling.

        Raises:
            ValueError: If the value names no grouping mode.
        """
        if value == "user":
            return cls.ASSIGNEE
        return cls(value)


class SortingMode(StrEnum):
    """Ordering applied within each group."""

    NONE = "none"
    PRIORITY = "priority"
    TITLE = "title"


@dataclass(frozen=True)
class Ticket:
    """A card on the board."""

    id: str
    title: str
    status: Status
    priority: int  # raw value; outside 0-4 is kept and dropped by priority grouping
    tags: tuple[str, ...] = ()
    assignee_id: str | None = None


@dataclass(frozen=True)
class User:
    """A person tickets can be assigned to."""

    id: str
    name: str
    available: bool = True


@dataclass(frozen=True)
class BoardData:
    """Immutable ticket/user snapshot for one rendering cycle."""

    tickets: tuple[Ticket, ...] = ()
    users: tuple[User, ...] = ()

    @classmethod
    def empty(cls) -> BoardData:
        """Snapshot with no tickets and no users."""
        return cls()


@dataclass(frozen=True)
class DragEvent:
    """A completed drag gesture.

    Attributes:
        source_group: Label of the group the card was picked up from.
        source_index: Index of the card within the source group.
        destination_group: Label of the drop target, or None if the drop was invalid.
        destination_index: Index the card was dropped at.
    """

    source_group: str
    source_index: int
    destination_group: str | None
    destination_index: int = 0
