"""Board state and the transitions that produce new states."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from taskboard.board.exceptions import InvalidMoveError, UnknownGroupError
from taskboard.board.grouping import group
from taskboard.board.models import BoardData, GroupingMode, SortingMode
from taskboard.board.sorting import sort_groups

if TYPE_CHECKING:
    from collections.abc import Mapping

    from taskboard.board.models import DragEvent, Ticket

logger = logging.getLogger(__name__)

_UNCHANGED: Any = object()


def _freeze(groups: Mapping[str, Any]) -> Mapping[str, tuple[Ticket, ...]]:
    return MappingProxyType({label: tuple(tickets) for label, tickets in groups.items()})


@dataclass(frozen=True)
class BoardState:
    """The grouped and ordered tickets currently displayed.

    Attributes:
        data: Ticket/user snapshot the groups were built from.
        grouping: Active grouping mode.
        sorting: Active sorting mode, or None when unset.
        groups: Read-only ordered mapping of group label to tickets.
    """

    data: BoardData = field(default_factory=BoardData.empty)
    grouping: GroupingMode = GroupingMode.STATUS
    sorting: SortingMode | None = None
    groups: Mapping[str, tuple[Ticket, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def labels(self) -> list[str]:
        """Group labels in display order."""
        return list(self.groups)

    @property
    def ticket_count(self) -> int:
        """Number of tickets placed across all groups."""
        return sum(len(tickets) for tickets in self.groups.values())

    def ticket_ids(self, label: str) -> list[str]:
        """Get the ids of a group's tickets, in order.

        Raises:
            UnknownGroupError: If the label is not on the board.
        """
        if label not in self.groups:
            raise UnknownGroupError(f"Group '{label}' not found")
        return [ticket.id for ticket in self.groups[label]]

    def find(self, ticket_id: str) -> tuple[str, int] | None:
        """Locate a ticket by id.

        Returns:
            (label, index) of the ticket, or None if it is not placed.
        """
        for label, tickets in self.groups.items():
            for index, ticket in enumerate(tickets):
                if ticket.id == ticket_id:
                    return label, index
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialize the board for JSON output."""
        return {
            "grouping": self.grouping.value,
            "sorting": self.sorting.value if self.sorting is not None else None,
            "groups": [
                {
                    "label": label,
                    "tickets": [
                        {
                            "id": t.id,
                            "title": t.title,
                            "tags": list(t.tags),
                            "status": t.status.value,
                            "priority": t.priority,
                            "assignee_id": t.assignee_id,
                        }
                        for t in tickets
                    ],
                }
                for label, tickets in self.groups.items()
            ],
        }


def build_board(
    data: BoardData,
    grouping: GroupingMode = GroupingMode.STATUS,
    sorting: SortingMode | None = None,
) -> BoardState:
    """Group the snapshot, then sort every group."""
    groups = group(data.tickets, data.users, grouping)
    state = BoardState(
        data=data,
        grouping=grouping,
        sorting=sorting,
        groups=_freeze(sort_groups(groups, sorting)),
    )
    logger.debug(
        "Built board: grouping=%s sorting=%s groups=%d tickets=%d",
        grouping,
        sorting,
        len(state.groups),
        state.ticket_count,
    )
    return state


def rebuild(
    state: BoardState,
    *,
    data: BoardData = _UNCHANGED,
    grouping: GroupingMode = _UNCHANGED,
    sorting: SortingMode | None = _UNCHANGED,
) -> BoardState:
    """Rebuild the board from scratch with some inputs replaced.

    Any manual order left by reorder() is discarded and the sort order
    is reimposed.
    """
    return build_board(
        state.data if data is _UNCHANGED else data,
        state.grouping if grouping is _UNCHANGED else grouping,
        state.sorting if sorting is _UNCHANGED else sorting,
    )


def reorder(state: BoardState, event: DragEvent) -> BoardState:
    """Apply a completed drag gesture to the board.

    The ticket at the source position is removed and inserted at the
    destination position. Within a single group this is one remove followed
    by one insert on the same sequence. A destination index past the end of
    the group appends.

    The moved ticket's status, priority and assignee are not rewritten to
    match its new group. The move lasts until the next rebuild, which puts
    the ticket back in the group its fields select.

    Args:
        state: Current board.
        event: Drag gesture. A None destination_group is a no-op.

    Returns:
        The new board, or ``state`` itself when there is no destination.

    Raises:
        UnknownGroupError: If either group label is not on the board.
        InvalidMoveError: If the source index does not address a ticket.
    """
    if event.destination_group is None:
        return state

    for label in (event.source_group, event.destination_group):
        if label not in state.groups:
            raise UnknownGroupError(f"Group '{label}' not found")

    source = list(state.groups[event.source_group])
    if not 0 <= event.source_index < len(source):
        raise InvalidMoveError(
            f"No ticket at index {event.source_index} in group '{event.source_group}'"
        )
    if event.destination_index < 0:
        raise InvalidMoveError(f"Negative destination index {event.destination_index}")

    moved = source.pop(event.source_index)
    if event.destination_group == event.source_group:
        destination = source
    else:
        destination = list(state.groups[event.destination_group])
    destination.insert(event.destination_index, moved)

    groups = dict(state.groups)
    groups[event.source_group] = tuple(source)
    groups[event.destination_group] = tuple(destination)

    logger.debug(
        "Moved ticket %s from %s[%d] to %s[%d]",
        moved.id,
        event.source_group,
        event.source_index,
        event.destination_group,
        event.destination_index,
    )
    return replace(state, groups=MappingProxyType(groups))
