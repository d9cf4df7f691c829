"""Board Engine - Groups, sorts and reorders tickets on the board."""

from taskboard.board.controller import GROUPING_KEY, BoardController
from taskboard.board.exceptions import BoardError, InvalidMoveError, UnknownGroupError
from taskboard.board.grouping import group, group_labels
from taskboard.board.models import (
    PRIORITY_LABELS,
    BoardData,
    DragEvent,
    GroupingMode,
    SortingMode,
    Status,
    Ticket,
    User,
)
from taskboard.board.sorting import sort_groups, sort_tickets
from taskboard.board.state import BoardState, build_board, rebuild, reorder

__all__ = [
    "GROUPING_KEY",
    "PRIORITY_LABELS",
    "BoardController",
    "BoardData",
    "BoardError",
    "BoardState",
    "DragEvent",
    "GroupingMode",
    "InvalidMoveError",
    "SortingMode",
    "Status",
    "Ticket",
    "UnknownGroupError",
    "User",
    "build_board",
    "group",
    "group_labels",
    "rebuild",
    "reorder",
    "sort_groups",
    "sort_tickets",
]
