"""REST API for the task board."""

from taskboard.api.app import create_app
from taskboard.api.models import (
    APIResponse,
    BoardResponse,
    GroupingUpdate,
    MoveRequest,
    SortingUpdate,
)

__all__ = [
    "APIResponse",
    "BoardResponse",
    "GroupingUpdate",
    "MoveRequest",
    "SortingUpdate",
    "create_app",
]
