"""Pydantic models for REST API."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from taskboard.board import BoardState, GroupingMode, SortingMode, Status

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    data: T | None = None
    error: str | None = None


# Board models


class TicketResponse(BaseModel):
    """Response model for a ticket."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    tags: list[str]
    status: Status
    priority: int
    assignee_id: str | None


class GroupResponse(BaseModel):
    """Response model for one board column."""

    label: str
    tickets: list[TicketResponse]


class BoardResponse(BaseModel):
    """Response model for the whole board."""

    grouping: GroupingMode
    sorting: SortingMode | None
    groups: list[GroupResponse]


def board_to_response(state: BoardState) -> BoardResponse:
    """Convert a BoardState to BoardResponse."""
    return BoardResponse.model_validate(state.to_dict())


class UserResponse(BaseModel):
    """Response model for a user."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    available: bool


# Request models


class GroupingUpdate(BaseModel):
    """Request model for changing the grouping mode."""

    mode: GroupingMode


class SortingUpdate(BaseModel):
    """Request model for changing the sorting mode. Null clears it."""

    mode: SortingMode | None = None


class MoveRequest(BaseModel):
    """Request model for a completed drag gesture."""

    source_group: str = Field(..., min_length=1)
    source_index: int = Field(..., ge=0)
    destination_group: str | None = None
    destination_index: int = Field(default=0, ge=0)
