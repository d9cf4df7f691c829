"""Board endpoints: read the board, change modes, apply drag moves."""

from fastapi import APIRouter

from taskboard.api.dependencies import ControllerDep
from taskboard.api.models import (
    APIResponse,
    BoardResponse,
    GroupingUpdate,
    MoveRequest,
    SortingUpdate,
    UserResponse,
    board_to_response,
)
from taskboard.board import DragEvent

router = APIRouter(tags=["board"])


@router.get("/board", response_model=APIResponse[BoardResponse])
def get_board(controller: ControllerDep) -> APIResponse[BoardResponse]:
    """Get the board as currently displayed."""
    return APIResponse(data=board_to_response(controller.state))


@router.put("/board/grouping", response_model=APIResponse[BoardResponse])
def set_grouping(
    request: GroupingUpdate, controller: ControllerDep
) -> APIResponse[BoardResponse]:
    """Regroup the board and remember the choice."""
    state = controller.set_grouping(request.mode)
    return APIResponse(data=board_to_response(state))


@router.put("/board/sorting", response_model=APIResponse[BoardResponse])
def set_sorting(request: SortingUpdate, controller: ControllerDep) -> APIResponse[BoardResponse]:
    """Re-sort every group, discarding manual order."""
    state = controller.set_sorting(request.mode)
    return APIResponse(data=board_to_response(state))


@router.post("/board/moves", response_model=APIResponse[BoardResponse])
def move_ticket(request: MoveRequest, controller: ControllerDep) -> APIResponse[BoardResponse]:
    """Apply a completed drag gesture.

    A null destination_group leaves the board unchanged.
    """
    state = controller.move(
        DragEvent(
            source_group=request.source_group,
            source_index=request.source_index,
            destination_group=request.destination_group,
            destination_index=request.destination_index,
        )
    )
    return APIResponse(data=board_to_response(state))


@router.get("/users", response_model=APIResponse[list[UserResponse]])
def list_users(controller: ControllerDep) -> APIResponse[list[UserResponse]]:
    """List the users known to the board."""
    users = controller.state.data.users
    return APIResponse(data=[UserResponse.model_validate(u) for u in users])
