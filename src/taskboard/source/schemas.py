"""Wire schemas for the initial board document."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from taskboard.board.models import BoardData, Status, Ticket, User

logger = logging.getLogger(__name__)


class TicketRecord(BaseModel):
    """A ticket as delivered by the data source."""

    model_config = ConfigDict(extra="ignore")

    id: str
    title: str
    tags: list[str] = Field(default_factory=list, validation_alias=AliasChoices("tag", "tags"))
    status: Status
    priority: int = Field(strict=True)
    assignee_id: str | None = Field(
        default=None, validation_alias=AliasChoices("userId", "assigneeId", "assignee_id")
    )

    def to_ticket(self) -> Ticket:
        """Convert to the engine's Ticket model."""
        return Ticket(
            id=self.id,
            title=self.title,
            tags=tuple(self.tags),
            status=self.status,
            priority=self.priority,
            assignee_id=self.assignee_id,
        )


class UserRecord(BaseModel):
    """A user as delivered by the data source."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    available: bool = True

    def to_user(self) -> User:
        """Convert to the engine's User model."""
        return User(id=self.id, name=self.name, available=self.available)


def _records(document: dict[str, Any], key: str) -> list[Any]:
    value = document.get(key, [])
    if not isinstance(value, list):
        logger.warning("Ignoring '%s': expected a list, got %s", key, type(value).__name__)
        return []
    return value


def parse_board_document(document: dict[str, Any]) -> BoardData:
    """Validate a ``{tickets, users}`` document into a board snapshot.

    Malformed records are dropped one at a time and logged; they never
    invalidate the rest of the document.

    Args:
        document: Decoded JSON document.

    Returns:
        Snapshot of the valid tickets and users, in document order.
    """
    tickets: list[Ticket] = []
    for raw in _records(document, "tickets"):
        try:
            tickets.append(TicketRecord.model_validate(raw).to_ticket())
        except ValidationError as e:
            logger.warning(
                "Dropping malformed ticket %r: %d error(s)", _record_id(raw), e.error_count()
            )

    users: list[User] = []
    for raw in _records(document, "users"):
        try:
            users.append(UserRecord.model_validate(raw).to_user())
        except ValidationError as e:
            logger.warning(
                "Dropping malformed user %r: %d error(s)", _record_id(raw), e.error_count()
            )

    return BoardData(tickets=tuple(tickets), users=tuple(users))


def _record_id(raw: Any) -> Any:
    return raw.get("id") if isinstance(raw, dict) else None
