"""Shared pytest fixtures and configuration."""

import pytest

from taskboard.board import BoardData, Status, Ticket, User


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def users() -> tuple[User, ...]:
    """Three users, in supply order."""
    return (
        User(id="usr-1", name="Anoop Sharma"),
        User(id="usr-2", name="Yogesh", available=False),
        User(id="usr-3", name="Shankar Kumar"),
    )


@pytest.fixture
def tickets() -> tuple[Ticket, ...]:
    """A mixed set of tickets, including out-of-domain ones."""
    return (
        Ticket(
            id="CAM-1",
            title="Update user profile page UI",
            tags=("Feature request",),
            status=Status.TODO,
            priority=4,
            assignee_id="usr-1",
        ),
        Ticket(
            id="CAM-2",
            title="Add multi-language support",
            status=Status.IN_PROGRESS,
            priority=3,
            assignee_id="usr-2",
        ),
        Ticket(
            id="CAM-3",
            title="optimize database queries",
            status=Status.TODO,
            priority=1,
            assignee_id="usr-1",
        ),
        Ticket(
            id="CAM-4",
            title="Implement email notification system",
            status=Status.BACKLOG,
            priority=7,
            assignee_id="usr-unknown",
        ),
        Ticket(
            id="CAM-5",
            title="Enhance search functionality",
            status=Status.DONE,
            priority=0,
            assignee_id="usr-3",
        ),
    )


@pytest.fixture
def board_data(tickets: tuple[Ticket, ...], users: tuple[User, ...]) -> BoardData:
    """Board snapshot of the shared tickets and users."""
    return BoardData(tickets=tickets, users=users)


@pytest.fixture
def board_document() -> dict:
    """Board document in the data source's wire format."""
    return {
        "tickets": [
            {
                "id": "CAM-1",
                "title": "Update user profile page UI",
                "tag": ["Feature request"],
                "userId": "usr-1",
                "status": "Todo",
                "priority": 4,
            },
            {
                "id": "CAM-2",
                "title": "Add multi-language support",
                "tag": ["Feature Request"],
                "userId": "usr-2",
                "status": "In progress",
                "priority": 3,
            },
        ],
        "users": [
            {"id": "usr-1", "name": "Anoop Sharma", "available": False},
            {"id": "usr-2", "name": "Yogesh", "available": True},
        ],
    }
