"""Grouping engine - partitions tickets into ordered, labelled groups."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from taskboard.board.models import PRIORITY_LABELS, GroupingMode, Status

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from taskboard.board.models import Ticket, User

logger = logging.getLogger(__name__)


def group_labels(users: Iterable[User], mode: GroupingMode) -> list[str]:
    """Get the ordered label domain for a grouping mode.

    Args:
        users: Known users, in the order they were supplied.
        mode: Grouping mode.

    Returns:
        Status names, distinct user names, or priority tier names.
    """
    if mode == GroupingMode.STATUS:
        return [status.value for status in Status]
    if mode == GroupingMode.ASSIGNEE:
        return list(dict.fromkeys(user.name for user in users))
    return list(PRIORITY_LABELS)


def _label_for(
    ticket: Ticket, mode: GroupingMode, user_names: dict[str, str]
) -> str | None:
    if mode == GroupingMode.STATUS:
        return str(ticket.status)
    if mode == GroupingMode.ASSIGNEE:
        if ticket.assignee_id is None:
            return None
        return user_names.get(ticket.assignee_id)
    if 0 <= ticket.priority < len(PRIORITY_LABELS):
        return PRIORITY_LABELS[ticket.priority]
    return None


def group(
    tickets: Sequence[Ticket], users: Sequence[User], mode: GroupingMode
) -> dict[str, list[Ticket]]:
    """Partition tickets into groups under a grouping mode.

    Every label of the mode's domain is present, even when empty. Tickets keep
    their input order within a group. Tickets that fall outside the domain
    (unknown assignee, priority outside 0-4) are dropped from every group.

    Args:
        tickets: Tickets to partition.
        users: Known users; drive the label domain for assignee grouping.
        mode: Grouping mode.

    Returns:
        Ordered mapping of group label to tickets.
    """
    groups: dict[str, list[Ticket]] = {label: [] for label in group_labels(users, mode)}
    user_names = {user.id: user.name for user in users}

    dropped = 0
    for ticket in tickets:
        label = _label_for(ticket, mode, user_names)
        if label is None or label not in groups:
            dropped += 1
            continue
        groups[label].append(ticket)

    if dropped:
        logger.debug("Grouping by %s left out %d ticket(s)", mode, dropped)
    return groups
