"""Sorting engine - orders the tickets of one group."""

from __future__ import annotations

import unicodedata
from typing import TYPE_CHECKING

from taskboard.board.models import SortingMode

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from taskboard.board.models import Ticket


def collation_key(text: str) -> tuple[str, str, tuple[bool, ...]]:
    """Build a locale-independent collation key for a title.

    Compares base letters first, ignoring case and accents. Accents break
    ties next, and lowercase sorts before uppercase last.
    """
    decomposed = unicodedata.normalize("NFD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (
        base.casefold(),
        decomposed.casefold(),
        tuple(ch.isupper() for ch in decomposed),
    )


def sort_tickets(tickets: Iterable[Ticket], mode: SortingMode | None) -> list[Ticket]:
    """Order tickets under a sorting mode.

    Sorting is stable, so tickets that compare equal keep their relative
    order. The input is never mutated.

    Args:
        tickets: Tickets of one group.
        mode: Sorting mode. None behaves like SortingMode.NONE.

    Returns:
        A new list of the tickets.
    """
    if mode == SortingMode.PRIORITY:
        return sorted(tickets, key=lambda t: t.priority, reverse=True)
    if mode == SortingMode.TITLE:
        return sorted(tickets, key=lambda t: collation_key(t.title))
    return list(tickets)


def sort_groups(
    groups: Mapping[str, Iterable[Ticket]], mode: SortingMode | None
) -> dict[str, list[Ticket]]:
    """Sort every group independently, keeping the label order."""
    return {label: sort_tickets(tickets, mode) for label, tickets in groups.items()}
