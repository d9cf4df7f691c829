"""Custom exceptions for the board engine."""


class BoardError(Exception):
    """Base exception for board engine errors."""


class InvalidMoveError(BoardError):
    """Drag event does not fit the current board."""


class UnknownGroupError(InvalidMoveError):
    """Drag event names a group that is not on the board."""
