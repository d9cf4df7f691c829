"""Custom exceptions for the board data source."""


class DataSourceError(Exception):
    """The initial board document could not be retrieved or decoded."""
