"""Board Data Source - Retrieves the initial ticket/user snapshot."""

from taskboard.source.adapter import DEFAULT_DATA_URL, BoardDataSource, load_board_data
from taskboard.source.exceptions import DataSourceError
from taskboard.source.schemas import TicketRecord, UserRecord, parse_board_document

__all__ = [
    "DEFAULT_DATA_URL",
    "BoardDataSource",
    "DataSourceError",
    "TicketRecord",
    "UserRecord",
    "load_board_data",
    "parse_board_document",
]
