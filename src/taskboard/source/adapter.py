"""BoardDataSource - Retrieves the initial tickets and users over HTTP."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from taskboard.board.models import BoardData
from taskboard.logging import clip
from taskboard.source.exceptions import DataSourceError
from taskboard.source.schemas import parse_board_document

logger = logging.getLogger(__name__)

DEFAULT_DATA_URL = "https://api.quicksell.co/v1/internal/frontend-assignment"


class BoardDataSource:
    """Client for the endpoint serving the ``{tickets, users}`` document."""

    def __init__(self, url: str = DEFAULT_DATA_URL, timeout: float = 30.0) -> None:
        """Initialize the data source.

        Args:
            url: Endpoint returning the board document
            timeout: Request timeout in seconds
        """
        self.url = url
        self.timeout = timeout
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def _get_document(self) -> dict[str, Any]:
        try:
            response = self.client.get(self.url)
        except httpx.HTTPError as e:
            raise DataSourceError(f"Request to {self.url} failed: {e}") from e

        if response.status_code != 200:
            raise DataSourceError(
                f"Request failed: {response.status_code} - {clip(response.text)}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise DataSourceError("Response is not valid JSON") from e

        if not isinstance(data, dict):
            raise DataSourceError(f"Expected a JSON object, got {type(data).__name__}")
        return data

    def fetch(self) -> BoardData:
        """Fetch and validate the board document.

        Returns:
            Snapshot of the tickets and users

        Raises:
            DataSourceError: If the request fails or the body is not a JSON object
        """
        logger.debug("Fetching board data from %s", self.url)
        data = parse_board_document(self._get_document())
        logger.info("Fetched %d ticket(s) and %d user(s)", len(data.tickets), len(data.users))
        return data


def load_board_data(source: BoardDataSource) -> BoardData:
    """Fetch the initial board data once, falling back to empty collections.

    Failures are logged and not retried.
    """
    try:
        return source.fetch()
    except DataSourceError as e:
        logger.error("Error fetching board data: %s", e)
        return BoardData.empty()
