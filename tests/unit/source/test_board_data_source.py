"""Unit tests for BoardDataSource."""

import logging
from unittest.mock import MagicMock

import httpx
import pytest

from taskboard.board import BoardData
from taskboard.source import BoardDataSource, DataSourceError, load_board_data


@pytest.fixture
def mock_client() -> MagicMock:
    """Create a mock HTTP client."""
    return MagicMock()


@pytest.fixture
def source(mock_client: MagicMock) -> BoardDataSource:
    """Create a BoardDataSource with mocked client."""
    source = BoardDataSource(url="https://example.test/board")
    source._client = mock_client
    return source


def _mock_response(body: object, status_code: int = 200) -> MagicMock:
    """Create a mock HTTP response."""
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    response.text = str(body)
    return response


@pytest.mark.unit
class TestFetch:
    """Tests for fetch."""

    def test_fetch_returns_board_data(
        self, source: BoardDataSource, mock_client: MagicMock, board_document: dict
    ) -> None:
        mock_client.get.return_value = _mock_response(board_document)

        data = source.fetch()

        mock_client.get.assert_called_once_with("https://example.test/board")
        assert isinstance(data, BoardData)
        assert len(data.tickets) == 2
        assert len(data.users) == 2

    def test_fetch_non_200(self, source: BoardDataSource, mock_client: MagicMock) -> None:
        mock_client.get.return_value = _mock_response({"message": "nope"}, status_code=503)

        with pytest.raises(DataSourceError, match="503"):
            source.fetch()

    def test_error_body_is_clipped(self, source: BoardDataSource, mock_client: MagicMock) -> None:
        response = _mock_response(None, status_code=502)
        response.text = "<html>" + "x" * 2000
        mock_client.get.return_value = response

        with pytest.raises(DataSourceError, match=r"more chars\]") as exc_info:
            source.fetch()

        assert len(str(exc_info.value)) < 600

    def test_fetch_invalid_json(self, source: BoardDataSource, mock_client: MagicMock) -> None:
        response = _mock_response(None)
        response.json.side_effect = ValueError("Expecting value")
        mock_client.get.return_value = response

        with pytest.raises(DataSourceError, match="not valid JSON"):
            source.fetch()

    def test_fetch_non_object(self, source: BoardDataSource, mock_client: MagicMock) -> None:
        mock_client.get.return_value = _mock_response([1, 2, 3])

        with pytest.raises(DataSourceError, match="JSON object"):
            source.fetch()

    def test_fetch_transport_error(
        self, source: BoardDataSource, mock_client: MagicMock
    ) -> None:
        mock_client.get.side_effect = httpx.ConnectError("connection refused")

        with pytest.raises(DataSourceError, match="failed"):
            source.fetch()


@pytest.mark.unit
class TestLoadBoardData:
    """Tests for the startup loading policy."""

    def test_returns_fetched_data(
        self, source: BoardDataSource, mock_client: MagicMock, board_document: dict
    ) -> None:
        mock_client.get.return_value = _mock_response(board_document)

        data = load_board_data(source)

        assert len(data.tickets) == 2

    def test_failure_gives_empty_data(
        self, source: BoardDataSource, mock_client: MagicMock
    ) -> None:
        """A failed fetch falls back to empty collections."""
        mock_client.get.side_effect = httpx.ReadTimeout("timed out")

        data = load_board_data(source)

        assert data == BoardData.empty()

    def test_failure_not_retried(self, source: BoardDataSource, mock_client: MagicMock) -> None:
        mock_client.get.side_effect = httpx.ConnectError("down")

        load_board_data(source)

        assert mock_client.get.call_count == 1

    def test_failure_logged_under_module_logger(
        self, source: BoardDataSource, mock_client: MagicMock, caplog: pytest.LogCaptureFixture
    ) -> None:
        mock_client.get.side_effect = httpx.ConnectError("down")

        with caplog.at_level(logging.ERROR, logger="taskboard"):
            load_board_data(source)

        assert [r.name for r in caplog.records] == ["taskboard.source.adapter"]
        assert "Error fetching board data" in caplog.text


@pytest.mark.unit
class TestClientLifecycle:
    """Tests for client creation and closing."""

    def test_client_created_lazily(self) -> None:
        source = BoardDataSource(url="https://example.test/board", timeout=5.0)
        assert source._client is None

        client = source.client

        assert isinstance(client, httpx.Client)
        assert source.client is client
        source.close()

    def test_close_releases_client(
        self, source: BoardDataSource, mock_client: MagicMock
    ) -> None:
        source.close()

        mock_client.close.assert_called_once()
        assert source._client is None
