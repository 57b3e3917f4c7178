"""
Unit tests for AuthorService
"""
import pytest
from unittest.mock import Mock, AsyncMock

from aggregator.core.domain import Author
from aggregator.core.drivers.api_client import ApiClient
from aggregator.core.exceptions import HttpStatusFailure
from aggregator.core.services.author_service import AuthorService


@pytest.fixture
def mock_api_client():
    client = Mock(spec=ApiClient)
    client.get_author = AsyncMock(return_value=Author(10, "Alice"))
    return client


class TestAuthorService:

    @pytest.mark.asyncio
    async def test_delegates_to_api_client(self, mock_api_client):
        service = AuthorService(api_client=mock_api_client)

        assert await service.resolve_author(10) == Author(10, "Alice")
        mock_api_client.get_author.assert_awaited_once_with(10)

    @pytest.mark.asyncio
    async def test_failure_propagates_unchanged(self, mock_api_client):
        failure = HttpStatusFailure("http://api/authors/10", 500, "Internal Server Error")
        mock_api_client.get_author.side_effect = failure
        service = AuthorService(api_client=mock_api_client)

        with pytest.raises(HttpStatusFailure) as exc_info:
            await service.resolve_author(10)
        assert exc_info.value is failure
