"""
Author Service - Resolves a single author by ID
"""
from ..domain import Author
from ..drivers.api_client import ApiClient


class AuthorService:
    """Thin wrapper over ApiClient.get_author, failures propagate unchanged"""

    def __init__(self, api_client: ApiClient):
        self.api_client = api_client

    async def resolve_author(self, author_id: int) -> Author:
        return await self.api_client.get_author(author_id)
