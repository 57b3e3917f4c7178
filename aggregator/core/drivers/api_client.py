import aiohttp
import asyncio
import logging
from typing import Callable, List, Optional, TypeVar

from ..domain import Author, Comment, Post
from ..exceptions import (
    DecodeFailure,
    EmptyBodyFailure,
    FetchFailure,
    HttpStatusFailure,
    TransportFailure
)
from ...schemas import decode_author, decode_comments, decode_posts

logger = logging.getLogger(__name__)

T = TypeVar("T")

POSTS_PATH = "/posts"
COMMENTS_PATH = "/posts/{post_id}/comments"
AUTHOR_PATH = "/authors/{author_id}"


class ApiClient:
    """
    Async client for the posts/comments/authors JSON API.

    One shared aiohttp session is used by every concurrent request. The
    session is opened lazily on the first request, inside the running loop.
    """

    def __init__(
        self,
        base_url: str,
        connect_timeout: float = 30.0,
        max_connections: int = 100,
        log_bodies: bool = False,
        session: Optional[aiohttp.ClientSession] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.connect_timeout = connect_timeout
        self.max_connections = max_connections
        self.log_bodies = log_bodies
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> 'ApiClient':
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or (self._owns_session and self._session.closed):
            self._session = aiohttp.ClientSession(
                # Connect timeout only, no per-request deadline
                timeout=aiohttp.ClientTimeout(total=None, sock_connect=self.connect_timeout),
                connector=aiohttp.TCPConnector(limit=self.max_connections),
                headers={"Accept": "application/json"}
            )
            self._owns_session = True
        return self._session

    async def close(self):
        """Close the session if this client opened it"""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            logger.debug("[API] Session closed")

    async def fetch(self, path: str, decoder: Callable[[bytes], T]) -> T:
        """
        GET base_url + path and decode the body.

        Args:
            path: Resource path, e.g. "/posts/1/comments"
            decoder: Turns the raw body into a typed value, raises ValueError on mismatch

        Returns:
            The decoded value

        Raises:
            TransportFailure: No response (timeout, DNS, connection reset)
            HttpStatusFailure: Non-2xx status
            EmptyBodyFailure: 2xx without a body
            DecodeFailure: Body does not match the expected shape
        """
        url = f"{self.base_url}{path}"
        try:
            body = await self._get(url)
            if not body or not body.strip():
                raise EmptyBodyFailure(url)
            try:
                return decoder(body)
            except ValueError as e:
                raise DecodeFailure(url, e) from e
        except FetchFailure as failure:
            logger.warning(f"[API] {failure}")
            raise

    async def _get(self, url: str) -> bytes:
        session = self._get_session()
        try:
            # Response is released on every exit path, cancellation included
            async with session.get(url) as response:
                if not 200 <= response.status < 300:
                    raise HttpStatusFailure(url, response.status, response.reason or "")
                body = await response.read()
                logger.debug(f"[API] GET {url} -> {response.status} ({len(body)} bytes)")
                if self.log_bodies:
                    logger.debug(f"[API] {url} body: {body.decode('utf-8', errors='replace')}")
                return body
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportFailure(url, e) from e

    async def get_posts(self) -> List[Post]:
        return await self.fetch(POSTS_PATH, decode_posts)

    async def get_comments(self, post_id: int) -> List[Comment]:
        return await self.fetch(COMMENTS_PATH.format(post_id=post_id), decode_comments)

    async def get_author(self, author_id: int) -> Author:
        return await self.fetch(AUTHOR_PATH.format(author_id=author_id), decode_author)
