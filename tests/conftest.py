"""
Pytest configuration và shared fixtures
"""
import asyncio
import pytest
import pytest_asyncio
import sys
from pathlib import Path
from typing import Dict, List, Optional

from aiohttp import web
from aiohttp.test_utils import TestServer

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from aggregator.core.drivers.api_client import ApiClient

# Request paths seen by the fake API, in arrival order
HITS = web.AppKey("hits", list)


def build_fake_api(
    posts: List[dict],
    comments: Dict[int, List[dict]],
    authors: Dict[int, dict],
    statuses: Optional[Dict[str, int]] = None,
    delays: Optional[Dict[str, float]] = None,
    raw_bodies: Optional[Dict[str, bytes]] = None
) -> web.Application:
    """
    In-process stand-in for the remote API

    statuses/delays/raw_bodies are keyed by request path, e.g. "/authors/20".
    Every request path is appended to app[HITS].
    """
    statuses = statuses or {}
    delays = delays or {}
    raw_bodies = raw_bodies or {}

    async def dispatch(request: web.Request, payload):
        path = request.path
        request.app[HITS].append(path)
        if path in delays:
            await asyncio.sleep(delays[path])
        if path in statuses:
            return web.Response(status=statuses[path], text="boom")
        if path in raw_bodies:
            return web.Response(body=raw_bodies[path], content_type="application/json")
        if payload is None:
            return web.Response(status=404, text="not found")
        return web.json_response(payload)

    async def get_posts(request):
        return await dispatch(request, posts)

    async def get_comments(request):
        return await dispatch(request, comments.get(int(request.match_info["post_id"])))

    async def get_author(request):
        return await dispatch(request, authors.get(int(request.match_info["author_id"])))

    app = web.Application()
    app[HITS] = []
    app.router.add_get("/posts", get_posts)
    app.router.add_get("/posts/{post_id}/comments", get_comments)
    app.router.add_get("/authors/{author_id}", get_author)
    return app


@pytest_asyncio.fixture
async def fake_api():
    """Factory fixture: await fake_api(posts=..., comments=..., authors=...) -> TestServer"""
    servers = []

    async def start(
        posts: Optional[List[dict]] = None,
        comments: Optional[Dict[int, List[dict]]] = None,
        authors: Optional[Dict[int, dict]] = None,
        **kwargs
    ) -> TestServer:
        app = build_fake_api(posts or [], comments or {}, authors or {}, **kwargs)
        server = TestServer(app)
        await server.start_server()
        servers.append(server)
        return server

    yield start

    for server in servers:
        await server.close()


@pytest_asyncio.fixture
async def api_client_for():
    """Factory fixture: api_client_for(server, **kwargs) -> ApiClient, closed after the test"""
    clients = []

    def create(server: TestServer, **kwargs) -> ApiClient:
        client = ApiClient(str(server.make_url("")), **kwargs)
        clients.append(client)
        return client

    yield create

    for client in clients:
        await client.close()


@pytest.fixture
def hits_of():
    """hits_of(server) -> request paths the fake API has seen"""
    return lambda server: server.app[HITS]


@pytest.fixture
def sample_feed():
    """Two posts, three comments, four authors"""
    return {
        "posts": [
            {"id": 1, "authorId": 10, "content": "First post", "published": 1700000000, "likedByMe": False, "likes": 3},
            {
                "id": 2, "authorId": 11, "content": "Second post", "published": 1700000100, "likedByMe": True, "likes": 0,
                "attachment": {"url": "cat.jpg", "description": "A cat", "type": "IMAGE"}
            }
        ],
        "comments": {
            1: [
                {"id": 100, "postId": 1, "authorId": 20, "content": "Nice", "published": 1700000200, "likedByMe": False, "likes": 1},
                {"id": 101, "postId": 1, "authorId": 21, "content": "Agreed", "published": 1700000300, "likedByMe": False, "likes": 0}
            ],
            2: [
                {"id": 200, "postId": 2, "authorId": 10, "content": "Self reply", "published": 1700000400, "likedByMe": True, "likes": 2}
            ]
        },
        "authors": {
            10: {"id": 10, "name": "Alice", "avatar": "alice.png"},
            11: {"id": 11, "name": "Bob", "avatar": "bob.png"},
            20: {"id": 20, "name": "Carol", "avatar": "carol.png"},
            21: {"id": 21, "name": "Dave", "avatar": "dave.png"}
        }
    }
