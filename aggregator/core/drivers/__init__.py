"""
Drivers Package

HTTP access to the remote posts/comments/authors API.

Usage:
    from aggregator.core.drivers import ApiClient

    async with ApiClient("http://127.0.0.1:9999/api/slow") as client:
        posts = await client.get_posts()
"""

from .api_client import ApiClient

__all__ = [
    'ApiClient',
]
