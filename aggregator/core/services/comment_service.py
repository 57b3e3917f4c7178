"""
Comment Service - Comments of one post, each paired with its author
"""
from typing import List
from ..domain import CommentWithAuthor
from ..drivers.api_client import ApiClient
from ..task_scope import gather_or_cancel
from .author_service import AuthorService
import logging

logger = logging.getLogger(__name__)


class CommentService:
    """Service resolving comments with their authors"""

    def __init__(
        self,
        api_client: ApiClient,
        author_service: AuthorService
    ):
        self.api_client = api_client
        self.author_service = author_service

    async def resolve_comments(self, post_id: int) -> List[CommentWithAuthor]:
        """
        Fetch the comments of a post and resolve every author concurrently

        Business rules:
        - Listing failure fails immediately, no author lookup is started
        - First failed author lookup fails the whole post, other lookups are cancelled
        - Result order = listing order
        """
        comments = await self.api_client.get_comments(post_id)
        logger.debug(f"[RUN] Post #{post_id}: {len(comments)} comments, resolving authors")

        authors = await gather_or_cancel(
            (self.author_service.resolve_author(comment.author_id) for comment in comments),
            name=f"post-{post_id}-comment-authors"
        )

        return [
            CommentWithAuthor(comment=comment, author=author)
            for comment, author in zip(comments, authors)
        ]
