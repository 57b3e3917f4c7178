"""
Post Service - Orchestrates one aggregation run
Implements: Single Responsibility Principle (SRP)
"""
from typing import List
from ..domain import Post, PostWithComments
from ..drivers.api_client import ApiClient
from ..exceptions import FetchFailure
from ..task_scope import gather_or_cancel
from .author_service import AuthorService
from .comment_service import CommentService
import logging
import time

logger = logging.getLogger(__name__)


class PostService:
    """Service building PostWithComments for every post"""

    def __init__(
        self,
        api_client: ApiClient,
        comment_service: CommentService,
        author_service: AuthorService
    ):
        self.api_client = api_client
        self.comment_service = comment_service
        self.author_service = author_service

    async def resolve_all(self) -> List[PostWithComments]:
        """
        Resolve every post with its comments, comment authors and post author

        Two nested levels of fan-out share one cancellation tree:
        - Level 1: one task per post
        - Level 2: per post, comments (itself a fan-out over comments) and post author

        Returns:
            PostWithComments in post listing order

        Raises:
            FetchFailure: The first failure observed, at any depth. Nothing partial is returned.
        """
        started = time.monotonic()
        logger.info("[RUN] Starting aggregation")

        try:
            posts = await self.api_client.get_posts()
            logger.info(f"[RUN] Fetched {len(posts)} posts")

            results = await gather_or_cancel(
                (self._resolve_post(post) for post in posts),
                name="posts"
            )
        except FetchFailure as e:
            logger.warning(f"[RUN] Aggregation failed after {time.monotonic() - started:.2f}s: {e}")
            raise

        comment_count = sum(len(r.comments_with_author) for r in results)
        logger.info(
            f"[RUN] Resolved {len(results)} posts, {comment_count} comments "
            f"in {time.monotonic() - started:.2f}s"
        )
        return results

    async def _resolve_post(self, post: Post) -> PostWithComments:
        comments_with_author, author = await gather_or_cancel(
            [
                self.comment_service.resolve_comments(post.id),
                self.author_service.resolve_author(post.author_id)
            ],
            name=f"post-{post.id}"
        )
        return PostWithComments(
            post=post,
            comments_with_author=tuple(comments_with_author),
            author=author
        )
