"""
Domain Models Package

Immutable value objects for the aggregated feed, independent of the
HTTP transport and of the wire format.
"""

from .author import Author

from .post import (
    Attachment,
    Post,
    Comment,
    CommentWithAuthor,
    PostWithComments
)

__all__ = [
    # Author
    "Author",

    # Post
    "Attachment",
    "Post",
    "Comment",
    "CommentWithAuthor",
    "PostWithComments"
]
