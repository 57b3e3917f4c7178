"""
Post Domain Models

Value Objects:
- Attachment: Media attached to a post
- Post: Top-level item of the feed
- Comment: Item that belongs to a post

Composites (built only after every part has been resolved):
- CommentWithAuthor: Comment + its resolved author
- PostWithComments: Post + ordered comments with authors + the post author
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .author import Author


@dataclass(frozen=True)
class Attachment:
    url: str
    description: Optional[str] = None
    type: str = "IMAGE"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "description": self.description,
            "type": self.type
        }


@dataclass(frozen=True)
class Post:
    """
    Value Object cho Post
    Immutable once fetched
    """
    id: int
    author_id: int
    content: str = ""
    published: int = 0
    liked_by_me: bool = False
    likes: int = 0
    attachment: Optional[Attachment] = None

    @staticmethod
    def from_schema(schema) -> 'Post':
        """Convert from the wire schema to the domain model"""
        attachment = None
        if schema.attachment is not None:
            attachment = Attachment(
                url=schema.attachment.url,
                description=schema.attachment.description,
                type=schema.attachment.type
            )
        return Post(
            id=schema.id,
            author_id=schema.author_id,
            content=schema.content,
            published=schema.published,
            liked_by_me=schema.liked_by_me,
            likes=schema.likes,
            attachment=attachment
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "authorId": self.author_id,
            "content": self.content,
            "published": self.published,
            "likedByMe": self.liked_by_me,
            "likes": self.likes,
            "attachment": self.attachment.to_dict() if self.attachment else None
        }


@dataclass(frozen=True)
class Comment:
    """
    Value Object cho Comment
    Immutable once fetched
    """
    id: int
    post_id: int
    author_id: int
    content: str = ""
    published: int = 0
    liked_by_me: bool = False
    likes: int = 0

    @staticmethod
    def from_schema(schema) -> 'Comment':
        """Convert from the wire schema to the domain model"""
        return Comment(
            id=schema.id,
            post_id=schema.post_id,
            author_id=schema.author_id,
            content=schema.content,
            published=schema.published,
            liked_by_me=schema.liked_by_me,
            likes=schema.likes
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "postId": self.post_id,
            "authorId": self.author_id,
            "content": self.content,
            "published": self.published,
            "likedByMe": self.liked_by_me,
            "likes": self.likes
        }


@dataclass(frozen=True)
class CommentWithAuthor:
    comment: Comment
    author: Author

    def to_dict(self) -> Dict[str, Any]:
        return {
            "comment": self.comment.to_dict(),
            "author": self.author.to_dict()
        }


@dataclass(frozen=True)
class PostWithComments:
    """
    Composite cho one post

    comments_with_author keeps the order of the comment listing,
    not the order in which author lookups completed.
    """
    post: Post
    comments_with_author: Tuple[CommentWithAuthor, ...]
    author: Author

    def __post_init__(self):
        if not isinstance(self.comments_with_author, tuple):
            object.__setattr__(self, "comments_with_author", tuple(self.comments_with_author))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "post": self.post.to_dict(),
            "commentsWithAuthor": [c.to_dict() for c in self.comments_with_author],
            "author": self.author.to_dict()
        }

    def __str__(self) -> str:
        return (
            f"PostWithComments(post_id={self.post.id}, "
            f"comments={len(self.comments_with_author)}, author={self.author.name})"
        )
