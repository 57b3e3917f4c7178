from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from typing import List, Optional

from .core.domain import Author, Comment, Post


# --- Wire Schemas (camelCase JSON served by the remote API) ---
class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class AttachmentSchema(WireModel):
    url: str
    description: Optional[str] = None
    type: str = "IMAGE"


class PostSchema(WireModel):
    id: int
    author_id: int = Field(alias="authorId")
    content: str = ""
    published: int = 0
    liked_by_me: bool = Field(default=False, alias="likedByMe")
    likes: int = 0
    attachment: Optional[AttachmentSchema] = None


class CommentSchema(WireModel):
    id: int
    post_id: int = Field(alias="postId")
    author_id: int = Field(alias="authorId")
    content: str = ""
    published: int = 0
    liked_by_me: bool = Field(default=False, alias="likedByMe")
    likes: int = 0


class AuthorSchema(WireModel):
    id: int
    name: str
    avatar: str = ""


_posts_adapter = TypeAdapter(List[PostSchema])
_comments_adapter = TypeAdapter(List[CommentSchema])


# --- Decoders: raw body -> domain values. Raise ValueError on shape mismatch ---
def decode_posts(body: bytes) -> List[Post]:
    return [Post.from_schema(s) for s in _posts_adapter.validate_json(body)]


def decode_comments(body: bytes) -> List[Comment]:
    return [Comment.from_schema(s) for s in _comments_adapter.validate_json(body)]


def decode_author(body: bytes) -> Author:
    return Author.from_schema(AuthorSchema.model_validate_json(body))
