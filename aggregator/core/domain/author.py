"""
Author Domain Model

Value Objects:
- Author: A user who wrote a post or a comment
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Author:
    """
    Value Object cho Author
    Immutable once fetched
    """
    id: int
    name: str
    avatar: str = ""

    @staticmethod
    def from_schema(schema) -> 'Author':
        """Convert from the wire schema to the domain model"""
        return Author(
            id=schema.id,
            name=schema.name,
            avatar=schema.avatar
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "avatar": self.avatar
        }
