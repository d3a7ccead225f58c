"""Record models: documents, their authors, and search criteria"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC so they compare with store timestamps."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    """A named author, de-duplicated by name and shared between documents."""
    id: Optional[str] = None
    name: str


class Document(BaseModel):
    """A stored record; id and created are owned by the store."""
    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    author: Author
    created: Optional[datetime] = None      # stamped once, at first insertion

    @field_validator("created")
    @classmethod
    def created_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(value)


class SearchRequest(BaseModel):
    """Optional filter groups: AND across groups, OR within a group's list."""
    title_prefixes: Optional[list[str]] = None
    contains_contents: Optional[list[str]] = None
    author_ids: Optional[list[str]] = None
    created_from: Optional[datetime] = Field(default=None, description="Inclusive lower bound")
    created_to: Optional[datetime] = Field(default=None, description="Inclusive upper bound")

    @field_validator("created_from", "created_to")
    @classmethod
    def bounds_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(value)
