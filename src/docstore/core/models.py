"""Record types for stored documents and search requests

Records are frozen: a stored Document (and its Author) cannot be changed in
place, so a stored id never drifts from its key. Use model_copy(update=...) to
derive a modified record. Naive timestamps are read as UTC so that every
created/created_from/created_to value is comparable.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive timestamps; aware ones pass through unchanged."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    """Identity reference embedded in a Document; has no lifecycle of its own."""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    name: Optional[str] = None


class Document(BaseModel):
    """A stored record. id is assigned on save when absent and never changes afterwards."""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[Author] = None
    created: Optional[datetime] = None      # passed through untouched by the store

    @field_validator("created")
    @classmethod
    def created_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(value)


class SearchRequest(BaseModel):
    """Filter criteria; every field is optional and None disables that criterion."""
    model_config = ConfigDict(frozen=True)

    title_prefixes: Optional[list[str]] = None
    contains_contents: Optional[list[str]] = None
    author_ids: Optional[list[str]] = None
    created_from: Optional[datetime] = None     # date criterion needs both bounds
    created_to: Optional[datetime] = None

    @field_validator("created_from", "created_to")
    @classmethod
    def bounds_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(value)
