"""Pydantic schemas for bookmark endpoints."""
from pydantic import BaseModel, Field

from models.bookmark import Bookmark
from services.sanitizer import Sanitizer, sanitize_html


class BookmarkCreate(BaseModel):
    """
    Normalized bookmark ready for persistence.

    Built by ``schemas.validators.validate_bookmark`` rather than parsed straight
    from the request, so the API can report the first failing field with its
    own error messages.
    """

    title: str = Field(min_length=1)
    url: str
    description: str = ""
    rating: int = Field(ge=0, le=5)


class BookmarkResponse(BaseModel):
    """Schema for bookmark responses. Text fields are already HTML-sanitized."""

    id: int
    title: str
    url: str
    description: str
    rating: int


class ErrorDetail(BaseModel):
    """Machine-readable code plus human-readable message."""

    code: str
    message: str


class ErrorResponse(BaseModel):
    """Body of 400 and 500 responses."""

    error: ErrorDetail


class NotFoundResponse(BaseModel):
    """Body of 404 responses."""

    message: str


def serialize_bookmark(
    bookmark: Bookmark,
    sanitize: Sanitizer = sanitize_html,
) -> BookmarkResponse:
    """Build the outgoing representation of a stored bookmark."""
    return BookmarkResponse(
        id=bookmark.id,
        title=sanitize(bookmark.title),
        url=sanitize(bookmark.url),
        description=sanitize(bookmark.description or ""),
        rating=bookmark.rating,
    )
