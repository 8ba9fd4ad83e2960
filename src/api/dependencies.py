"""FastAPI dependencies for injection."""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import get_settings
from db.session import get_async_session
from services.bookmark_service import BookmarkService
from services.exceptions import BookmarkNotFoundError
from services.sanitizer import get_sanitizer

# Largest value of the INTEGER primary key column
MAX_BOOKMARK_ID = 2**31 - 1


def get_bookmark_service(
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkService:
    """Build a BookmarkService bound to the request's session."""
    return BookmarkService(db)


def get_bookmark_id(bookmark_id: int) -> int:
    """
    Resolve the bookmark ID path parameter.

    IDs the primary key column can never hold are reported as not found
    instead of reaching the database driver, which can't bind them.
    """
    if not 1 <= bookmark_id <= MAX_BOOKMARK_ID:
        raise BookmarkNotFoundError(bookmark_id)
    return bookmark_id


__all__ = [
    "get_async_session",
    "get_bookmark_id",
    "get_bookmark_service",
    "get_sanitizer",
    "get_settings",
]
