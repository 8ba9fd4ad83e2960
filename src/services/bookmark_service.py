"""Service layer for bookmark persistence."""
import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.bookmark import Bookmark
from schemas.bookmark import BookmarkCreate

logger = logging.getLogger(__name__)


class BookmarkService:
    """
    Bookmark reads and writes against a single database session.

    The session is injected per request; the service never commits. The caller
    (session generator) commits once at request end and rolls back on error.
    Database errors propagate unchanged as ``SQLAlchemyError``.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_bookmarks(self) -> list[Bookmark]:
        """Get every bookmark in the table's default order."""
        result = await self.db.execute(select(Bookmark))
        return list(result.scalars().all())

    async def get_bookmark(self, bookmark_id: int) -> Bookmark | None:
        """Get a bookmark by ID. Returns None if it doesn't exist."""
        result = await self.db.execute(
            select(Bookmark).where(Bookmark.id == bookmark_id),
        )
        return result.scalar_one_or_none()

    async def create_bookmark(self, data: BookmarkCreate) -> Bookmark:
        """Insert a bookmark and return it with its database-assigned ID."""
        bookmark = Bookmark(
            title=data.title,
            url=data.url,
            description=data.description,
            rating=data.rating,
        )
        self.db.add(bookmark)
        await self.db.flush()
        await self.db.refresh(bookmark)
        logger.info("Created bookmark %s", bookmark.id)
        return bookmark

    async def delete_bookmark(self, bookmark_id: int) -> int:
        """
        Delete a bookmark by ID.

        Returns:
            Number of rows removed: 1 if it existed, 0 otherwise. Deleting an
            already deleted ID is not an error.
        """
        result = await self.db.execute(
            delete(Bookmark).where(Bookmark.id == bookmark_id),
        )
        deleted = result.rowcount
        if deleted:
            logger.info("Deleted bookmark %s", bookmark_id)
        return deleted
