"""Bookmark model for storing bookmarks."""
from sqlalchemy import CheckConstraint, Text
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class Bookmark(Base):
    """
    Bookmark model - a URL with a title, description, and 0-5 rating.

    Rows are written once by the API and never updated. Values are stored
    exactly as submitted; HTML sanitization happens when responses are built.
    """

    __tablename__ = "bookmarks"
    __table_args__ = (
        CheckConstraint("rating >= 0 AND rating <= 5", name="ck_bookmarks_rating_range"),
        # IDs are never reused after a delete
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, server_default="")
    rating: Mapped[int] = mapped_column(nullable=False)

    def __repr__(self) -> str:
        return f"<Bookmark id={self.id} url={self.url!r}>"
