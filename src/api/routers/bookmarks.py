"""Bookmark CRUD endpoints."""
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Response

from api.dependencies import get_bookmark_id, get_bookmark_service, get_sanitizer
from schemas.bookmark import (
    BookmarkResponse,
    ErrorResponse,
    NotFoundResponse,
    serialize_bookmark,
)
from schemas.validators import validate_bookmark
from services.bookmark_service import BookmarkService
from services.exceptions import BookmarkNotFoundError
from services.sanitizer import Sanitizer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])

NOT_FOUND = {404: {"model": NotFoundResponse, "description": "Bookmark not found"}}


@router.get("", response_model=list[BookmarkResponse])
@router.get("/", response_model=list[BookmarkResponse], include_in_schema=False)
async def list_bookmarks(
    service: BookmarkService = Depends(get_bookmark_service),
    sanitize: Sanitizer = Depends(get_sanitizer),
) -> list[BookmarkResponse]:
    """List every bookmark."""
    bookmarks = await service.get_bookmarks()
    return [serialize_bookmark(b, sanitize) for b in bookmarks]


@router.post(
    "",
    response_model=BookmarkResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse, "description": "Invalid bookmark"}},
)
@router.post("/", response_model=BookmarkResponse, status_code=201, include_in_schema=False)
async def create_bookmark(
    response: Response,
    payload: dict[str, Any] = Body(...),
    service: BookmarkService = Depends(get_bookmark_service),
    sanitize: Sanitizer = Depends(get_sanitizer),
) -> BookmarkResponse:
    """
    Create a new bookmark.

    - **title**: required, non-empty
    - **url**: required, must begin with http:// or https://
    - **description**: optional, defaults to an empty string
    - **rating**: required integer from 0 to 5
    """
    data = validate_bookmark(payload)
    bookmark = await service.create_bookmark(data)
    response.headers["Location"] = f"{router.prefix}/{bookmark.id}"
    return serialize_bookmark(bookmark, sanitize)


@router.get("/{bookmark_id}", response_model=BookmarkResponse, responses=NOT_FOUND)
async def get_bookmark(
    bookmark_id: int = Depends(get_bookmark_id),
    service: BookmarkService = Depends(get_bookmark_service),
    sanitize: Sanitizer = Depends(get_sanitizer),
) -> BookmarkResponse:
    """Get a single bookmark by ID."""
    bookmark = await service.get_bookmark(bookmark_id)
    if bookmark is None:
        raise BookmarkNotFoundError(bookmark_id)
    return serialize_bookmark(bookmark, sanitize)


@router.delete("/{bookmark_id}", status_code=204, responses=NOT_FOUND)
async def delete_bookmark(
    bookmark_id: int = Depends(get_bookmark_id),
    service: BookmarkService = Depends(get_bookmark_service),
) -> Response:
    """Delete a bookmark. Deleting an ID that doesn't exist returns 404."""
    deleted = await service.delete_bookmark(bookmark_id)
    if not deleted:
        raise BookmarkNotFoundError(bookmark_id)
    return Response(status_code=204)


@router.patch("/{bookmark_id}", status_code=204, responses=NOT_FOUND)
async def update_bookmark(
    bookmark_id: int = Depends(get_bookmark_id),
    payload: Any = Body(default=None),  # noqa: ARG001
    service: BookmarkService = Depends(get_bookmark_service),
) -> Response:
    """
    Accept an update without applying it.

    Bookmarks are immutable once created. The endpoint exists so clients get
    404 for unknown IDs and 204 otherwise; the body is ignored.
    """
    bookmark = await service.get_bookmark(bookmark_id)
    if bookmark is None:
        raise BookmarkNotFoundError(bookmark_id)
    logger.warning("Ignoring update for bookmark %s: updates are not supported", bookmark_id)
    return Response(status_code=204)
