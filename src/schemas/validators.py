"""
Validation of raw bookmark request bodies.

Checks run in a fixed order and the first failure wins:

1. presence of ``title``, ``url`` and ``rating`` (in that order)
2. ``rating`` is an integer in [0, 5]
3. text fields are strings
4. ``url`` starts with ``http://`` or ``https://``
"""
import logging
from collections.abc import Mapping
from typing import Any

from schemas.bookmark import BookmarkCreate
from services.exceptions import (
    InvalidFieldError,
    InvalidRatingError,
    InvalidUrlError,
    MissingFieldError,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "url", "rating")
ALLOWED_URL_SCHEMES = ("http://", "https://")
MIN_RATING = 0
MAX_RATING = 5


def _is_missing(field: str, value: Any) -> bool:
    if value is None:
        return True
    # A whitespace-only title is as good as no title
    return field == "title" and isinstance(value, str) and not value.strip()


def _require_string(field: str, value: Any) -> None:
    if not isinstance(value, str):
        logger.warning("Rejected bookmark: '%s' is not a string (%r)", field, value)
        raise InvalidFieldError(field)


def normalize_rating(value: Any) -> int | None:
    """
    Return ``value`` as an int if it is an integral JSON number, else None.

    Booleans are rejected even though ``bool`` subclasses ``int``. Floats with
    an integral value (``5.0``) are accepted since JSON doesn't distinguish them.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def validate_bookmark(payload: Mapping[str, Any]) -> BookmarkCreate:
    """
    Validate a raw bookmark body and return it normalized for persistence.

    Args:
        payload: Decoded JSON object from the request body.

    Returns:
        BookmarkCreate with ``description`` defaulted to an empty string.

    Raises:
        MissingFieldError: A required field is absent or null.
        InvalidFieldError: ``title``, ``url`` or ``description`` isn't a string.
        InvalidRatingError: ``rating`` isn't an integer between 0 and 5.
        InvalidUrlError: ``url`` doesn't begin with http:// or https://.
    """
    for field in REQUIRED_FIELDS:
        if _is_missing(field, payload.get(field)):
            logger.info("Rejected bookmark: missing '%s'", field)
            raise MissingFieldError(field)

    description = payload.get("description")
    if description is None:
        description = ""

    raw_rating = payload["rating"]
    rating = normalize_rating(raw_rating)
    if rating is None or not MIN_RATING <= rating <= MAX_RATING:
        logger.warning("Rating %r supplied is invalid", raw_rating)
        raise InvalidRatingError(raw_rating)

    for field, value in (("title", payload["title"]), ("description", description)):
        _require_string(field, value)

    url = payload["url"]
    _require_string("url", url)
    if not url.startswith(ALLOWED_URL_SCHEMES):
        logger.warning("URL %r supplied is invalid", url)
        raise InvalidUrlError(url)

    return BookmarkCreate(
        title=payload["title"],
        url=url,
        description=description,
        rating=rating,
    )
