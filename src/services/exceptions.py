"""Shared exceptions for bookmark validation and lookup."""
import json
from typing import Any


class BookmarkValidationError(Exception):
    """
    Base exception for request body validation errors.

    Every subclass carries a machine-readable ``code`` and a human-readable
    ``message``; the API turns both into a 400 response body.
    """

    code = "invalid_bookmark"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingFieldError(BookmarkValidationError):
    """Raised when a required field is absent or null."""

    code = "missing_field"

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing '{field}' in request body")


class InvalidFieldError(BookmarkValidationError):
    """Raised when a text field holds a non-string value."""

    code = "invalid_field"

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"'{field}' must be a string")


class InvalidRatingError(BookmarkValidationError):
    """Raised when rating is not an integer between 0 and 5."""

    code = "invalid_rating"

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"Rating must be a number between 0 and 5, received {format_received(value)}",
        )


class InvalidUrlError(BookmarkValidationError):
    """Raised when the URL doesn't use the http or https scheme."""

    code = "invalid_url"

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__("URL must begin with http(s)://")


class BookmarkNotFoundError(Exception):
    """Raised by the API layer when no bookmark has the requested id."""

    def __init__(self, bookmark_id: int) -> None:
        self.bookmark_id = bookmark_id
        super().__init__(f"bookmark id {bookmark_id} does not exist")


def format_received(value: Any) -> str:
    """Render a received JSON value the way a client wrote it (e.g. true, not True)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, str | int | float):
        return str(value)
    return json.dumps(value, default=str)
