"""
HTML sanitization for bookmark text returned by the API.

Bookmarks are stored exactly as submitted. Text is cleaned on the way out so
markup saved by one client can't execute when another client renders it.
"""
from collections.abc import Callable

from bleach.sanitizer import Cleaner

Sanitizer = Callable[[str], str]

# Inline formatting tags that survive cleaning. Anything else (script, iframe,
# style, ...) is entity-escaped rather than removed, so the text stays visible.
ALLOWED_TAGS = frozenset({
    "a",
    "abbr",
    "b",
    "blockquote",
    "br",
    "code",
    "em",
    "i",
    "img",
    "li",
    "ol",
    "p",
    "pre",
    "small",
    "span",
    "strong",
    "sub",
    "sup",
    "u",
    "ul",
})

# Event handler attributes (onerror, onclick, ...) are never listed, so they are dropped
ALLOWED_ATTRIBUTES = {
    "a": ["href", "title"],
    "abbr": ["title"],
    "img": ["alt", "title", "src", "width", "height"],
}

ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})

_CLEANER = Cleaner(
    tags=ALLOWED_TAGS,
    attributes=ALLOWED_ATTRIBUTES,
    protocols=ALLOWED_PROTOCOLS,
    strip=False,
    strip_comments=True,
)


def sanitize_html(text: str) -> str:
    """
    Escape untrusted text for safe HTML rendering.

    ``<script>`` becomes ``&lt;script&gt;``, ``&`` becomes ``&amp;``, and
    allowed tags like ``<img>`` lose any attribute outside the allowlist
    (including ``onerror``) and any ``javascript:`` URL.
    """
    if not text:
        return ""
    return _CLEANER.clean(text)


def get_sanitizer() -> Sanitizer:
    """FastAPI dependency returning the sanitizer used to serialize bookmarks."""
    return sanitize_html
