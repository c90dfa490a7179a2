"""YouTube video ID extraction and embed URL canonicalization."""

from __future__ import annotations

import re
from typing import Optional

YOUTUBE_EMBED_BASE = "https://www.youtube.com/embed/"
YOUTUBE_EMBED_MARKER = "youtube.com/embed/"

# Characters trimmed from pasted input: ASCII and Unicode space separators,
# line terminators and the byte order mark. Unlike str.isspace this excludes
# U+001C-U+001F and U+0085.
_TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Attempted in order; a later match overrides an earlier one.
YOUTUBE_ID_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"youtube\.com/watch\?v=(?P<id>[^&]+)"),
    re.compile(r"youtu\.be/(?P<id>[^?&]+)"),
    re.compile(r"youtube\.com/embed/(?P<id>[^?&]+)"),
)


def trim(value: str) -> str:
    """Strip surrounding whitespace and byte order marks from pasted text."""
    return value.strip(_TRIM_CHARS)


def is_youtube_url(value: str) -> bool:
    return "youtube.com" in value or "youtu.be" in value


def extract_youtube_id(value: str) -> Optional[str]:
    """Extract a YouTube video ID from a watch, short-link or embed URL.

    Returns None if no pattern yields an ID.
    """
    if not isinstance(value, str):
        return None
    video_id: Optional[str] = None
    for pattern in YOUTUBE_ID_PATTERNS:
        match = pattern.search(value)
        if match:
            video_id = match.group("id")
    return video_id or None


def youtube_embed_url(value: str) -> str:
    """Return the canonical YouTube embed URL for *value*.

    Empty input yields "". URLs already in embed form, and anything without
    an extractable ID, come back unchanged apart from surrounding whitespace.
    """
    stripped = trim(value) if isinstance(value, str) else ""
    if not stripped:
        return ""
    if YOUTUBE_EMBED_MARKER in stripped:
        return stripped
    video_id = extract_youtube_id(stripped)
    if video_id:
        return f"{YOUTUBE_EMBED_BASE}{video_id}"
    return stripped
