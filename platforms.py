"""Video reference classification and embed URL resolution."""

from __future__ import annotations

import re

from models import ResolvedVideoReference, VideoKind
from validators import (
    YOUTUBE_EMBED_BASE,
    YOUTUBE_EMBED_MARKER,
    extract_youtube_id,
    is_youtube_url,
    trim,
)

_EMBED_TAG_OPENERS = ("<iframe", "<embed")
_SRC_ATTR_RE = re.compile(r"""src=["']([^"']+)["']""")
_DRIVE_FILE_ID_RE = re.compile(r"/d/([a-zA-Z0-9_-]+)")
_VIMEO_ID_RE = re.compile(r"vimeo\.com/(\d+)")
_DIRECT_VIDEO_RE = re.compile(r"\.(mp4|webm|ogg|mov)(\?|$)", re.IGNORECASE)

DRIVE_PREVIEW_TEMPLATE = "https://drive.google.com/file/d/{}/preview"
VIMEO_PLAYER_TEMPLATE = "https://player.vimeo.com/video/{}"


def _resolve_embed_tag(markup: str) -> ResolvedVideoReference:
    match = _SRC_ATTR_RE.search(markup)
    if match:
        return ResolvedVideoReference(match.group(1), VideoKind.IFRAME)
    return ResolvedVideoReference("", VideoKind.INVALID)


def _resolve_drive(url: str) -> ResolvedVideoReference:
    match = _DRIVE_FILE_ID_RE.search(url)
    if match:
        return ResolvedVideoReference(
            DRIVE_PREVIEW_TEMPLATE.format(match.group(1)), VideoKind.GOOGLE_DRIVE
        )
    return ResolvedVideoReference(url, VideoKind.GOOGLE_DRIVE)


def resolve(value: str) -> ResolvedVideoReference:
    """Classify a free-form video descriptor and derive an embeddable URL.

    Rules are tried in order and the first one that applies wins:
    empty input, ``<iframe``/``<embed`` markup, Google Drive, YouTube,
    Vimeo, direct video file, and finally an unknown passthrough.

    Never raises. Embed markup without a ``src`` attribute is the only
    input reported as ``VideoKind.INVALID``.
    """
    stripped = trim(value) if isinstance(value, str) else ""
    if not stripped:
        return ResolvedVideoReference("", VideoKind.NONE)

    if stripped.startswith(_EMBED_TAG_OPENERS):
        return _resolve_embed_tag(stripped)

    if "drive.google.com" in stripped:
        return _resolve_drive(stripped)

    if is_youtube_url(stripped):
        if YOUTUBE_EMBED_MARKER in stripped:
            return ResolvedVideoReference(stripped, VideoKind.YOUTUBE)
        video_id = extract_youtube_id(stripped)
        if video_id:
            return ResolvedVideoReference(
                f"{YOUTUBE_EMBED_BASE}{video_id}", VideoKind.YOUTUBE
            )
        # No ID: the remaining rules still get a chance.

    if "vimeo.com" in stripped:
        match = _VIMEO_ID_RE.search(stripped)
        if match:
            return ResolvedVideoReference(
                VIMEO_PLAYER_TEMPLATE.format(match.group(1)), VideoKind.VIMEO
            )

    if _DIRECT_VIDEO_RE.search(stripped):
        return ResolvedVideoReference(stripped, VideoKind.DIRECT)

    return ResolvedVideoReference(stripped, VideoKind.UNKNOWN)
