"""Immutable data structures for video references, notifications and progress."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass

DEFAULT_NOTIFICATION_DURATION_MS = 4000


class VideoKind(enum.Enum):
    """How a video descriptor was interpreted."""

    NONE = "none"
    IFRAME = "iframe"
    INVALID = "invalid"
    GOOGLE_DRIVE = "google-drive"
    YOUTUBE = "youtube"
    VIMEO = "vimeo"
    DIRECT = "direct"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ResolvedVideoReference:
    """Embeddable URL plus the classification it was derived from."""

    embeddable_url: str
    kind: VideoKind

    @property
    def is_embeddable(self) -> bool:
        return bool(self.embeddable_url)

    def to_dict(self) -> dict:
        """Convert to plain dictionary."""
        return {"embeddable_url": self.embeddable_url, "kind": self.kind.value}


class NotificationKind(enum.Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class Notification:
    """Single transient user-facing message."""

    id: int
    message: str
    kind: NotificationKind = NotificationKind.INFO
    duration_ms: int = DEFAULT_NOTIFICATION_DURATION_MS

    def to_dict(self) -> dict:
        """Convert to plain dictionary."""
        data = dataclasses.asdict(self)
        data["kind"] = self.kind.value
        return data


@dataclass(frozen=True)
class LessonProgress:
    """Completion state of one lesson within an enrollment."""

    lesson_id: str
    completed: bool = False
