"""Lesson completion checks and course progress percentages."""

from __future__ import annotations

import math
from typing import Iterable

from models import LessonProgress


def is_lesson_completed(progress: Iterable[LessonProgress], lesson_id: str) -> bool:
    return any(p.lesson_id == lesson_id and p.completed for p in progress)


def progress_percentage(completed_count: int, total_lessons: int) -> int:
    """Return the completed share as a whole percentage (0-100).

    Halves round up. No lessons means 0%.
    """
    if total_lessons <= 0:
        return 0
    completed_count = min(max(completed_count, 0), total_lessons)
    return int(math.floor(completed_count * 100 / total_lessons + 0.5))


def course_progress(progress: Iterable[LessonProgress], lesson_ids: Iterable[str]) -> int:
    """Percentage of *lesson_ids* marked completed in *progress*.

    Each lesson counts once; entries for lessons outside the course are ignored.
    """
    lessons = set(lesson_ids)
    done = {p.lesson_id for p in progress if p.completed and p.lesson_id in lessons}
    return progress_percentage(len(done), len(lessons))
