"""CourseCast MCP Server — lesson video embedding and course progress tools."""

from __future__ import annotations

import json
import logging
import sys

from mcp.server.fastmcp import FastMCP

from cache import ResolutionCache
from config import ConfigError, load_config
from models import LessonProgress
from platforms import resolve
from progress import course_progress
from validators import youtube_embed_url

logger = logging.getLogger(__name__)

_cache = ResolutionCache()

mcp = FastMCP("coursecast")


@mcp.tool()
async def resolve_video(value: str) -> str:
    """Turn a lesson's video field into an embeddable URL.

    Accepts YouTube (watch, youtu.be, embed), Vimeo, Google Drive links,
    direct .mp4/.webm/.ogg/.mov files, and pasted <iframe>/<embed> markup.

    Args:
        value: The raw text entered in the lesson's video field.

    Returns:
        JSON string with "embeddable_url" and "kind". Kind is one of none,
        iframe, invalid, google-drive, youtube, vimeo, direct, unknown.
    """
    try:
        ref = _cache.get_or_resolve(value, resolve)
        return json.dumps(ref.to_dict(), ensure_ascii=False, indent=2)
    except Exception as exc:
        logger.exception("resolve_video failed")
        return json.dumps({"error": "UnexpectedError", "message": str(exc)})


@mcp.tool()
async def youtube_embed(value: str) -> str:
    """Return the YouTube embed URL for a watch, short or embed link.

    Args:
        value: A YouTube URL. Non-YouTube input is returned unchanged.

    Returns:
        JSON string with "embed_url".
    """
    try:
        return json.dumps({"embed_url": youtube_embed_url(value)}, ensure_ascii=False)
    except Exception as exc:
        logger.exception("youtube_embed failed")
        return json.dumps({"error": "UnexpectedError", "message": str(exc)})


@mcp.tool()
async def lesson_progress(completed_lesson_ids: list[str], lesson_ids: list[str]) -> str:
    """Compute an enrollment's completion percentage for a course.

    Args:
        completed_lesson_ids: Lessons the learner has marked complete.
        lesson_ids: All lessons in the course.

    Returns:
        JSON string with "completed", "total" and "percentage".
    """
    try:
        if not isinstance(completed_lesson_ids, list) or not isinstance(lesson_ids, list):
            raise ValueError("completed_lesson_ids and lesson_ids must be lists")
        lessons = set(lesson_ids)
        progress = [LessonProgress(lesson_id=i, completed=True) for i in completed_lesson_ids]
        return json.dumps({
            "completed": len(lessons.intersection(completed_lesson_ids)),
            "total": len(lessons),
            "percentage": course_progress(progress, lessons),
        })
    except ValueError as exc:
        return json.dumps({"error": "InvalidArgument", "message": str(exc)})
    except Exception as exc:
        logger.exception("lesson_progress failed")
        return json.dumps({"error": "UnexpectedError", "message": str(exc)})


def main() -> None:
    global _cache
    try:
        config = load_config()
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        sys.exit(1)
    _cache = ResolutionCache(ttl_seconds=config["cache_ttl"])
    logging.basicConfig(level=config["log_level"], stream=sys.stderr)
    logger.info("Starting coursecast MCP server")
    mcp.run()


if __name__ == "__main__":
    main()
