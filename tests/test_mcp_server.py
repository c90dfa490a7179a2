"""Tests for the MCP tool functions."""

from __future__ import annotations

import asyncio
import json
import os
from unittest.mock import patch

import pytest

import course_mcp_server
from course_mcp_server import lesson_progress, resolve_video, youtube_embed


@pytest.fixture(autouse=True)
def _clear_cache():
    course_mcp_server._cache.clear()
    yield
    course_mcp_server._cache.clear()


class TestResolveVideoTool:

    def test_youtube(self) -> None:
        data = json.loads(asyncio.run(resolve_video("https://youtu.be/abc123?t=5")))
        assert data == {
            "embeddable_url": "https://www.youtube.com/embed/abc123",
            "kind": "youtube",
        }

    def test_invalid_markup(self) -> None:
        data = json.loads(asyncio.run(resolve_video("<iframe></iframe>")))
        assert data == {"embeddable_url": "", "kind": "invalid"}

    def test_empty(self) -> None:
        data = json.loads(asyncio.run(resolve_video("   ")))
        assert data["kind"] == "none"

    def test_result_is_cached(self) -> None:
        with patch("course_mcp_server.resolve", wraps=course_mcp_server.resolve) as spy:
            asyncio.run(resolve_video("https://vimeo.com/123456"))
            asyncio.run(resolve_video("https://vimeo.com/123456 "))
        assert spy.call_count == 1

    def test_unexpected_error_returns_json(self) -> None:
        with patch("course_mcp_server.resolve", side_effect=RuntimeError("boom")):
            data = json.loads(asyncio.run(resolve_video("https://vimeo.com/1")))
        assert data == {"error": "UnexpectedError", "message": "boom"}


class TestYoutubeEmbedTool:

    def test_watch_url(self) -> None:
        data = json.loads(asyncio.run(youtube_embed("https://www.youtube.com/watch?v=abc123")))
        assert data == {"embed_url": "https://www.youtube.com/embed/abc123"}

    def test_non_youtube_unchanged(self) -> None:
        data = json.loads(asyncio.run(youtube_embed("https://vimeo.com/1")))
        assert data == {"embed_url": "https://vimeo.com/1"}


class TestLessonProgressTool:

    def test_percentage(self) -> None:
        data = json.loads(asyncio.run(lesson_progress(["l1", "l2"], ["l1", "l2", "l3"])))
        assert data == {"completed": 2, "total": 3, "percentage": 67}

    def test_unknown_lessons_ignored(self) -> None:
        data = json.loads(asyncio.run(lesson_progress(["x"], ["l1"])))
        assert data == {"completed": 0, "total": 1, "percentage": 0}

    def test_invalid_arguments(self) -> None:
        data = json.loads(asyncio.run(lesson_progress("l1", ["l1"])))  # type: ignore[arg-type]
        assert data["error"] == "InvalidArgument"


class TestMain:

    def test_bad_config_exits_cleanly(self, capsys) -> None:
        env = {"COURSECAST_CACHE_TTL": "soon"}
        with patch.dict(os.environ, env, clear=True), \
                patch.object(course_mcp_server.mcp, "run") as run:
            with pytest.raises(SystemExit) as exc_info:
                course_mcp_server.main()
        assert exc_info.value.code == 1
        assert "COURSECAST_CACHE_TTL" in capsys.readouterr().err
        run.assert_not_called()

    def test_cache_uses_configured_ttl(self) -> None:
        env = {"COURSECAST_CACHE_TTL": "5"}
        with patch.dict(os.environ, env, clear=True), \
                patch.object(course_mcp_server, "_cache", course_mcp_server._cache), \
                patch.object(course_mcp_server.mcp, "run") as run:
            course_mcp_server.main()
            assert course_mcp_server._cache._ttl == 5.0
        run.assert_called_once_with()
