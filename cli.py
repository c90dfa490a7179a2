"""CLI entry point for CourseCast."""

import argparse
import json
import logging
import sys

from config import ConfigError, load_config
from models import VideoKind
from platforms import resolve
from validators import youtube_embed_url

logger = logging.getLogger(__name__)


def run(value: str, as_json: bool, youtube_only: bool, strict: bool) -> int:
    if youtube_only:
        print(youtube_embed_url(value))
        return 0

    ref = resolve(value)
    logger.debug("Resolved %r as %s", value, ref.kind.value)
    if as_json:
        print(json.dumps(ref.to_dict(), ensure_ascii=False))
    else:
        print(f"{ref.kind.value}\t{ref.embeddable_url}")
    if strict and ref.kind in (VideoKind.NONE, VideoKind.INVALID):
        return 1
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="CourseCast - resolve lesson video links to embeddable URLs"
    )
    parser.add_argument("value", help="video link or <iframe>/<embed> markup")
    parser.add_argument("--json", action="store_true", help="print JSON output")
    parser.add_argument(
        "--youtube-only",
        action="store_true",
        help="only canonicalize YouTube links, printing the embed URL",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="exit with status 1 when nothing embeddable was found",
    )
    args = parser.parse_args(argv)

    try:
        config = load_config()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)
    logging.basicConfig(level=config["log_level"], stream=sys.stderr)

    sys.exit(run(args.value, args.json, args.youtube_only, args.strict))


if __name__ == "__main__":
    main()
