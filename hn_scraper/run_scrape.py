from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from hn_scraper.errors import PageFetchError
from hn_scraper.hn_crawler import DEFAULT_POSTS, MAX_POSTS, HackerNewsCrawler
from hn_scraper.http_client import HttpClient, HttpConfig
from hn_scraper.settings import LOG_LEVELS, load_settings

__version__ = "0.1"

logger = logging.getLogger(__name__)


def _post_count(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid post count: {value!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"post count must be >= 0, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hn-scraper",
        description="Hacker News HTML -> JSON post scraper",
    )
    p.add_argument(
        "--posts",
        type=_post_count,
        default=DEFAULT_POSTS,
        metavar="POSTS",
        help=f"Number of posts to fetch between 0 & {MAX_POSTS}, default {DEFAULT_POSTS}",
    )
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: HN_LOG_LEVEL or INFO).",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        s = load_settings()
    except ValidationError as e:
        parser.error(f"invalid settings: {e}")

    logging.basicConfig(
        level=args.log_level or s.log_level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    n = args.posts
    if n > MAX_POSTS:
        logger.warning("Requested %s posts; clamping to %s", n, MAX_POSTS)
        n = MAX_POSTS

    if n == 0:
        print("[]")
        return 0

    http = HttpClient(
        HttpConfig(
            timeout_sec=s.request_timeout_sec,
            delay_sec=s.request_delay_sec,
            user_agent=s.user_agent,
        )
    )
    crawler = HackerNewsCrawler(base_url=s.base_url, http=http, max_pages=s.max_pages)

    try:
        posts = crawler.fetch_posts(n)
    except PageFetchError as e:
        logger.error("%s", e)
        # Always reported, whatever the log level
        print(f"hn-scraper: {e}", file=sys.stderr)
        return 1

    logger.info("Fetched posts: %s", len(posts))
    print(json.dumps([p.to_dict() for p in posts], ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
