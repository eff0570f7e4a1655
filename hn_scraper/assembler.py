from __future__ import annotations

import logging
from typing import Optional

import regex
from bs4 import BeautifulSoup

from hn_scraper.listing_rows import StoryRow, find_story_rows
from hn_scraper.models import Post

logger = logging.getLogger(__name__)

MAX_FIELD_CHARS = 256

_GRAPHEME_RE = regex.compile(r"\X")


def truncate_chars(text: str, limit: int = MAX_FIELD_CHARS) -> str:
    """
    Truncate to at most `limit` characters.

    Cuts on grapheme cluster boundaries, so a flag, an emoji with its skin
    tone modifier or a letter with its combining accents is kept whole or
    dropped whole.
    """
    if len(text) <= limit:
        return text

    end = 0
    for m in _GRAPHEME_RE.finditer(text):
        if m.end() > limit:
            break
        end = m.end()
    return text[:end]


def build_post(row: StoryRow) -> Optional[Post]:
    """
    Construct a `Post` from a `tr.athing` row, or None if the row is incomplete.

    Title and author are truncated to 256 characters.
    """
    story = row.find_story()
    if story is None:
        logger.debug("Dropping row without story link: id=%s", row.node.get("id"))
        return None
    uri, title = story

    line2 = row.find_next_structural_row()
    if line2 is None:
        logger.debug("Dropping row without metadata row: id=%s", row.node.get("id"))
        return None

    rank = row.find_rank()
    if rank is None:
        logger.debug("Dropping row without rank: id=%s", row.node.get("id"))
        return None

    author = line2.find_author()
    return Post(
        title=truncate_chars(title),
        uri=uri,
        rank=rank,
        author=truncate_chars(author) if author is not None else None,
        points=line2.find_points(),
        comments=line2.find_comments(),
    )


def build_posts(html: str) -> list[Post]:
    """Parse one listing page into posts, in page order, skipping incomplete rows."""
    soup = BeautifulSoup(html, "lxml")
    posts: list[Post] = []
    for row in find_story_rows(soup):
        post = build_post(row)
        if post is not None:
            posts.append(post)
    return posts
