from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup, Tag

_NUMBER_PREFIX_RE = re.compile(r"[0-9]+")


def extract_number_prefix(text: Optional[str]) -> Optional[int]:
    """
    Parse the leading run of ASCII digits of `text`.

    "22." -> 22, "82 points" -> 82, "007" -> 7, "discuss" -> None, "" -> None
    """
    if not text:
        return None
    m = _NUMBER_PREFIX_RE.match(text)
    if not m:
        return None
    return int(m.group(0))


def _tag_number_prefix(tag: Optional[Tag]) -> Optional[int]:
    if tag is None:
        return None
    return extract_number_prefix(tag.get_text())


@dataclass(frozen=True)
class StoryRow:
    """
    Wrapper for a `<tr class="athing">` node.

    Holds uri, title & rank, and points at the `MetadataRow` that follows it.
    """

    node: Tag

    def find_story(self) -> Optional[tuple[str, str]]:
        """(uri, title) of the story link, or None."""
        link = self.node.select_one("a.storylink")
        if link is None:
            # Newer markup wraps the link in <span class="titleline">
            link = self.node.select_one(".titleline > a")
        if link is None:
            return None

        href = link.get("href")
        if not href:
            return None
        return str(href), link.get_text()

    def find_rank(self) -> Optional[int]:
        return _tag_number_prefix(self.node.find(class_="rank"))

    def find_next_structural_row(self) -> Optional[MetadataRow]:
        nxt = self.node.find_next_sibling("tr")
        if nxt is None:
            return None
        return MetadataRow(nxt)


@dataclass(frozen=True)
class MetadataRow:
    """Wrapper for the `<tr>` following a story row: author, points & comments."""

    node: Tag

    def find_author(self) -> Optional[str]:
        user = self.node.find(class_="hnuser")
        if user is None:
            return None
        return user.get_text()

    def find_points(self) -> Optional[int]:
        return _tag_number_prefix(self.node.find(class_="score"))

    def find_comments(self) -> Optional[int]:
        # Trailing links vary (hide | past | discuss | N comments); the comments
        # link is the last one. "discuss" has no digits and parses to None.
        anchors = self.node.find_all("a")
        if not anchors:
            return None
        return _tag_number_prefix(anchors[-1])


def find_story_rows(soup: BeautifulSoup) -> list[StoryRow]:
    """Every `tr.athing` in document order."""
    return [StoryRow(tr) for tr in soup.find_all("tr", class_="athing")]
