from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Post:
    """
    One listing entry parsed from a news page.

    Optional fields cover posts that lack the data, e.g. "X (YC S15) Is Hiring" rows
    have no author, score or comments link.
    """

    title: str
    uri: str
    rank: int
    author: Optional[str] = None
    points: Optional[int] = None
    comments: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        """JSON shape: absent optional fields are left out, never written as null."""
        out: dict[str, Any] = {"title": self.title, "uri": self.uri, "rank": self.rank}
        if self.author is not None:
            out["author"] = self.author
        if self.points is not None:
            out["points"] = self.points
        if self.comments is not None:
            out["comments"] = self.comments
        return out
