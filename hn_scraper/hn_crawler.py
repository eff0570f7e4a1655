from __future__ import annotations

import logging

import requests
from bs4 import ParserRejectedMarkup

from hn_scraper.assembler import build_posts
from hn_scraper.errors import PageFetchError
from hn_scraper.http_client import HttpClient
from hn_scraper.models import Post

logger = logging.getLogger(__name__)

# Maximum post fetch count
MAX_POSTS = 100
DEFAULT_POSTS = 30


class HackerNewsCrawler:
    """
    Crawler for news.ycombinator.com listing pages.

    Scope:
    - Listing page: https://news.ycombinator.com/news?p=<page>

    Pages are fetched one at a time, in order; how many later pages are needed
    depends on how many valid posts the earlier ones produced.
    """

    def __init__(self, base_url: str, http: HttpClient, max_pages: int = 10):
        self.base_url = base_url.rstrip("/")
        self.http = http
        self.max_pages = int(max_pages)

    def fetch_page_html(self, page: int) -> str:
        """
        Fetch raw listing HTML for a 1-based page number.

        Raises:
            PageFetchError: network failure or non-2xx response.
        """
        logger.info("Fetching listing page: page=%s url=%s", page, self.base_url)
        try:
            return self.http.get_text(self.base_url, params={"p": page})
        except requests.RequestException as e:
            raise PageFetchError(page, e) from e

    def fetch_posts(self, n: int) -> list[Post]:
        """
        Fetch the first `n` posts, following pagination as needed.

        All-or-nothing: a failure on any page propagates and nothing is returned.

        Raises:
            ValueError: if `n` is negative.
            PageFetchError: on the first page that cannot be fetched or read.
        """
        if n < 0:
            raise ValueError(f"post count must be non-negative, got {n}")
        if n == 0:
            return []

        posts: list[Post] = []
        page = 1
        while len(posts) < n:
            if page > self.max_pages:
                logger.warning(
                    "Reached page limit before collecting enough posts: max_pages=%s found=%s wanted=%s",
                    self.max_pages,
                    len(posts),
                    n,
                )
                break

            html = self.fetch_page_html(page)
            page_posts = self.parse_page_html(html, page)
            logger.info("Parsed listing page: page=%s posts=%s", page, len(page_posts))

            if not page_posts:
                logger.warning(
                    "No posts found on page=%s; stopping pagination with %s of %s posts.",
                    page,
                    len(posts),
                    n,
                )
                break

            posts.extend(page_posts)
            page += 1

        return posts[:n]

    # -------------------------
    # Parsing (unit-test target)
    # -------------------------

    def parse_page_html(self, html: str, page: int = 1) -> list[Post]:
        try:
            return build_posts(html)
        except (ParserRejectedMarkup, UnicodeDecodeError) as e:
            raise PageFetchError(page, e) from e
