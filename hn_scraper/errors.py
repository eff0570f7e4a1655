from __future__ import annotations


class PageFetchError(Exception):
    """A listing page could not be fetched or read. Fatal for the whole run."""

    def __init__(self, page: int, cause: BaseException):
        super().__init__(f"Failed to fetch page {page} from hacker news: {cause}")
        self.page = page
        self.cause = cause
