"""Crawl result data model."""
from typing import NamedTuple


class CrawlResult(NamedTuple):
    """Summary of a finished crawl run.

    Built by the crawler on demand so callers can report what happened
    without the traversal itself returning anything.
    """
    visited: list[str]
    """Every URL attempted, in depth-first visit order"""

    failed: list[str]
    """URLs whose fetch raised a transport error"""

    non_ok: list[str]
    """URLs that answered with a status other than 200"""

    @property
    def pages_visited(self) -> int:
        return len(self.visited)
