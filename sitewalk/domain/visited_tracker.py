from typing import Iterator


class VisitedTracker:
    """
    Tracks which URLs have been visited during a single crawl run.

    A URL is marked once, before it is fetched, and is never evicted: the
    tracker is what guarantees termination on cyclic link graphs, so it must
    grow monotonically for the lifetime of the run.
    """

    def __init__(self):
        # dict keeps insertion order, which is the visit order.
        self._visited: dict[str, None] = {}

    def mark(self, url: str) -> None:
        """Mark a URL as visited."""
        self._visited.setdefault(url, None)

    def is_visited(self, url: str) -> bool:
        """Check if a URL has been visited."""
        return url in self._visited

    def urls(self) -> list[str]:
        """Return visited URLs in the order they were first marked."""
        return list(self._visited)

    def __contains__(self, url: object) -> bool:
        return url in self._visited

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._visited))

    def __len__(self) -> int:
        return len(self._visited)
