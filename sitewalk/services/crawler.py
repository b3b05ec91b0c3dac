import logging
from typing import Callable, Iterator, Optional, Union

from sitewalk.domain.base_url import BaseUrl
from sitewalk.domain.crawl_result import CrawlResult
from sitewalk.domain.visited_tracker import VisitedTracker
from sitewalk.exceptions import HttpFetchError
from sitewalk.services.fetcher import Fetcher
from sitewalk.services.link_extractor import HrefExtractor
from sitewalk.services.url_resolver import UrlResolver

logger = logging.getLogger(__name__)


class Crawler:
    """Depth-first, single-threaded crawl of every same-domain page reachable from a seed.

    Each distinct URL string is attempted once per run. Per-page failures
    (transport errors, non-200 statuses, unparsable bodies) only stop the
    exploration of that page; they never abort the run.
    """

    def __init__(
        self,
        seed: Union[str, BaseUrl],
        fetcher: Fetcher,
        href_extractor: HrefExtractor,
        resolver: Optional[UrlResolver] = None,
        on_visit: Optional[Callable[[str], None]] = None,
    ):
        self.base = seed if isinstance(seed, BaseUrl) else BaseUrl.parse(seed)
        self.fetcher = fetcher
        self.href_extractor = href_extractor
        self.resolver = resolver or UrlResolver(self.base)
        self.on_visit = on_visit
        self.visited = VisitedTracker()
        self._failed: list[str] = []
        self._non_ok: list[str] = []

    def crawl(self) -> None:
        """Crawl from the seed URL. Starts every run with an empty visited set."""
        self.visited = VisitedTracker()
        self._failed = []
        self._non_ok = []
        self.visit(str(self.base))

    def visit(self, url: str) -> None:
        """Visit `url` and, depth-first, every unvisited in-scope page it links to.

        An explicit stack of per-page href iterators replaces recursion so a
        deep link chain cannot hit the interpreter's recursion limit; the
        visit order is the same as the recursive one.
        """
        stack: list[Iterator[str]] = []
        hrefs = self._visit_page(url)
        if hrefs:
            stack.append(iter(hrefs))

        while stack:
            href = next(stack[-1], None)
            if href is None:
                stack.pop()
                continue
            link = self.resolver.resolve(href)
            if link is None:
                continue
            children = self._visit_page(link)
            if children:
                stack.append(iter(children))

    def _visit_page(self, url: str) -> Optional[list[str]]:
        """Fetch one page and return its raw hrefs, or None if it is not explored."""
        if self.visited.is_visited(url):
            logger.debug("Skipping (visited) %s", url)
            return None
        # Marked before the fetch so a failing URL is never attempted twice.
        self.visited.mark(url)

        logger.info("Visiting: %s", url)
        if self.on_visit is not None:
            self.on_visit(url)

        try:
            response = self.fetcher.fetch(url)
        except HttpFetchError as e:
            logger.warning("Error visiting page %s: %s", url, e)
            self._failed.append(url)
            return None
        except Exception as e:
            logger.error("Fetch error for %s: %s", url, e, exc_info=True)
            self._failed.append(url)
            return None

        with response:
            if not response.ok:
                logger.warning("Received non-OK status code for %s: %s", url, response.status_code)
                self._non_ok.append(url)
                return None
            try:
                return self.href_extractor.extract_hrefs(response.body)
            except Exception:
                logger.exception("Error extracting links from %s", url)
                return None

    def result(self) -> CrawlResult:
        """Summarize the current (or last) run."""
        return CrawlResult(
            visited=self.visited.urls(),
            failed=list(self._failed),
            non_ok=list(self._non_ok),
        )
