"""Custom exceptions for SiteWalk."""


class InvalidSeedUrlError(ValueError):
    """Raised when the seed URL cannot be used to start a crawl."""

    def __init__(self, seed: str, reason: str = "is not a valid absolute URL"):
        self.seed = seed
        self.reason = reason
        super().__init__(f"Seed URL {seed!r} {reason}")


class HttpFetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class CrawlConfigError(Exception):
    """Raised when a crawl config file is missing, unreadable or incomplete."""

    def __init__(self, config_path: str, reason: str = "not found"):
        self.config_path = config_path
        self.reason = reason
        super().__init__(f"Crawl config '{config_path}' {reason}")
