"""Domain objects for SiteWalk - explicit re-exports to satisfy linters."""
from .base_url import BaseUrl as BaseUrl
from .http_response import HttpResponse as HttpResponse
from .visited_tracker import VisitedTracker as VisitedTracker
from .crawl_result import CrawlResult as CrawlResult

__all__ = ["BaseUrl", "HttpResponse", "VisitedTracker", "CrawlResult"]
