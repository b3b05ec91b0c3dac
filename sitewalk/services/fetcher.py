from __future__ import annotations

from typing import Protocol

from sitewalk.domain.http_response import HttpResponse


class Fetcher(Protocol):
    """Fetch a URL and return an open HTTP-like response.

    Implementations raise `HttpFetchError` for transport failures (network,
    DNS, timeout) and leave status handling to the caller.
    """

    def fetch(self, url: str) -> HttpResponse: ...


class HttpServiceFetcher:
    def __init__(self, http_service):
        self._http_service = http_service

    def fetch(self, url: str) -> HttpResponse:
        return self._http_service.fetch(url)
