import requests
from typing import Callable

from sitewalk.domain.http_response import HttpResponse
from sitewalk.exceptions import HttpFetchError


class HttpService:
    """
    HTTP client wrapper for fetching web pages.

    Requires http_client callable for dependency injection, so tests can pass
    a Mock instead of patching `requests`. Redirects are followed and the body
    is streamed; the caller closes the returned response.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: float = 10):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def fetch(self, url: str) -> HttpResponse:
        """GET `url` and return status code, open body stream and Content-Type."""
        headers = {"User-Agent": self.user_agent}
        try:
            resp = self.http_client(
                url,
                headers=headers,
                timeout=self.timeout,
                stream=True,
                allow_redirects=True,
            )
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        # Decode gzip/deflate transparently when the body is read as a stream.
        if hasattr(resp, 'raw') and resp.raw is not None:
            resp.raw.decode_content = True

        # Let real exceptions from the response object bubble up.
        ct = None
        if hasattr(resp, 'headers'):
            ct = resp.headers.get('Content-Type')

        return HttpResponse(
            resp.status_code,
            resp.raw,
            content_type=ct,
            url=getattr(resp, 'url', url),
            closer=resp.close,
        )
