import io

import pytest
import requests

from sitewalk.domain.http_response import HttpResponse
from sitewalk.exceptions import HttpFetchError


class FakeSite:
    """In-memory link graph standing in for the HTTP transport.

    `pages` maps URL -> HTML (served with 200) or (status, HTML).
    URLs in `broken` raise a transport error; anything unknown returns 404.
    """

    def __init__(self, pages=None, broken=()):
        self.pages = dict(pages or {})
        self.broken = set(broken)
        self.fetched = []
        self.responses = []

    def fetch(self, url):
        self.fetched.append(url)
        if url in self.broken:
            raise HttpFetchError(url, requests.exceptions.ConnectionError("connection refused"))
        page = self.pages.get(url, (404, "not found"))
        status, html = page if isinstance(page, tuple) else (200, page)
        response = HttpResponse(status, io.BytesIO(html.encode("utf-8")), content_type="text/html", url=url)
        self.responses.append(response)
        return response


def links(*hrefs):
    return "<html><body>" + "".join(f'<a href="{h}">{h}</a>' for h in hrefs) + "</body></html>"


@pytest.fixture
def site_factory():
    return FakeSite


@pytest.fixture
def page_with_links():
    return links
