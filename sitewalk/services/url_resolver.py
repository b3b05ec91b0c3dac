import logging
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from sitewalk.domain.base_url import BaseUrl, host_of

logger = logging.getLogger(__name__)


def _opaque(scheme: str, opaque: str, query: str, fragment: str) -> str:
    # urlunsplit would insert "//" for schemes such as http; keep "scheme:opaque" as written.
    url = f"{scheme}:{opaque}"
    if query:
        url += "?" + query
    if fragment:
        url += "#" + fragment
    return url


class UrlResolver:
    """Turn raw hrefs found on a page into canonical, in-scope URLs.

    Missing scheme and host are taken from the seed, not from the page the
    href was found on, so path-relative hrefs resolve against the site root.
    Fragments are preserved. An href with a scheme but no host and no
    leading slash (`mailto:a@example.com`, `http:foo`) is kept in its
    `scheme:opaque` form and treated as being on the seed host.
    """

    def __init__(self, base: BaseUrl):
        self.base = base

    def is_same_domain(self, host: str) -> bool:
        # Subdomains count as the same site: blog.example.com is in scope for example.com.
        return host == self.base.host or host.endswith("." + self.base.host)

    def resolve(self, href: str) -> Optional[str]:
        """Return the absolute URL for `href`, or None if malformed or out of scope."""
        try:
            parts = urlsplit(href)
            parts.port
        except ValueError as e:
            logger.debug("Skipping (malformed) %r: %s", href, e)
            return None

        scheme = parts.scheme or self.base.scheme
        host = host_of(parts)
        netloc = parts.netloc
        if not host:
            host = netloc = self.base.host

        if not self.is_same_domain(host):
            logger.debug("Skipping (external) %s -> not same host as %s", href, self.base.host)
            return None

        if parts.scheme and not parts.netloc and parts.path and not parts.path.startswith("/"):
            return _opaque(parts.scheme, parts.path, parts.query, parts.fragment)

        return urlunsplit((scheme, netloc, parts.path, parts.query, parts.fragment))
