from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import SplitResult, urlsplit, urlunsplit

from sitewalk.exceptions import InvalidSeedUrlError


def host_of(parts: SplitResult) -> str:
    """Return the network location without any userinfo (port kept)."""
    return parts.netloc.rpartition("@")[2]


@dataclass(frozen=True)
class BaseUrl:
    """The parsed seed URL of a crawl run.

    `host` keeps the port, so `example.com:8080` only matches links that
    carry the same port. `netloc` is the full network location including any
    userinfo; it is only used to rebuild the seed string, never for scoping.
    """

    scheme: str
    host: str
    path: str = ""
    query: str = ""
    fragment: str = ""
    netloc: str = ""

    @classmethod
    def parse(cls, seed: str) -> "BaseUrl":
        if seed is None or not str(seed).strip():
            raise InvalidSeedUrlError(str(seed), "is empty")
        seed = str(seed).strip()
        try:
            parts = urlsplit(seed)
            # port validation is lazy in urllib; force it here
            parts.port
        except ValueError as e:
            raise InvalidSeedUrlError(seed, f"could not be parsed: {e}") from e
        if not parts.scheme:
            raise InvalidSeedUrlError(seed, "has no scheme")
        host = host_of(parts)
        if not host:
            raise InvalidSeedUrlError(seed, "has no host")
        return cls(
            scheme=parts.scheme,
            host=host,
            path=parts.path,
            query=parts.query,
            fragment=parts.fragment,
            netloc=parts.netloc,
        )

    def __str__(self) -> str:
        return urlunsplit((self.scheme, self.netloc or self.host, self.path, self.query, self.fragment))
