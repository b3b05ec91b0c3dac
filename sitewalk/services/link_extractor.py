import logging
from typing import IO, Callable, Optional, Protocol

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class HrefExtractor(Protocol):
    def extract_hrefs(self, body: IO[bytes]) -> list[str]: ...


class SoupHrefExtractor:
    """Collect raw `<a href>` values from an HTML byte stream, in document order.

    A stream that breaks mid-read is parsed up to the point of failure, so a
    truncated page still contributes the links seen before the error.
    """

    def __init__(
        self,
        soup_factory: Optional[Callable[[bytes], BeautifulSoup]] = None,
        chunk_size: int = CHUNK_SIZE,
    ):
        self._soup_factory = soup_factory or (lambda markup: BeautifulSoup(markup, "html.parser"))
        self._chunk_size = chunk_size

    def _read(self, body: IO[bytes]) -> bytes:
        chunks = []
        while True:
            try:
                chunk = body.read(self._chunk_size)
            except Exception as e:
                logger.warning("Body read interrupted after %s bytes: %s", sum(map(len, chunks)), e)
                break
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)

    def extract_hrefs(self, body: IO[bytes]) -> list[str]:
        markup = self._read(body)
        if not markup:
            return []

        try:
            soup = self._soup_factory(markup)
        except Exception:
            logger.exception("Error parsing HTML body")
            return []

        return [a.get("href") for a in soup.find_all("a", href=True)]
