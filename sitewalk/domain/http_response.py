from __future__ import annotations

from typing import IO, Callable, Optional


class HttpResponse:
    """Response from an HTTP fetch operation.

    `body` is a readable byte stream that stays open until `close()` is
    called; whoever receives the response owns that stream.
    """

    def __init__(
        self,
        status_code: int,
        body: IO[bytes],
        content_type: Optional[str] = None,
        url: Optional[str] = None,
        closer: Optional[Callable[[], None]] = None,
    ):
        self.status_code = status_code
        self.body = body
        self.content_type = content_type
        self.url = url
        self._closer = closer
        self.closed = False

    @property
    def ok(self) -> bool:
        """Only a plain 200 counts as success; other 2xx codes do not."""
        return self.status_code == 200

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        if self._closer is not None:
            self._closer()
        else:
            close = getattr(self.body, "close", None)
            if close is not None:
                close()

    def __enter__(self) -> "HttpResponse":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self):
        return f"<HttpResponse status={self.status_code} url={self.url}>"
