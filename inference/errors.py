"""Errors raised by upstream chat-completion clients."""


class UpstreamError(Exception):
    """Base class for every upstream failure."""


class UpstreamUnreachable(UpstreamError):
    """Transport-level failure: connect, read, or timeout."""


class UpstreamHttpError(UpstreamError):
    """The upstream answered with a non-success status."""

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Upstream returned HTTP {status_code}")


class MalformedUpstreamResponse(UpstreamError):
    """The buffered response lacks choices[0].message.content."""
