from typing import AsyncIterator

import httpx

from .errors import MalformedUpstreamResponse, UpstreamUnreachable


class ChatStream:
    """
    Open upstream event-stream, positioned at the start of the body.

    Chunks are yielded exactly as httpx receives them: no re-chunking,
    no parsing. The sequence is single-pass; iterating twice raises
    httpx.StreamConsumed.
    """

    def __init__(self, response: httpx.Response):
        self._response = response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def is_closed(self) -> bool:
        return self._response.is_closed

    async def iter_chunks(self) -> AsyncIterator[bytes]:
        try:
            async for chunk in self._response.aiter_bytes():
                yield chunk
        except httpx.TransportError as e:
            raise UpstreamUnreachable(f"Upstream stream interrupted: {e}") from e
        except httpx.HTTPError as e:
            # e.g. DecodingError on a corrupt content-encoding
            raise MalformedUpstreamResponse(f"Upstream stream unreadable: {e}") from e

    async def aclose(self) -> None:
        # httpx makes this a no-op once the response is closed
        await self._response.aclose()
