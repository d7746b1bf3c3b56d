"""Pytest configuration and fixtures."""

import json
import sys
from pathlib import Path
from typing import Callable, Iterable, List

import httpx
import pytest

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from inference import OpenRouterClient  # noqa: E402

SSE_CHUNKS: List[bytes] = [
    b'data: {"choices":[{"delta":{"content":"{\\"\xf0\x9f\x8c\x8b Eruptions\\": ["}}]}\n\n',
    b'data: {"choices":[{"delta":{"content":"{\\"text\\": \\"Did you know...\\"}"}}]}\n\n',
    b"data: [DONE]\n\n",
]


class UpstreamRecorder:
    """Collects every request the mock upstream receives."""

    def __init__(self):
        self.requests: List[httpx.Request] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def payload(self, index: int = -1) -> dict:
        return json.loads(self.requests[index].content)


def chunked_body(chunks: Iterable[bytes], fail_after: bool = False):
    """Async byte stream that yields each chunk as a separate read."""

    async def body():
        for chunk in chunks:
            yield chunk
        if fail_after:
            raise httpx.ReadError("connection reset by peer")

    return body()


def completion_json(content: str) -> dict:
    return {
        "id": "gen-123",
        "model": "mistralai/mistral-7b-instruct:free",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
    }


@pytest.fixture
def recorder() -> UpstreamRecorder:
    return UpstreamRecorder()


@pytest.fixture
def make_client(recorder) -> Callable[..., OpenRouterClient]:
    """
    Build an OpenRouterClient whose upstream is an httpx.MockTransport.

    The handler receives the httpx.Request and returns an httpx.Response
    (or raises an httpx exception to simulate transport failures).
    """

    def factory(handler, api_key: str = "sk-or-test") -> OpenRouterClient:
        def recording_handler(request: httpx.Request):
            recorder.requests.append(request)
            return handler(request)

        return OpenRouterClient(
            api_key=api_key,
            base_url="https://upstream.test/api/v1",
            timeout=5.0,
            transport=httpx.MockTransport(recording_handler),
        )

    return factory
