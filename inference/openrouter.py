import logging
from typing import Any, Dict, Optional

import httpx

from .base import UpstreamClient
from .errors import MalformedUpstreamResponse, UpstreamHttpError, UpstreamUnreachable
from .stream import ChatStream
from .types import UpstreamChatRequest, UpstreamChatResponse

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_MODEL = "mistralai/mistral-7b-instruct:free"


class OpenRouterClient(UpstreamClient):
    """
    OpenRouter chat-completions backend.

    One attempt per call, no retries. Transport failures surface as
    UpstreamUnreachable, non-2xx answers as UpstreamHttpError. The API key
    only ever travels in the Authorization header and is never logged.
    """

    def __init__(
        self,
        api_key: str,
        model_name: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize OpenRouter backend.

        Args:
            api_key:    Bearer credential; empty string means "not configured"
            model_name: Upstream model identifier
            base_url:   Base URL of the OpenAI-compatible API
            timeout:    Connect/read/write/pool timeout in seconds
            transport:  Optional httpx transport (tests inject MockTransport)
        """
        self.api_key = api_key
        self.model_name = model_name
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http = httpx.AsyncClient(timeout=timeout, transport=transport)

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @property
    def completions_url(self) -> str:
        return f"{self.base_url}/chat/completions"

    def _build_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def _build_http_request(self, chat_request: UpstreamChatRequest) -> httpx.Request:
        return self._http.build_request(
            "POST",
            self.completions_url,
            json=chat_request.to_payload(),
            headers=self._build_headers(),
        )

    async def stream_chat(self, prompt: str) -> ChatStream:
        request = self._build_http_request(self.build_request(prompt, stream=True))

        try:
            response = await self._http.send(request, stream=True)
        except httpx.TransportError as e:
            raise UpstreamUnreachable(f"{type(e).__name__}: {e}") from e

        if response.is_error:
            try:
                body = (await response.aread()).decode("utf-8", errors="replace")
            except httpx.HTTPError:
                body = ""
            finally:
                await response.aclose()
            raise UpstreamHttpError(response.status_code, body)

        logger.debug(f"Upstream stream opened ({response.status_code}) for {self.model_name}")
        return ChatStream(response)

    async def complete_chat(self, prompt: str) -> UpstreamChatResponse:
        request = self._build_http_request(self.build_request(prompt, stream=False))

        try:
            response = await self._http.send(request)
        except httpx.TransportError as e:
            raise UpstreamUnreachable(f"{type(e).__name__}: {e}") from e
        except httpx.HTTPError as e:
            raise MalformedUpstreamResponse(f"Upstream body unreadable: {e}") from e

        if response.is_error:
            raise UpstreamHttpError(response.status_code, response.text)

        try:
            data: Dict[str, Any] = response.json()
        except ValueError as e:
            raise MalformedUpstreamResponse("Upstream body is not valid JSON") from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise MalformedUpstreamResponse(
                "Upstream body has no choices[0].message.content"
            ) from e

        if not isinstance(content, str):
            raise MalformedUpstreamResponse("choices[0].message.content is not a string")

        return UpstreamChatResponse(
            content=content,
            model=data.get("model"),
        )

    async def aclose(self) -> None:
        await self._http.aclose()
