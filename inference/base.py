from abc import ABC, abstractmethod
from typing import Union

from .stream import ChatStream
from .types import ChatMessage, UpstreamChatRequest, UpstreamChatResponse


class UpstreamClient(ABC):
    """
    Abstract upstream boundary.
    Handlers must depend ONLY on this interface.
    """

    model_name: str

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """True when a credential is available for the upstream."""
        raise NotImplementedError

    def build_request(self, prompt: str, stream: bool) -> UpstreamChatRequest:
        return UpstreamChatRequest(
            model=self.model_name,
            messages=(ChatMessage(role="user", content=prompt),),
            stream=stream,
        )

    @abstractmethod
    async def stream_chat(self, prompt: str) -> ChatStream:
        """Open a streaming completion; the body is left unread."""
        raise NotImplementedError

    @abstractmethod
    async def complete_chat(self, prompt: str) -> UpstreamChatResponse:
        """Run a buffered completion and return the first choice's content."""
        raise NotImplementedError

    async def send_chat_request(
        self, prompt: str, stream: bool = False
    ) -> Union[ChatStream, UpstreamChatResponse]:
        if stream:
            return await self.stream_chat(prompt)
        return await self.complete_chat(prompt)

    async def aclose(self) -> None:
        """Release pooled connections, if any."""
