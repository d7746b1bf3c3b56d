from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional, Tuple

ChatRole = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class ChatMessage:
    role: ChatRole
    content: str


@dataclass(frozen=True)
class UpstreamChatRequest:
    model: str
    messages: Tuple[ChatMessage, ...]
    stream: bool = False

    def to_payload(self) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [{"role": m.role, "content": m.content} for m in self.messages],
            "stream": self.stream,
        }


@dataclass
class UpstreamChatResponse:
    content: str                  # choices[0].message.content
    model: Optional[str] = None   # model id echoed by the upstream, if any
