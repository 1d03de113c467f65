"""Wire shapes for the OpenAI-compatible ``/v1/chat/completions`` endpoint.

Unknown keys in responses are ignored, so extra fields such as ``usage`` or
``finish_reason`` never break parsing.
"""

from pydantic import BaseModel


class ChatMessage(BaseModel):
    role: str = "assistant"
    content: str | None = None


class ChatRequest(BaseModel):
    model: str
    messages: list[ChatMessage]
    temperature: float = 0.3
    max_tokens: int = 1000


class ChatChoice(BaseModel):
    message: ChatMessage | None = None


class ChatErrorDetail(BaseModel):
    message: str | None = None


class ChatResponse(BaseModel):
    choices: list[ChatChoice] | None = None
    error: ChatErrorDetail | None = None

    def first_content(self) -> str | None:
        """Stripped content of the first choice, or None when there is none."""
        if not self.choices:
            return None
        message = self.choices[0].message
        if message is None or message.content is None:
            return None
        return message.content.strip()
