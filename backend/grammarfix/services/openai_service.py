"""OpenAI chat-completions client for grammar and spelling correction."""

import logging

import httpx
from pydantic import ValidationError

from grammarfix.config import settings
from grammarfix.core.exceptions import CorrectionApiError, EmptyResponseError, NetworkError
from grammarfix.models.chat import ChatMessage, ChatRequest, ChatResponse
from grammarfix.services.correction_client import CorrectionClient

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a grammar and spelling correction assistant.\n"
    "Your task is to correct grammar, spelling, and improve clarity while preserving "
    "the original meaning and style.\n"
    "Return ONLY the corrected text, without any explanations, prefixes, or additional commentary.\n"
    "If the text is already correct, return it unchanged."
)


def build_chat_request(
    text: str,
    model: str,
    temperature: float = 0.3,
    max_tokens: int = 1000,
) -> ChatRequest:
    """Build the chat request: fixed system instruction, then the user text verbatim."""
    return ChatRequest(
        model=model,
        messages=[
            ChatMessage(role="system", content=SYSTEM_PROMPT),
            ChatMessage(role="user", content=text),
        ],
        temperature=temperature,
        max_tokens=max_tokens,
    )


def extract_error_message(status_code: int, body: str) -> str:
    """Pull the structured error message out of a failed response body.

    Falls back to ``HTTP <status>: <body>`` when the body is not a
    chat-completions error payload.
    """
    try:
        parsed = ChatResponse.model_validate_json(body)
    except ValidationError:
        parsed = None

    if parsed is not None and parsed.error is not None and parsed.error.message:
        return parsed.error.message
    return f"HTTP {status_code}: {body}"


class OpenAIService(CorrectionClient):
    """Corrects text through a single POST to the chat-completions endpoint."""

    def __init__(
        self,
        api_key: str,
        *,
        api_url: str | None = None,
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        connect_timeout: float | None = None,
        read_timeout: float | None = None,
    ) -> None:
        self.api_key = api_key
        self.api_url = api_url or settings.openai_api_url
        self.model = model or settings.openai_model
        self.temperature = settings.grammar_temperature if temperature is None else temperature
        self.max_tokens = settings.grammar_max_tokens if max_tokens is None else max_tokens
        self.timeout = httpx.Timeout(
            settings.grammar_read_timeout_seconds if read_timeout is None else read_timeout,
            connect=settings.grammar_connect_timeout_seconds if connect_timeout is None else connect_timeout,
        )

    async def correct_text(self, text: str) -> str | None:
        if not text.strip():
            return text

        request = build_chat_request(text, self.model, self.temperature, self.max_tokens)
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

        logger.info("POST %s  model=%s  text_len=%d", self.api_url, self.model, len(text))

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.api_url,
                    headers=headers,
                    json=request.model_dump(),
                )
        except httpx.RequestError as exc:
            detail = str(exc) or type(exc).__name__
            logger.error("OpenAI API network error: %s", detail)
            raise NetworkError(f"Network error: {detail}") from exc

        body = response.text
        logger.info("OpenAI response status: %d", response.status_code)

        if response.status_code != 200:
            message = extract_error_message(response.status_code, body)
            logger.error("OpenAI API error: %s", message)
            raise CorrectionApiError(message, status_code=response.status_code)

        try:
            parsed = ChatResponse.model_validate_json(body)
        except ValidationError as exc:
            logger.error("OpenAI API returned an unparseable body: %s", body[:500])
            raise CorrectionApiError(f"Malformed API response: {exc.error_count()} error(s)") from exc

        corrected = parsed.first_content()
        if not corrected:
            logger.error("OpenAI API returned success but no corrected text in response: %s", body[:500])
            raise EmptyResponseError("No corrected text in API response")

        return corrected
