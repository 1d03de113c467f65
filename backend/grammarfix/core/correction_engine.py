"""Correction engine: turns client calls into CorrectionResult values."""

import logging

from grammarfix.config import Settings, settings as default_settings
from grammarfix.models.correction import CorrectionResult
from grammarfix.services.correction_client import CorrectionClient
from grammarfix.services.openai_service import OpenAIService

logger = logging.getLogger(__name__)

NULL_RESPONSE_MESSAGE = "AI service returned null response"
UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"


class CorrectionEngine:
    """Coordinates grammar and spelling correction through a CorrectionClient."""

    def __init__(self, client: CorrectionClient) -> None:
        self.client = client

    async def get_correction(self, text: str) -> CorrectionResult:
        """Correct *text*, reporting every failure as a failed result.

        Only cancellation propagates; any other exception raised by the
        client becomes ``CorrectionResult.failed``.
        """
        if not text.strip():
            return CorrectionResult.succeeded(text, text)

        try:
            corrected = await self.client.correct_text(text)
        except Exception as exc:
            message = str(exc) or UNKNOWN_ERROR_MESSAGE
            logger.warning("Correction failed (%s): %s", type(exc).__name__, message)
            return CorrectionResult.failed(text, message)

        if corrected is None:
            logger.warning("Correction client returned no text")
            return CorrectionResult.failed(text, NULL_RESPONSE_MESSAGE)

        return CorrectionResult.succeeded(text, corrected)

    @classmethod
    def create(cls, settings: Settings | None = None) -> "CorrectionEngine | None":
        """Build an engine backed by OpenAI, or None when no API key is configured."""
        cfg = settings or default_settings
        if not cfg.has_api_key:
            logger.info("OPENAI_API_KEY not set, grammar fix disabled")
            return None

        service = OpenAIService(
            cfg.openai_api_key,
            api_url=cfg.openai_api_url,
            model=cfg.openai_model,
            temperature=cfg.grammar_temperature,
            max_tokens=cfg.grammar_max_tokens,
            connect_timeout=cfg.grammar_connect_timeout_seconds,
            read_timeout=cfg.grammar_read_timeout_seconds,
        )
        return cls(service)
