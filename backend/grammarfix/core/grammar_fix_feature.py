"""Grammar fix feature: owns the correction engine and the published result.

One feature instance belongs to one editing session. Requests are not
queued: concurrent requests all run, and whichever finishes last decides the
published result. Closing the feature cancels in-flight requests and drops
any result that arrives afterwards.
"""

import asyncio
import logging

from grammarfix.config import Settings
from grammarfix.core.correction_engine import CorrectionEngine
from grammarfix.core.observable import ObservableValue
from grammarfix.models.correction import CorrectionResult

logger = logging.getLogger(__name__)

UNAVAILABLE_MESSAGE = "AI service not available. Please set the OPENAI_API_KEY environment variable."


class GrammarFixFeature:
    """Per-session coordinator for grammar fix requests."""

    def __init__(self, engine: CorrectionEngine | None) -> None:
        self._engine = engine
        self._result: ObservableValue[CorrectionResult | None] = ObservableValue(None)
        self._tasks: set[asyncio.Task] = set()
        self._closed = False

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "GrammarFixFeature":
        """Build the feature, unavailable when no engine can be created."""
        return cls(CorrectionEngine.create(settings))

    @property
    def is_available(self) -> bool:
        return self._engine is not None

    @property
    def correction_result(self) -> ObservableValue[CorrectionResult | None]:
        """Published result; None means no attempt yet, pending, or cleared."""
        return self._result

    async def request_correction(self, text: str) -> None:
        """Correct *text* and publish the outcome."""
        if self._closed:
            logger.debug("Correction requested on a closed feature, ignored")
            return

        if self._engine is None:
            self._result.publish(CorrectionResult.failed(text, UNAVAILABLE_MESSAGE))
            return

        result = await self._engine.get_correction(text)
        if self._closed:
            logger.debug("Dropping correction result that finished after close")
            return
        self._result.publish(result)

    def launch_correction(self, text: str) -> asyncio.Task:
        """Run ``request_correction`` in the background and return its task."""
        task = asyncio.create_task(self.request_correction(text))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def clear_result(self) -> None:
        self._result.publish(None)

    async def close(self) -> None:
        """Cancel in-flight requests and release observers."""
        if self._closed:
            return
        self._closed = True

        pending = list(self._tasks)
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
            logger.info("Cancelled %d in-flight correction request(s)", len(pending))

        self._result.close()
