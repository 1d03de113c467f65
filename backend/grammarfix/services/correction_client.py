"""Contract for providers that correct grammar and spelling."""

from abc import ABC, abstractmethod


class CorrectionClient(ABC):
    """A provider that returns a corrected version of some text."""

    @abstractmethod
    async def correct_text(self, text: str) -> str | None:
        """Correct grammar and spelling in *text*.

        Blank text is returned unchanged without contacting the provider.
        Failures are raised as ``CorrectionError`` subclasses.
        """
