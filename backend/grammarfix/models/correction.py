"""Correction result and request models."""

from pydantic import BaseModel, ConfigDict, model_validator


class CorrectionResult(BaseModel):
    """Outcome of a single grammar correction attempt.

    Exactly one of ``corrected_text`` / ``error_message`` is set, selected by
    ``success``. Instances are frozen snapshots: a new attempt produces a new
    result rather than mutating the previous one.
    """

    model_config = ConfigDict(frozen=True)

    original_text: str
    corrected_text: str | None = None
    success: bool
    error_message: str | None = None

    @model_validator(mode="after")
    def _check_outcome(self) -> "CorrectionResult":
        if self.success:
            if self.corrected_text is None or self.error_message is not None:
                raise ValueError("successful result needs corrected_text and no error_message")
        elif self.corrected_text is not None or self.error_message is None:
            raise ValueError("failed result needs error_message and no corrected_text")
        return self

    @classmethod
    def succeeded(cls, original_text: str, corrected_text: str) -> "CorrectionResult":
        return cls(original_text=original_text, corrected_text=corrected_text, success=True)

    @classmethod
    def failed(cls, original_text: str, error_message: str) -> "CorrectionResult":
        return cls(original_text=original_text, success=False, error_message=error_message)


class SelectionRange(BaseModel):
    """Editor selection the corrected text should replace."""

    start: int
    end: int

    @property
    def is_valid(self) -> bool:
        return 0 <= self.start <= self.end


class GrammarFixRequest(BaseModel):
    """Request body for a grammar fix."""

    text: str
    selection: SelectionRange | None = None
