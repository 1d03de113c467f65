"""Grammar fix endpoints used by the keyboard panel."""

import time
import uuid

from fastapi import APIRouter

from grammarfix.api.dependencies import GrammarFix
from grammarfix.models.correction import CorrectionResult, GrammarFixRequest
from grammarfix.models.envelope import success_response

router = APIRouter()


def _dump(result: CorrectionResult | None) -> dict | None:
    return result.model_dump() if result is not None else None


@router.get("/status")
async def grammar_status(feature: GrammarFix) -> dict:
    """Whether a correction provider is configured."""
    return success_response({"available": feature.is_available})


@router.post("/correct")
async def correct_text(body: GrammarFixRequest, feature: GrammarFix) -> dict:
    """Request a correction and return the published result.

    Concurrent requests are not serialized, so the returned result is the
    latest one published when this request finished.
    """
    start = time.perf_counter()
    await feature.request_correction(body.text)
    elapsed_ms = round((time.perf_counter() - start) * 1000, 2)

    selection = body.selection
    return success_response(
        {
            "result": _dump(feature.correction_result.value),
            "selection": selection.model_dump() if selection is not None else None,
            "replace_selection": selection is not None and selection.is_valid,
        },
        request_id=str(uuid.uuid4()),
        processing_time_ms=elapsed_ms,
        available=feature.is_available,
    )


@router.get("/result")
async def get_result(feature: GrammarFix) -> dict:
    """Current published result, or null while none is available."""
    return success_response({"result": _dump(feature.correction_result.value)})


@router.delete("/result")
async def clear_result(feature: GrammarFix) -> dict:
    """Reset the published result, e.g. when the panel is dismissed."""
    feature.clear_result()
    return success_response({"result": None})
