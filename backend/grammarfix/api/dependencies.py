"""API dependencies for the session-scoped grammar fix feature."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from grammarfix.core.grammar_fix_feature import GrammarFixFeature


def get_grammar_fix(request: Request) -> GrammarFixFeature:
    """Return the feature created by the application lifespan."""
    feature = getattr(request.app.state, "grammar_fix", None)
    if feature is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Grammar fix session is not running",
        )
    return feature


GrammarFix = Annotated[GrammarFixFeature, Depends(get_grammar_fix)]
