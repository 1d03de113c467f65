"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from grammarfix.api.routes import grammar
from grammarfix.config import settings
from grammarfix.core.grammar_fix_feature import GrammarFixFeature

logger = logging.getLogger(__name__)

# Configure logging format based on dev_mode
if not settings.dev_mode:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='{"time":"%(asctime)s","level":"%(levelname)s","name":"%(name)s","message":"%(message)s"}',
    )
else:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """One grammar fix session per application run."""
    feature = GrammarFixFeature.from_settings(settings)
    app.state.grammar_fix = feature
    logger.info("Grammar fix session started (available=%s)", feature.is_available)
    yield
    await feature.close()
    app.state.grammar_fix = None
    logger.info("Grammar fix session closed")


app = FastAPI(
    title="Grammar Fix API",
    description="LLM-backed grammar and spelling correction for the keyboard panel",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(grammar.router, prefix="/api/v1/grammar", tags=["grammar"])


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "healthy"}
