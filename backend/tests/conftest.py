"""Shared test fixtures for the grammar fix backend tests."""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from grammarfix.config import Settings
from grammarfix.core.correction_engine import CorrectionEngine
from grammarfix.core.grammar_fix_feature import GrammarFixFeature
from grammarfix.services.correction_client import CorrectionClient


class FakeCorrectionClient(CorrectionClient):
    """In-memory client that returns a canned answer or raises a canned error."""

    def __init__(self, result: str | None = None, error: BaseException | None = None):
        self.result = result
        self.error = error
        self.calls: list[str] = []

    async def correct_text(self, text: str) -> str | None:
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return self.result


class BlockingCorrectionClient(CorrectionClient):
    """Client that waits on an event before answering, used for ordering tests."""

    def __init__(self) -> None:
        self.release: dict[str, asyncio.Event] = {}
        self.started: dict[str, asyncio.Event] = {}

    def gate(self, text: str) -> asyncio.Event:
        self.started.setdefault(text, asyncio.Event())
        return self.release.setdefault(text, asyncio.Event())

    async def correct_text(self, text: str) -> str | None:
        release = self.gate(text)
        self.started[text].set()
        await release.wait()
        return text.upper()


@pytest.fixture
def fake_client() -> FakeCorrectionClient:
    return FakeCorrectionClient(result="The cat sat.")


@pytest.fixture
def engine(fake_client: FakeCorrectionClient) -> CorrectionEngine:
    return CorrectionEngine(fake_client)


@pytest_asyncio.fixture
async def feature(engine: CorrectionEngine) -> GrammarFixFeature:
    feature = GrammarFixFeature(engine)
    yield feature
    await feature.close()


@pytest_asyncio.fixture
async def unavailable_feature() -> GrammarFixFeature:
    feature = GrammarFixFeature(None)
    yield feature
    await feature.close()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        _env_file=None,
        openai_api_key="sk-test",
        openai_api_url="https://test.api/v1/chat/completions",
        openai_model="test-model",
    )


@pytest.fixture
def mock_http(monkeypatch):
    """Patch ``httpx.AsyncClient`` inside the OpenAI service.

    Returns a helper: ``respond(status, body)`` sets the canned response and
    ``client`` is the mock whose ``post`` can be inspected or given a
    ``side_effect``.
    """
    mock_client = AsyncMock()
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=None)
    mock_client_cls = MagicMock(return_value=mock_client)
    monkeypatch.setattr("grammarfix.services.openai_service.httpx.AsyncClient", mock_client_cls)

    class _Http:
        client = mock_client
        client_cls = mock_client_cls

        @staticmethod
        def respond(status_code: int, body: object) -> MagicMock:
            response = MagicMock()
            response.status_code = status_code
            response.text = body if isinstance(body, str) else json.dumps(body)
            mock_client.post.return_value = response
            return response

    return _Http


@pytest_asyncio.fixture
async def api_client(feature: GrammarFixFeature):
    """HTTP client against the FastAPI app with a test-owned feature session."""
    from grammarfix.main import app

    app.state.grammar_fix = feature
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.state.grammar_fix = None
