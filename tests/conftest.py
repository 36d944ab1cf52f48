import os

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

# No external API keys for tests
os.environ["OPENAI_API_KEY"] = ""
os.environ["ANTHROPIC_API_KEY"] = ""
os.environ["LLM_PROVIDER"] = "auto"
os.environ["AUTH_VERIFY_URL"] = ""
os.environ.pop("SUMMARY_MODEL", None)
os.environ.pop("CORS_ALLOW_ORIGIN", None)

from app.main import app
from app.models.summary import GenerationResult, TokenVerification
from app.services.auth import get_token_verifier_factory
from app.services.llm import default_summary_model, get_llm_client_factory


class FakeVerifier:
    """Token verifier double that records every credential it is asked about."""

    def __init__(self, valid: bool = True, error: Exception | None = None):
        self.valid = valid
        self.error = error
        self.calls: list[str | None] = []
        self.credentials = None

    async def verify(self, credential):
        self.calls.append(credential)
        if self.error is not None:
            raise self.error
        return TokenVerification(valid=self.valid)

    def factory(self, credentials):
        self.credentials = credentials
        return self


class FakeGenerator:
    """Generation backend double returning canned text or raising."""

    def __init__(self, text: str = "## Health Overview\n- All good", error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls: list[tuple[str, str]] = []
        self.provider = "openai"

    def summary_model(self):
        return default_summary_model(self.provider)

    async def generate_text(self, prompt, model):
        self.calls.append((prompt, model))
        if self.error is not None:
            raise self.error
        return GenerationResult(text=self.text)


@pytest.fixture
def platform_env(monkeypatch):
    monkeypatch.setenv("PLATFORM_PROJECT_ID", "proj-test")
    monkeypatch.setenv("PLATFORM_SECRET_KEY", "secret-test")


@pytest.fixture
def verifier():
    return FakeVerifier()


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def override(verifier, generator):
    """Route the app's collaborators to the test doubles."""
    app.dependency_overrides[get_token_verifier_factory] = lambda: verifier.factory
    app.dependency_overrides[get_llm_client_factory] = lambda: lambda: generator
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client(platform_env, override):
    """Provide a synchronous TestClient for HTTP endpoint tests."""
    return TestClient(app)


@pytest_asyncio.fixture
async def async_client(platform_env, override):
    """Provide an async httpx client for async HTTP tests."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
