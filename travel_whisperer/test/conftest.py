import pytest
from fastapi.testclient import TestClient

from travel_whisperer.api.main import app
from travel_whisperer.api.route import get_inference_client
from travel_whisperer.utils.config import Settings
from travel_whisperer.utils.openai_client import ChatCompletionClient


@pytest.fixture
def settings():
    return Settings(api_key="test-key", model="google/gemini-2.5-flash")


@pytest.fixture
def api():
    """Returns a factory: api(sdk, api_key=...) -> TestClient wired to the fake SDK."""
    def _make(sdk, api_key="test-key"):
        cfg = Settings(api_key=api_key)
        app.dependency_overrides[get_inference_client] = lambda: ChatCompletionClient(cfg, sdk_client=sdk)
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
