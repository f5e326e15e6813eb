"""
Test configuration and fixtures.
"""
import httpx
import pytest

from fishing_companion.config import settings
from fishing_companion.main import app
from fishing_companion.storage import MemoryStore, get_store
from fishing_companion import weather


@pytest.fixture
def store():
    """Fresh in-memory store for each test."""
    return MemoryStore()


@pytest.fixture(autouse=True)
def override_store(store):
    """
    Route every API request to the test's in-memory store.
    This runs automatically for every test function.
    """
    app.dependency_overrides[get_store] = lambda: store
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def upstream(monkeypatch):
    """
    Replace outbound HTTP with a handler: ``upstream(lambda request: httpx.Response(...))``.
    Also configures a dummy OpenWeatherMap key.
    """
    monkeypatch.setattr(settings, "OPENWEATHER_API_KEY", "test-key")
    seen = []

    def install(handler):
        def record(request):
            seen.append(request)
            return handler(request)

        transport = httpx.MockTransport(record)
        monkeypatch.setattr(weather, "_client", lambda: httpx.AsyncClient(transport=transport))
        return seen

    return install
