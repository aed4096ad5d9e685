"""API test fixtures - per-test app + in-process HTTP client.

Invariants:
    - Every test gets its own app built by create_app, logging into tmp_path
    - Requests go through the full ASGI stack (middleware, error handlers)

Design Decisions:
    - httpx ASGITransport: no network, no server process, lifespan not run
"""

import json

import pytest
from httpx import ASGITransport, AsyncClient

from calculator.config import Settings
from calculator.infrastructure.observability import shutdown_logging
from calculator.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(log_dir=tmp_path / "logs", log_level="INFO", log_format="text")


@pytest.fixture
def test_app(settings):
    app = create_app(settings)
    yield app
    shutdown_logging(app.state.service_logger)


@pytest.fixture
async def client(test_app):
    async with AsyncClient(
        transport=ASGITransport(app=test_app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def read_log(settings, test_app):
    """Return the parsed JSON lines of the combined or error log."""

    def _read(which: str = "combined") -> list[dict]:
        for handler in test_app.state.service_logger.logger.handlers:
            handler.flush()
        path = settings.combined_log_path if which == "combined" else settings.error_log_path
        if not path.exists():
            return []
        return [json.loads(line) for line in path.read_text().splitlines() if line]

    return _read