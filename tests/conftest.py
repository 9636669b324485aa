"""Shared fixtures for resume_cli tests."""

import httpx
import pytest
from loguru import logger

from resume_cli.utils.config import ENV_OVERRIDES

SAMPLE_RESUME = (
    b'{\n  "version": 1,\n  "basics": {"fullName": "Philip J. Fry", "email": "fry@planetexpress.com"},\n'
    b'  "skills": ["Delivery", "Time travel"]\n}\n'
)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch):
    """Keep developer settings out of tests and drop loguru sinks after each test."""
    for env_name in [*ENV_OVERRIDES, "RESUME_CLI_CONFIG"]:
        monkeypatch.delenv(env_name, raising=False)
    yield
    logger.remove()


@pytest.fixture
def resume_file(tmp_path):
    path = tmp_path / "resume.json"
    path.write_bytes(SAMPLE_RESUME)
    return path


@pytest.fixture
def jd_file(tmp_path):
    path = tmp_path / "jd.txt"
    path.write_text("Delivery Boy at Planet Express.\nMust enjoy space travel.\n", encoding="utf-8")
    return path


class RecordingService:
    """httpx.MockTransport handler that records requests and replays a canned response."""

    def __init__(self, status_code: int = 200, body: bytes = b'{"jobId":"abc"}', error=None):
        self.status_code = status_code
        self.body = body
        self.error = error
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def make_service():
    """Factory for services with a specific status, body or transport error."""
    return RecordingService


@pytest.fixture
def service():
    return RecordingService()
