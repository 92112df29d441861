"""Shared fixtures - mocked OpenAlex transport, instant retries."""

import httpx
import pytest
from tenacity import wait_none

from app.container import container
from app.services.prediction import PredictionService
from openalex_client import WorksClient
from openalex_client.base import BaseClient

SEARCH_PREFIX = "default.search:"


def _works_transport(counts: dict[str, int], status_code: int = 200, requests: list | None = None):
    """MockTransport answering /works searches from a {query: count} map."""

    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        if status_code != 200:
            return httpx.Response(status_code, json={"error": "unavailable"})
        query = request.url.params["filter"].removeprefix(SEARCH_PREFIX)
        return httpx.Response(200, json={"meta": {"count": counts[query], "per_page": 1}, "results": []})

    return httpx.MockTransport(handler)


@pytest.fixture
def works_transport():
    """Factory for a mocked /works endpoint."""
    return _works_transport


@pytest.fixture(autouse=True)
def _no_retry_wait(monkeypatch):
    """Retry immediately so failing lookups don't back off in tests."""
    monkeypatch.setattr(BaseClient._get.retry, "wait", wait_none())


@pytest.fixture
def mock_openalex(monkeypatch):
    """Point the container's service at a mocked transport."""

    def install(transport: httpx.MockTransport) -> None:
        container.init()
        service = PredictionService(client_factory=lambda: WorksClient(transport=transport))
        monkeypatch.setattr(container, "prediction", service)

    return install
