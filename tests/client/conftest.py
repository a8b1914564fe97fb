"""Client test fixtures — a TaskFlowClient wired to the in-process app.

Invariants:
    - Requests go through ASGITransport to the same app and test DB as http_client
    - request_log records every request the client sends (method, path)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from taskflow.client.api_client import TaskFlowClient
from taskflow.main import app


@pytest.fixture
def request_log():
    return []


@pytest.fixture
async def api(http_client, request_log):
    """TaskFlowClient over the ASGI app; http_client points db_manager at the test DB."""
    async def record(request):
        request_log.append((request.method, request.url.path))

    http = AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        event_hooks={"request": [record]},
    )
    async with TaskFlowClient(http) as client:
        yield client
