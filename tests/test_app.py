from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Iterator

import httpx
import pytest
from fastapi.testclient import TestClient

repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from text_bridge.config.bridge_config import BridgeConfig
from text_bridge.main import app
from text_bridge.services.bridge_service import RequestBridge, get_request_bridge


def _translate(request: httpx.Request) -> httpx.Response:
    sentence = json.loads(request.content)["body"]
    return httpx.Response(200, content=json.dumps({"translated": sentence.upper()}).encode())


def _server_error(request: httpx.Request) -> httpx.Response:
    return httpx.Response(500, text="upstream exploded")


def _refused(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


@pytest.fixture
def use_endpoint() -> Iterator:
    clients: list[httpx.AsyncClient] = []

    def install(handler) -> None:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        bridge = RequestBridge(BridgeConfig(endpoint_url="http://bridge.test/echo"), client=client)
        app.dependency_overrides[get_request_bridge] = lambda: bridge

    yield install
    app.dependency_overrides.clear()
    for client in clients:
        asyncio.run(client.aclose())


def test_health() -> None:
    with TestClient(app) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_submit_returns_endpoint_body(use_endpoint) -> None:
    use_endpoint(_translate)

    with TestClient(app) as client:
        response = client.post("/submit", json={"text": "hi"})

    assert response.status_code == 200
    assert response.json() == {"status": "success", "text": '{"translated": "HI"}'}


def test_submit_reports_status_failure_as_bad_gateway(use_endpoint) -> None:
    use_endpoint(_server_error)

    with TestClient(app) as client:
        response = client.post("/submit", json={"text": "hi"})

    assert response.status_code == 502
    body = response.json()
    assert body["status"] == "failure"
    assert body["error_type"] == "status"
    assert body["status_code"] == 500
    assert "upstream exploded" not in body["reason"]


def test_submit_reports_transport_failure(use_endpoint) -> None:
    use_endpoint(_refused)

    with TestClient(app) as client:
        response = client.post("/submit", json={"text": "hi"})

    assert response.status_code == 502
    assert response.json()["error_type"] == "transport"


@pytest.mark.parametrize("text", ["", "   \n"])
def test_blank_submission_is_rejected(use_endpoint, text: str) -> None:
    use_endpoint(_translate)

    with TestClient(app) as client:
        response = client.post("/submit", json={"text": text})

    assert response.status_code == 422
