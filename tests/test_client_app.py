from types import SimpleNamespace

import httpx
import pytest
from fastapi.testclient import TestClient

from client.config.config import ClientSettings
from client.main import create_app
from client.pages import ssr
from client.routes.pages import get_http_client
from helpers import run


@pytest.fixture
def calls():
    return []


@pytest.fixture
def frontend(client_settings, calls):
    def handler(request):
        calls.append(str(request.url))
        return httpx.Response(200, text="Hello from the API")

    async def override():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            yield http

    app = create_app(client_settings)
    app.dependency_overrides[get_http_client] = override
    with TestClient(app) as client:
        yield client


def test_interactive_route(frontend, calls):
    r = frontend.get("/")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert '<div class="p-6">ok</div>' in r.text
    assert '<pre id="data"></pre>' in r.text
    # the browser performs the fetch
    assert calls == []


def test_ssr_route(frontend, calls):
    r = frontend.get("/ssr")
    assert r.status_code == 200
    assert "Hello from the API" in r.text
    assert "development" in r.text
    assert calls == ["http://express:8080"]


def test_ssr_route_fetches_on_every_render(frontend, calls):
    frontend.get("/ssr")
    frontend.get("/ssr")
    assert len(calls) == 2


def test_ssr_route_api_unreachable(client_settings):
    def handler(request):
        raise httpx.ConnectError("Connection refused", request=request)

    async def override():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            yield http

    app = create_app(client_settings)
    app.dependency_overrides[get_http_client] = override
    with TestClient(app) as client:
        r = client.get("/ssr")
    assert r.status_code == 200
    assert ssr.CATCH_MESSAGE in r.text


def test_health(frontend):
    assert frontend.get("/health").json() == {"status": "ok"}


def test_ssr_route_invalid_api_url():
    settings = ClientSettings(api_internal_url="http://express:80a80")
    with TestClient(create_app(settings)) as client:
        r = client.get("/ssr")
    assert r.status_code == 200
    assert ssr.CATCH_MESSAGE in r.text


async def resolve_http_client(settings):
    request = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(settings=settings)))
    clients = get_http_client(request)
    http = await clients.__anext__()
    timeout = http.timeout
    await clients.aclose()
    assert http.is_closed
    return timeout


def test_http_client_without_timeout():
    timeout = run(resolve_http_client(ClientSettings()))
    assert timeout == httpx.Timeout(None)
    assert timeout.connect is None
    assert timeout.read is None


def test_http_client_with_configured_timeout():
    timeout = run(resolve_http_client(ClientSettings(api_timeout=2.5)))
    assert timeout == httpx.Timeout(2.5)
    assert timeout.read == 2.5
