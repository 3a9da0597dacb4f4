import httpx
import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def client() -> TestClient:
    from strapi_articles.main import app

    return TestClient(app)


@pytest.fixture(autouse=True)
def _no_live_cms(request, monkeypatch):
    # Unit tests never reach a real CMS; tests that need HTTP install their own MockTransport.
    if request.node.get_closest_marker("integration"):
        yield
        return
    from strapi_articles.services import strapi_client

    def refuse(req: httpx.Request) -> httpx.Response:
        raise AssertionError(f"unexpected network call: {req.url}")

    monkeypatch.setattr(strapi_client, "_transport", httpx.MockTransport(refuse))
    yield
