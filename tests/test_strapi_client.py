import httpx
import pytest

from strapi_articles.services import strapi_client


def _install(monkeypatch, handler):
    monkeypatch.setattr(strapi_client, "_transport", httpx.MockTransport(handler))


def test_fetch_articles_ok(monkeypatch):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = request.url
        seen["auth"] = request.headers.get("Authorization")
        return httpx.Response(
            200,
            json={
                "data": [{"id": 1, "title": "A"}, {"id": 2, "title": "B"}],
                "meta": {"pagination": {"page": 2, "pageSize": 2, "pageCount": 5, "total": 9}},
            },
        )

    _install(monkeypatch, handler)
    result = strapi_client.fetch_articles(2, 2, api_url="https://cms.test/api/articles", token="tok")

    assert result == {"items": [{"id": 1, "title": "A"}, {"id": 2, "title": "B"}], "total": 9, "page_count": 5}
    assert seen["url"].params["pagination[page]"] == "2"
    assert seen["url"].params["pagination[pageSize]"] == "2"
    assert seen["url"].params["populate"] == "*"
    assert seen["auth"] == "Bearer tok"


def test_fetch_articles_empty_page_is_valid(monkeypatch):
    _install(
        monkeypatch,
        lambda request: httpx.Response(200, json={"data": [], "meta": {"pagination": {"total": 0, "pageCount": 0}}}),
    )
    result = strapi_client.fetch_articles(api_url="https://cms.test/api/articles")
    assert result == {"items": [], "total": 0, "page_count": 0}


def test_fetch_articles_http_error(monkeypatch):
    _install(monkeypatch, lambda request: httpx.Response(404, text="Not Found"))
    with pytest.raises(RuntimeError) as exc:
        strapi_client.fetch_articles(api_url="https://cms.test/api/articles")
    assert "HTTP 404" in str(exc.value)
    assert "Not Found" in str(exc.value)


def test_fetch_articles_unexpected_shape(monkeypatch, caplog):
    _install(monkeypatch, lambda request: httpx.Response(200, json={"data": []}))
    with pytest.raises(ValueError):
        strapi_client.fetch_articles(api_url="https://cms.test/api/articles")
    assert "Unexpected data structure" in caplog.text
